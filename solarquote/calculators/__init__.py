"""Load, sizing, pricing and projection calculators."""
