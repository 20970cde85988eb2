"""Lenient parsing of raw form values."""
