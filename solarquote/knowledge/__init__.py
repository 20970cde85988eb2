"""Fixed sizing and price tables."""
