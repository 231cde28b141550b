"""Infrastructure adapters and wiring."""
