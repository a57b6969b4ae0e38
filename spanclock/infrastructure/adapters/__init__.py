"""Infrastructure adapters for spanclock."""
