"""Domain models and pure creation rules."""
