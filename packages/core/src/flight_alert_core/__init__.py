"""Flight Alert core package."""
