"""Airport search pipeline for Flight Alert."""
