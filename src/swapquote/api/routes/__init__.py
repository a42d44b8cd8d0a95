"""Infrastructure routes."""
