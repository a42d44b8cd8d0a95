"""HTTP application and infrastructure routes."""
