"""Email adapter."""
