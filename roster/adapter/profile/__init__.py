"""Profile adapter."""
