"""Identity adapter."""
