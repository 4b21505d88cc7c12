"""Client environment detection for application bootstrap."""
