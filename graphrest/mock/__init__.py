"""In-memory stand-ins for offline use and tests."""
