"""Infrastructure layer unit tests."""
