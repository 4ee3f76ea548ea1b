"""Domain layer unit tests."""
