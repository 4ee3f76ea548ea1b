"""Application layer unit tests."""
