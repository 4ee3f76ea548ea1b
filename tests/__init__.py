"""Vigie test suite."""
