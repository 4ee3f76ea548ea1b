"""
Dependency injection for Vigie.
"""
