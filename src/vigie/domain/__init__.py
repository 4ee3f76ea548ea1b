"""
Domain layer for Vigie.
"""
