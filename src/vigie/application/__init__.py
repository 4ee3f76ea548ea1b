"""
Application layer for Vigie.
"""
