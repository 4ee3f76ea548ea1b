"""
Infrastructure layer for Vigie.
"""
