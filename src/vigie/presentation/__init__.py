"""
Presentation layer (HTTP API) for Vigie.
"""
