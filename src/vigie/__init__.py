"""
Vigie - Multi-chain USDC metrics service.

Aggregates supply, transfers, wallet counts and peg stability for USDC
across five EVM networks from a single token-data API.
"""

__version__ = "0.1.0"
