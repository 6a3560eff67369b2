"""
Vigie - read-only escrow and token reporting API.
"""

__version__ = "0.1.0"
