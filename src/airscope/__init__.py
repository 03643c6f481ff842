"""
AirScope - Air quality lookup for Indian localities

Resolves place names and coordinates into air-quality readings with a
cache-first retrieval path that degrades to cached or synthetic data when
the upstream provider is unavailable.
"""

__version__ = "0.1.0"
__author__ = "AirScope Team"
