"""
AirScope CLI Package

Typer-based command line interface over the retrieval gateway, the forecast
model and the government station records.
"""

from .typer_app import app

__all__ = ["app"]
