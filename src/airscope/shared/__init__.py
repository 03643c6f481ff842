"""Shared constants, errors, logging helpers, protocols and models."""
