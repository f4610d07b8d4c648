"""Configuration module: exports Settings."""

from dogbreeds.config.settings import Settings

__all__ = ["Settings"]
