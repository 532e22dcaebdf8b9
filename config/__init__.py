"""Configuration package for the chunk worker."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
