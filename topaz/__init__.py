"""Topaz editor shell backend."""

__version__ = "0.1.0"
