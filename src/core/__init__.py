"""Transliteration core: domain models, services and configuration."""

__version__ = "1.0.0"
