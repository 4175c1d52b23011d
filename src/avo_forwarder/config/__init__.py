"""Configuration package — re-exports for convenience."""

from avo_forwarder.config.loader import ConfigLoader
from avo_forwarder.config.settings import Settings

__all__ = ["ConfigLoader", "Settings"]
