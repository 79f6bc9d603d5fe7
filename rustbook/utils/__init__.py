"""RustBook utilities."""

from .config import Settings, load_settings, configure_logging, DEFAULT_CATALOG_PATH

__all__ = ["Settings", "load_settings", "configure_logging", "DEFAULT_CATALOG_PATH"]
