from .settings import Settings
from .sources import ConfigError, ProductSource, SourceRegistry, load_sources

__all__ = ["Settings", "ConfigError", "ProductSource", "SourceRegistry", "load_sources"]
