from .loader import load_settings
from .types import ConfigError, Settings

__all__ = ["load_settings", "Settings", "ConfigError"]
