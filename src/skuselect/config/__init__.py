"""Config loading and schema."""

from .loader import ConfigLoadError, load_config, load_document
from .schema import SelectorConfig

__all__ = ["ConfigLoadError", "SelectorConfig", "load_config", "load_document"]
