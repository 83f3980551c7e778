from .errors import ConfigurationError
from .logger import setup_logger, set_log_level
from .urls import STOREFRONT_URLS

__all__ = ["ConfigurationError", "setup_logger", "set_log_level", "STOREFRONT_URLS"]
