"""Configuration adapters."""

from metro_stay.adapters.config.app_config import AppConfig
from metro_stay.adapters.config.line_configuration_loader import LineConfigurationLoader

__all__ = ["AppConfig", "LineConfigurationLoader"]
