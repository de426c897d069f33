"""Configuration adapters."""

from train_ics.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
