"""Config package - configuration loading and validation."""

from .loader import load_config, build_filter_context, get_config_path, DEFAULT_CONFIG

__all__ = ["load_config", "build_filter_context", "get_config_path", "DEFAULT_CONFIG"]
