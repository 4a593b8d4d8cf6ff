"""
Utilities package.
"""
from .config_loader import get_config, set_config_path, Config
from .logging_config import get_logger, setup_logging

__all__ = [
    'get_config', 'set_config_path', 'Config',
    'get_logger', 'setup_logging',
]
