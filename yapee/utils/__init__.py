"""
Utility modules for the storefront
"""
from .config_loader import AppConfig, is_production, load_app_config

__all__ = [
    'AppConfig',
    'is_production',
    'load_app_config',
]
