# services/__init__.py
"""Services package for the profit calculator: settings and logging."""

from . import logging_config
from . import settings

__all__ = ['logging_config', 'settings']
