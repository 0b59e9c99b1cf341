"""
Configuration package for the hostel leave management backend.

Contains environment settings and logging configuration.
"""

from hostel_leave.config.settings import Settings, get_settings
from hostel_leave.config.logging import get_logger, setup_logging

__all__ = ['Settings', 'get_settings', 'get_logger', 'setup_logging']
