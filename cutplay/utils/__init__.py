"""
cutplay Utilities Module

Utility functions and helpers:
- logger: Logging configuration
"""
from .logger import logger, get_logger

__all__ = ['logger', 'get_logger']
