# utils package

"""
Utilities module for common functionality.
"""

from .logging import setup_logging

__all__ = [
    'setup_logging'
]
