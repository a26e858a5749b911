"""Utility modules for common functionality"""

from .random_utils import RandomSource, get_default_source, set_seed
from .logging_utils import setup_logger

__all__ = ['RandomSource', 'get_default_source', 'set_seed', 'setup_logger']
