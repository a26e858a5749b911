"""Configuration module"""

from .ga_config import OperatorConfig

__all__ = ['OperatorConfig']
