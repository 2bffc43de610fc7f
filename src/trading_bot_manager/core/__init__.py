"""
Core module of the trading bot instance manager.

Exports:
- config: configuration loading and validation
- models: instance, container and configuration models
"""

from .config import ConfigManager

__all__ = [
    "ConfigManager",
]
