"""
Configuration management for gen-kit.

Provides the GenConfig defaults object and environment-based loading,
replacing scattered defaults with a single configuration object.
"""

from .gen_config import GenConfig, get_config, reset_config

__all__ = ["GenConfig", "get_config", "reset_config"]
