"""
Target-specific code generators.

This module contains generators for each supported output target.
"""

from .js import ViewConfigGenerator, create_view_config_generator

__all__ = ["ViewConfigGenerator", "create_view_config_generator"]
