"""
Language-specific source emitters.

This module contains emitters for the supported target languages.
"""

from .java import JavaEmitter
from .python import PythonEmitter

__all__ = ["JavaEmitter", "PythonEmitter"]
