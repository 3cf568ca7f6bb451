"""
Python code emitter module.

Generates Python model classes with element provenance mappings.
"""

from .emitter import PythonEmitter
from .naming import PYTHON_RESERVED_WORDS, module_name

__all__ = [
    "PythonEmitter",
    "PYTHON_RESERVED_WORDS",
    "module_name",
]
