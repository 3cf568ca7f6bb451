"""
Java code emitter module.

Generates Java model classes annotated for the delivery runtime.
"""

from .emitter import JavaEmitter
from .naming import JAVA_RESERVED_WORDS
from .types import JavaType, JavaTypeMapper

__all__ = [
    "JavaEmitter",
    "JavaType",
    "JavaTypeMapper",
    "JAVA_RESERVED_WORDS",
]
