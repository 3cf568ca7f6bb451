"""
Python-specific naming rules for generated modules and members.
"""

import keyword

# Setter parameters share the field name, so ``self`` is reserved as well
PYTHON_RESERVED_WORDS = frozenset(keyword.kwlist) | {"self"}


def module_name(codename: str) -> str:
    """Module file name (without extension) for a content type codename."""
    if codename in PYTHON_RESERVED_WORDS:
        return f"{codename}_"
    return codename
