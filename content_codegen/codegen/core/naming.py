"""
Naming utilities for generated code.

Converts the lower_snake_case codenames used by the content schema into the
identifier conventions of the target language.

Precondition for every conversion: the input is a non-empty ASCII
lower_snake_case identifier, ``[a-z0-9]+(_[a-z0-9]+)*``. Anything else
(empty strings, double or edge underscores, upper case, punctuation) raises
:class:`NamingError` instead of being guessed at.
"""

import re
from typing import Iterable, Optional, Set
from enum import Enum

from .errors import GeneratorError


SNAKE_CASE_PATTERN = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


class NamingError(GeneratorError, ValueError):
    """Raised when a codename does not satisfy the snake_case precondition."""

    pass


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # post_date
    CAMEL_CASE = "camel"  # postDate
    PASCAL_CASE = "pascal"  # PostDate


def _split_words(codename: str) -> list:
    if not isinstance(codename, str) or not SNAKE_CASE_PATTERN.match(codename):
        raise NamingError(f"Not a lower_snake_case identifier: {codename!r}")
    return codename.split("_")


def to_lower_camel(codename: str) -> str:
    """Convert ``preferred_sku`` to ``preferredSku``."""
    words = _split_words(codename)
    return words[0] + "".join(word.capitalize() for word in words[1:])


def to_upper_camel(codename: str) -> str:
    """Convert ``preferred_sku`` to ``PreferredSku``."""
    return "".join(word.capitalize() for word in _split_words(codename))


def to_snake(codename: str) -> str:
    """Validate and return a snake_case codename unchanged."""
    _split_words(codename)
    return codename


def convert_case(codename: str, target_case: NamingCase) -> str:
    """Convert a codename to the requested case style."""
    if target_case == NamingCase.CAMEL_CASE:
        return to_lower_camel(codename)
    elif target_case == NamingCase.PASCAL_CASE:
        return to_upper_camel(codename)
    return to_snake(codename)


class NameSanitizer:
    """Applies the configured naming convention and escapes reserved words.

    Unlike a sanitizer that tracks names already handed out, this one keeps
    no state: the same codename always produces the same identifier.
    """

    def __init__(
        self,
        member_case: NamingCase = NamingCase.CAMEL_CASE,
        type_case: NamingCase = NamingCase.PASCAL_CASE,
        reserved_words: Optional[Iterable[str]] = None,
        suffix_on_conflict: str = "_",
    ):
        """
        Initialize name sanitizer.

        Args:
            member_case: Case style for fields and accessor methods
            type_case: Case style for class names
            reserved_words: Identifiers that cannot be used verbatim
            suffix_on_conflict: Suffix appended to reserved identifiers
        """
        self.member_case = member_case
        self.type_case = type_case
        self.reserved_words: Set[str] = set(reserved_words or ())
        self.suffix_on_conflict = suffix_on_conflict

    def member_name(self, codename: str) -> str:
        """Field name for an element codename."""
        return self._escape(convert_case(codename, self.member_case))

    def type_name(self, codename: str) -> str:
        """Class name for a content type codename."""
        return self._escape(convert_case(codename, self.type_case))

    def accessor_name(self, prefix: str, field_name: str) -> str:
        """Accessor name derived from a field name alone.

        ``("get", "postDate")`` gives ``getPostDate`` under camel case and
        ``("get", "post_date")`` gives ``get_post_date`` under snake case.
        """
        if self.member_case == NamingCase.SNAKE_CASE:
            return f"{prefix}_{field_name}"
        return prefix + field_name[:1].upper() + field_name[1:]

    def _escape(self, name: str) -> str:
        if name in self.reserved_words:
            return f"{name}{self.suffix_on_conflict}"
        return name
