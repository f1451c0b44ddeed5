"""
Identifier cleanup and case conversion.

Entity and field names come from hand-written project documents, so they
may contain spaces, punctuation or target-language keywords.
"""

import re
from enum import Enum
from typing import Dict, Optional, Set

_SEPARATORS = re.compile(r"[-\s.]+")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


class NamingCase(Enum):
    """Supported identifier styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    KEBAB_CASE = "kebab"  # user-name
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


class NameSanitizer:
    """Turns arbitrary names into identifiers safe for one target language.

    The mapping is a pure function of its inputs (results are cached), so a
    field and the accessors derived from it always agree.
    """

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        builtin_types: Optional[Set[str]] = None,
    ):
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._cache: Dict[tuple, str] = {}

    def sanitize_name(
        self,
        name: str,
        target_case: NamingCase = NamingCase.CAMEL_CASE,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Clean ``name``, convert it to ``target_case`` and append
        ``suffix_on_conflict`` when the result is a keyword or builtin type.
        """
        key = (name, target_case, suffix_on_conflict)
        if key not in self._cache:
            converted = convert_case(self._clean_basic(name), target_case)
            if converted[:1].isdigit():
                converted = f"_{converted}"
            if self.is_reserved(converted) or converted in self.builtin_types:
                converted += suffix_on_conflict
            self._cache[key] = converted
        return self._cache[key]

    @staticmethod
    def _clean_basic(name: str) -> str:
        cleaned = _INVALID_CHARS.sub("_", name).strip("_-")
        return cleaned or "field"

    def is_reserved(self, name: str) -> bool:
        return name.lower() in self.reserved_words


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert ``name`` to the given style."""
    converters = {
        NamingCase.SNAKE_CASE: to_snake_case,
        NamingCase.CAMEL_CASE: to_camel_case,
        NamingCase.PASCAL_CASE: to_pascal_case,
        NamingCase.KEBAB_CASE: to_kebab_case,
        NamingCase.SCREAMING_SNAKE: lambda n: to_snake_case(n).upper(),
    }
    return converters[target_case](name)


def to_snake_case(name: str) -> str:
    name = _CASE_BOUNDARY.sub(r"\1_\2", _SEPARATORS.sub("_", name))
    return re.sub(r"_+", "_", name.lower()).strip("_")


def to_camel_case(name: str) -> str:
    head, *rest = to_snake_case(name).split("_")
    if not head:
        return name
    return head + "".join(part.capitalize() for part in rest)


def to_pascal_case(name: str) -> str:
    return "".join(part.capitalize() for part in to_snake_case(name).split("_") if part)


def to_kebab_case(name: str) -> str:
    return to_snake_case(name).replace("_", "-")


def capitalize_first(name: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return name[:1].upper() + name[1:]
