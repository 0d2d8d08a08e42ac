"""
Parsing Context
===============

Collects parse-time diagnostics for an expression tree.

Design:
- Errors are recorded, not raised: parse() returns None on failure
- Child contexts share the parent's error list, with a longer key path
- Carries the Diagnostics handed to the nodes it builds
"""

from dataclasses import dataclass
from typing import List, Optional

from .diagnostics import Diagnostics


@dataclass(frozen=True)
class ParsingError:
    """
    One parse diagnostic.

    Attributes:
        message: Human-readable description
        key: Path of the offending value ("" for the root, "[1]" for a child)
    """
    message: str
    key: str = ""


class ParsingContext:
    """
    Error channel for expression parsing.

    Example:
        >>> ctx = ParsingContext()
        >>> Within.parse(["within"], ctx) is None
        True
        >>> ctx.errors[0].message
        "'within' expression requires exactly one argument, but found 0 instead."
    """

    def __init__(
        self,
        key: str = "",
        diagnostics: Optional[Diagnostics] = None,
        errors: Optional[List[ParsingError]] = None
    ):
        self.key = key
        self.diagnostics = diagnostics
        self._errors: List[ParsingError] = errors if errors is not None else []

    def error(self, message: str, key: Optional[str] = None) -> None:
        """Record a parse error at the current (or given) key."""
        self._errors.append(ParsingError(message=message, key=self.key if key is None else key))

    def concat(self, index: int) -> 'ParsingContext':
        """Child context for array member `index`, sharing this error list."""
        return ParsingContext(
            key=f"{self.key}[{index}]",
            diagnostics=self.diagnostics,
            errors=self._errors,
        )

    @property
    def errors(self) -> List[ParsingError]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"ParsingContext(key={self.key!r}, errors={len(self._errors)})"
