"""Exceptions raised by chromascheme.

Every error is a ``ValueError`` so callers that already guard color parsing
with ``except ValueError`` keep working.
"""
from __future__ import annotations
from typing import Iterable


class ChromaSchemeError(ValueError):
    """Base class for all chromascheme errors."""


class InvalidFormat(ChromaSchemeError):
    """Text could not be decoded as a hex color."""

    def __init__(self, text: object, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid hex color {text!r}: {reason}")


class InvalidCount(ChromaSchemeError):
    """A scale generator was asked for a non-positive number of colors."""

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(f"Color count must be a positive integer, got {count!r}")


class MissingOperand(ChromaSchemeError):
    """An operation needs a second color or a parameter that was not given."""


class NoOperationSelected(ChromaSchemeError):
    def __init__(self) -> None:
        super().__init__("No operation flag specified. Aborting.")


class ConflictingOperations(ChromaSchemeError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        super().__init__(
            f"Only one operation may be selected, got: {', '.join(self.names)}. Aborting."
        )
