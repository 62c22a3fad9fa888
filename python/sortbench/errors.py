"""Exception types raised by sortbench."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sortbench._schema import Mismatch


class SortbenchError(Exception):
    """Base class for sortbench errors."""


class MismatchError(SortbenchError):
    """Raised on the first trial where candidate and reference disagree."""

    def __init__(self, mismatch: Mismatch):
        super().__init__(mismatch.describe())
        self.mismatch = mismatch


class SorterLoadError(SortbenchError):
    """Raised when a candidate sort reference cannot be resolved."""
