from __future__ import annotations

"""Exception types raised by the colorharmony engine.

Every error derives from :class:`PaletteError`. The concrete classes also
inherit from the builtin exception a caller would naturally catch
(``ValueError`` for bad input, ``RuntimeError`` for an exhausted search).
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from .color_types import Color


class PaletteError(Exception):
    """Base class for all colorharmony errors."""


class InvalidFormatError(PaletteError, ValueError):
    """A color string could not be parsed."""


class DegenerateRequestError(PaletteError, ValueError):
    """A request that can never be satisfied (e.g. a non-positive count)."""


class DistinctnessUnsatisfiableError(PaletteError, RuntimeError):
    """The distinctness loop ran out of attempts before reaching ``requested``.

    Attributes
    ----------
    partial:
        The largest mutually distinct subset that was found, in palette order.
    requested:
        Number of colors the caller asked for.
    attempts:
        Number of refill candidates that were drawn before giving up.
    """

    def __init__(self, partial: List["Color"], requested: int, attempts: int) -> None:
        self.partial = list(partial)
        self.requested = requested
        self.attempts = attempts
        super().__init__(
            f"found only {len(self.partial)} of {requested} distinct colors "
            f"after {attempts} attempts"
        )


__all__ = [
    "PaletteError",
    "InvalidFormatError",
    "DegenerateRequestError",
    "DistinctnessUnsatisfiableError",
]
