"""Error hierarchy for selector building and JSON decoding."""
from __future__ import annotations


class SelectorError(Exception):
    """Base error for all selector builder failures."""

    def __init__(self, message: str, *, part: str = "") -> None:
        super().__init__(message)
        self.part = part


class OrderViolationError(SelectorError):
    """A part was added after a higher-ranked part on the same selector."""

    MESSAGE = (
        "selector parts must appear in order: element, id, class, attribute, "
        "pseudo-class, pseudo-element"
    )

    def __init__(self, part: str = "") -> None:
        super().__init__(self.MESSAGE, part=part)


class DuplicateSingletonError(SelectorError):
    """An element, id or pseudo-element was set a second time."""

    MESSAGE = "element, id, and pseudo-element may occur at most once"

    def __init__(self, part: str = "") -> None:
        super().__init__(self.MESSAGE, part=part)


class InvalidCombinatorError(SelectorError):
    """A combinator outside ' ', '+', '~', '>' was used in strict mode."""

    def __init__(self, combinator: str) -> None:
        super().__init__(
            f"invalid combinator {combinator!r}: expected one of ' ', '+', '~', '>'"
        )
        self.combinator = combinator


class CyclicSelectorError(SelectorError):
    """A combine would make a selector part of its own right-hand subtree."""

    MESSAGE = "selector cannot be combined with a subtree that contains it"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class FrozenSelectorError(SelectorError):
    """A selector was modified after it had been rendered."""

    MESSAGE = "selector is frozen after stringify() and cannot be modified"

    def __init__(self, part: str = "") -> None:
        super().__init__(self.MESSAGE, part=part)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class DecodeError(ValueError):
    """JSON text could not be decoded into the requested type."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause
