"""Exceptions raised by windows and elements.

Each error also derives from the builtin it refines, so callers can
catch either the specific class or the familiar builtin.
"""


class TermwinError(Exception):
    """Base class for all termwin errors."""


class Unattached(TermwinError, RuntimeError):
    """An element was rendered before being added to a window."""

    def __init__(self, element: object) -> None:
        super().__init__(f"{type(element).__name__} is not attached to a window")
        self.element = element


class DuplicateElement(TermwinError, ValueError):
    """The element is already part of the window."""


class UnknownReference(TermwinError, LookupError):
    """A referenced element does not belong to the window."""


class InvalidChoices(TermwinError, ValueError):
    """A Switch was built with no choices or an out-of-range index."""


class InputOverflow(TermwinError, IndexError):
    """Input content would no longer fit the surface width."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Input of {length} characters exceeds the {limit}-column surface")
        self.length = length
        self.limit = limit
