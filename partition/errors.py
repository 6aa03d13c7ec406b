"""
Errors raised by the partition package.
"""

from .constants import INVALID_ELEMENT_MESSAGE


class InvalidElement(ValueError):
    """Raised when an element id falls outside [1, size]."""

    def __init__(self, element: int, size: int) -> None:
        self.element = element
        self.size = size
        super().__init__(
            f"{INVALID_ELEMENT_MESSAGE}: {element} is not in [1, {size}]"
        )
