"""
Disjoint-set partition of the integer range 1..N.

Main entry point: Partition
"""

from .errors import InvalidElement
from .union_find import Element, Partition

__all__ = ["Element", "InvalidElement", "Partition"]
