"""Exceptions raised by the bflab engine.

All of them are local precondition violations detected at a public entry
point. They derive from ValueError so callers catching ValueError keep
working.
"""
from __future__ import annotations


class BFLabError(ValueError):
    """Base class for every bflab precondition failure."""


class InvalidLength(BFLabError):
    """A length is zero, too short, or not a power of two where one is required."""


class LengthMismatch(BFLabError):
    """Two operands that must have the same length do not."""


class InvalidArgument(BFLabError):
    """An argument is out of range (negative value, bad radix, wrong width...)."""
