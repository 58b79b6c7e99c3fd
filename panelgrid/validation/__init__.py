"""Layout invariant validation."""

from .layout_check import LayoutChecker, LayoutViolation, validate_layout

__all__ = [
    "LayoutChecker",
    "LayoutViolation",
    "validate_layout",
]
