"""Input validation with clear error messages for layout callers."""

from __future__ import annotations

import logging
import numbers
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


def is_number(value: Any) -> bool:
    """True for real numbers, including numpy scalars. Bools are rejected."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def validate_number(value: Any, name: str) -> float:
    """Validate that value is a real number.

    Returns the value unchanged.
    """
    if not is_number(value):
        raise TypeError(
            f"{name} must be a number, got {type(value).__name__}."
        )
    return value


def normalize_ratios(ratios: tuple) -> np.ndarray:
    """Validate split ratios and normalize them so they sum to 1.

    Parameters
    ----------
    ratios : tuple of numbers
        Relative sizes. They need not sum to 1.

    Returns
    -------
    np.ndarray
        float64 array of the same length. When the ratios sum to zero,
        every entry is zero.
    """
    if len(ratios) == 0:
        raise ValueError(
            "No ratios passed in. Provide at least one number, "
            "e.g. split_vertical(0.1, 0.9)."
        )
    bad = [r for r in ratios if not is_number(r)]
    if bad:
        raise TypeError(
            f"Ratios must be numbers. Got non-numeric values: {bad[:5]!r}"
        )
    arr = np.asarray(ratios, dtype=np.float64)
    total = arr.sum()
    if total == 0:
        logger.debug("Ratios %r sum to zero; all segments will be empty", ratios)
        return np.zeros_like(arr)
    return arr / total
