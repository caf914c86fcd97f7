"""Binary search over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted sequence ``items``.

    Raises ValueError if ``target`` is not present.
    """
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        value = items[mid]
        if value == target:
            return mid
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    raise ValueError(f"{target!r} is not in the sequence")