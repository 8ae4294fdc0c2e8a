"""The Z-function of a sequence."""

from __future__ import annotations

from typing import Sequence


def z_function(sequence: Sequence) -> list[int]:
    """Return the Z-array of ``sequence``.

    Entry ``i`` (for ``i > 0``) is the length of the longest common prefix of
    the sequence and its suffix starting at ``i``; entry 0 is always 0.
    """
    length = len(sequence)
    result = [0] * length
    left = right = 0  # current match window is [left, right)
    for index in range(1, length):
        if index < right:
            result[index] = min(right - index, result[index - left])
        while (
            index + result[index] < length
            and sequence[index + result[index]] == sequence[result[index]]
        ):
            result[index] += 1
        if index + result[index] > right:
            left, right = index, index + result[index]
    return result