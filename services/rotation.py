"""
Set Rotation Service

Shows search results a few at a time. Each list is viewed through a window
of fixed size that starts at (rotation * size) modulo the list length and
wraps around to the front, so repeated "shuffles" cycle through every result
in a deterministic order. There is no last page.
"""

from constants import RECIPES_PER_SET


def window_of(rotation_index, sequence, window_size=RECIPES_PER_SET):
    """
    Return the visible slice of ``sequence`` for a rotation index.

    Examples:
        window_of(0, [1, 2, 3, 4, 5], 3) -> [1, 2, 3]
        window_of(1, [1, 2, 3, 4, 5], 3) -> [4, 5, 1]
    """
    items = list(sequence or ())
    length = len(items)
    if length == 0 or window_size <= 0:
        return []
    if window_size >= length:
        return items

    start = (rotation_index * window_size) % length
    return [items[(start + offset) % length] for offset in range(window_size)]


def rotate(rotation_index):
    """Advance to the next set. Python ints never overflow, so no wrapping."""
    return rotation_index + 1


def visible_sets(rotation_index, exact, related, window_size=RECIPES_PER_SET):
    """
    Window both result lists with the same rotation index. Each list wraps on
    its own length, so the two may be on different laps.
    """
    return (
        window_of(rotation_index, exact, window_size),
        window_of(rotation_index, related, window_size),
    )
