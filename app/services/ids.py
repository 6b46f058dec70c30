"""
Record ID Generation

IDs are numeric strings, one above the highest numeric ID in use.
"""

from typing import Iterable, Optional


def numeric_id(record_id: object) -> Optional[int]:
    """Return the integer value of an ID, or None when it is not numeric."""
    try:
        return int(str(record_id))
    except (TypeError, ValueError):
        return None


def next_id(existing_ids: Iterable[object], floor: int = 0) -> str:
    """
    Compute the next free ID.

    Args:
        existing_ids: IDs currently held by the collection
        floor: Highest ID ever issued, so removed IDs are not handed out again

    Returns:
        str: One more than the highest numeric ID (``"1"`` for an empty collection)

    Example:
        >>> next_id(["1", "7", "3"])
        '8'
        >>> next_id([], floor=4)
        '5'
    """
    highest = floor
    for record_id in existing_ids:
        value = numeric_id(record_id)
        if value is not None and value > highest:
            highest = value
    return str(highest + 1)
