"""Merge keys deciding which ingredient lines are the same purchasable item."""

# ASCII unit separator; cannot collide with text typed into name/unit fields
MERGE_KEY_SEPARATOR = "\x1f"


def merge_key(name, unit):
    """Return the key under which ingredient quantities are summed.

    The key is the exact name and unit joined by a separator. Matching is
    case- and whitespace-sensitive, so "Tomato"/"tomato" or "g"/" g" remain
    separate shopping items.
    """
    return f"{name}{MERGE_KEY_SEPARATOR}{unit if unit is not None else ''}"
