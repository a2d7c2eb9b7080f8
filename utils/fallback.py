from typing import Optional


def first_defined(*values: Optional[str], default: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty value, in the order given, or ``default``."""
    for value in values:
        if value:
            return value
    return default
