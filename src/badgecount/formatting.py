"""Display formatting for the badge count."""

DISPLAY_CAP = 99
OVERFLOW_SUFFIX = "+"


def pad(value: object, length: int = 2, fill: str = "0") -> str:
    """Return value as a string left-padded with fill up to length."""
    text = str(value)
    while len(text) < length:
        text = fill + text
    return text


def format_count(value: int) -> str:
    """Format a badge count for display.

    Values above DISPLAY_CAP render as the cap followed by "+", so 100 and
    1000 both become "99+". Values below 10 get a leading zero.
    """
    text = pad(min(value, DISPLAY_CAP))
    if value > DISPLAY_CAP:
        text += OVERFLOW_SUFFIX
    return text


def exceeds_cap(value: int) -> bool:
    """True when value is only shown in its capped "99+" form."""
    return value > DISPLAY_CAP
