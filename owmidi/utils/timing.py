"""
Time rounding shared by every stage of the conversion.

Chord keys, packed times and rendered literals all go through
round_to_places so floating-point jitter never yields duplicate or
misordered chords.
"""


def round_to_places(value: float, places: int) -> float:
    """
    Round a time value to a fixed amount of decimal places.

    Args:
        value: Time in seconds
        places: Decimal places to keep

    Returns:
        Rounded time. Always a float, with -0.0 normalized to 0.0.

    Example:
        >>> round_to_places(1.23456, 3)
        1.235
    """
    rounded = round(float(value), places)
    return rounded + 0.0 if rounded == 0 else rounded


def format_number(value, places: int) -> str:
    """
    Render a number the way the Workshop editor expects it.

    Integers are rendered as-is. Floats are rounded to ``places`` decimals
    with trailing zeros removed, so 12.0 becomes "12" and 0.500 becomes "0.5".
    """
    if isinstance(value, int):
        return str(value)

    text = f"{round_to_places(value, places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
