"""Axis label formatting."""
from .utils import round_half_away


def format_y_value(value: float, shorten: bool = False) -> str:
    """
    Format a value-axis tick as an integer label.

    With ``shorten`` big numbers get an M or K suffix:
        2500000 -> "2M"
        12000 -> "12K"
        999 -> "999"
    """
    source = round_half_away(value)
    if shorten:
        if source > 1e6:
            return f"{int(source / 1e6)}M"
        elif source > 1e3:
            return f"{int(source / 1e3)}K"
    return str(source)
