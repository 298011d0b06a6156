"""
Command-line reports for the Flexpool API.
"""

import argparse


def positive_float(value: str) -> float:
    """Argparse type for options that must be greater than zero."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than zero, got {value}")
    return number
