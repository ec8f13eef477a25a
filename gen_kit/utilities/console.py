"""
Console output utilities.

This module provides functions for formatted console output used by the
gen-kit command line.
"""

from .constants import EMOJI_ERROR, EMOJI_INFO, EMOJI_SUCCESS


def print_success(message: str) -> None:
    """Print success message with emoji."""
    print(f"{EMOJI_SUCCESS} {message}")


def print_error(message: str) -> None:
    """Print error message with emoji."""
    print(f"{EMOJI_ERROR} {message}")


def print_info(message: str) -> None:
    """Print info message with emoji."""
    print(f"{EMOJI_INFO} {message}")


def print_section_header(title: str, width: int = 60) -> None:
    """Print formatted section header."""
    print(f"\n{title}")
    print("=" * width)
