"""
Configuration constants for the TMI parser

This module contains the tunable values used by the parser and serializer.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_str(name: str, default: str) -> str:
    """Retrieve a non-empty string value from an environment variable.

    Blank values are treated as unset so an exported-but-empty variable
    cannot erase a required default.
    """
    value = os.getenv(name)
    if value is not None and value.strip():
        return value.strip()
    return default


# Wire grammar
TMI_ENDPOINT = _get_env_str(
    "TMI_ENDPOINT", "tmi.twitch.tv"
)  # Source name synthesized by the serializer and skipped by the parser
TMI_ENDPOINT_MARKER = f"{TMI_ENDPOINT} "  # Endpoint token as it precedes the command
TMI_MIN_LINE_LENGTH = _get_env_int(
    "TMI_MIN_LINE_LENGTH", 5
)  # Shortest trimmed line worth parsing

# Tag value ranges
TAG_NUMBER_MAX = 2**32 - 1  # Largest value classified as a Number
TAG_TIMESTAMP_MAX = 2**64 - 1  # Largest value classified as a Timestamp
TAG_COLOR_MAX = 2**32 - 1  # Largest decoded hex value classified as a Color
TAG_NUMBER_DIGITS = len(str(TAG_NUMBER_MAX))  # Longest decimal string that can be a Number
TAG_TIMESTAMP_DIGITS = len(str(TAG_TIMESTAMP_MAX))  # Longest decimal string that can be a Timestamp
