"""Line ending normalization for generated files."""
from typing import Optional

from license_file_generator.constants import LINE_ENDINGS


def apply_line_ending(text: str, line_ending: Optional[str]) -> str:
    """Normalize every line break in text.

    Args:
        text: Text with any mix of LF, CRLF and CR line breaks.
        line_ending: "lf", "crlf", or None to leave text untouched.

    Returns:
        Text using a single line ending style.
    """
    if line_ending is None:
        return text
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.replace("\n", LINE_ENDINGS[line_ending])
