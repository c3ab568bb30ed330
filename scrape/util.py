"""Text clean-up helpers shared by the scrapers."""

import re

_SPACE_RUN = re.compile(" +")


def remove_extra_spaces(raw_text: str) -> str:
    """Drop line breaks and collapse every run of spaces into one space."""
    without_breaks = raw_text.replace("\n", "").replace("\r", "")
    return _SPACE_RUN.sub(" ", without_breaks)


def trim_spaces_and_line_breaks(text: str) -> str:
    """Trim spaces, then line breaks, then spaces again from both ends."""
    return text.strip(" ").strip("\n").strip(" ")