"""Misc utilities"""

import re

ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
WORD_RE = re.compile(r"([a-z0-9])([A-Z])")


def snake_case(name: str) -> str:
    """Convert the CamelCase name to snake_case

    Runs of capitals are kept together as a single word, so "HTTPStatusView" becomes
    "http_status_view".
    """
    name = ACRONYM_RE.sub(r"\1_\2", name)

    return WORD_RE.sub(r"\1_\2", name).lower()
