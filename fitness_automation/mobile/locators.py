from __future__ import annotations

from dataclasses import dataclass

ACCESSIBILITY_ID = "accessibility id"
XPATH = "xpath"


@dataclass(frozen=True)
class Locator:
    using: str
    value: str

    def __str__(self) -> str:
        return f"{self.using}:{self.value}"


def accessibility_id(value: str) -> Locator:
    if not value:
        raise ValueError("accessibility id must be a non-empty string")
    return Locator(using=ACCESSIBILITY_ID, value=value)


def xpath(value: str) -> Locator:
    if not value:
        raise ValueError("xpath must be a non-empty string")
    return Locator(using=XPATH, value=value)


def xpath_literal(text: str) -> str:
    """
    Quote `text` as an XPath 1.0 string literal.

    Routine and exercise names come from test data and may contain either quote
    character; XPath 1.0 has no escape sequence, so mixed quotes need concat().
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    pieces = text.split('"')
    return "concat(" + ", '\"', ".join(f'"{p}"' for p in pieces) + ")"
