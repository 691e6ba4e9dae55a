"""
Locator discovery over captured XCUITest page sources.

Page objects address elements by accessibility identifier (the `name`
attribute) and fall back to XPath on `label`. These helpers read the XML that
`Page.capture_dom_tree` and the failure hook write, so new selectors can be
picked from a real screen instead of guessed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional
from xml.etree import ElementTree

from .locators import Locator, accessibility_id, xpath, xpath_literal

_INTERESTING_TYPES = ("Button", "TextField", "Switch", "StaticText")
_TIMESTAMP_SUFFIX = re.compile(r"-\d{8}-\d{6}-\d{6}$")


@dataclass(frozen=True)
class ElementInfo:
    type: str
    name: Optional[str] = None
    label: Optional[str] = None
    value: Optional[str] = None
    visible: Optional[str] = None
    accessible: Optional[str] = None
    enabled: Optional[str] = None


@dataclass
class ScreenElements:
    screen_name: str
    elements: list[ElementInfo] = field(default_factory=list)

    @property
    def with_name(self) -> list[ElementInfo]:
        return [e for e in self.elements if e.name]

    @property
    def with_label_only(self) -> list[ElementInfo]:
        return [e for e in self.elements if e.label and not e.name]

    def types(self) -> list[str]:
        seen: dict[str, None] = {}
        for e in self.elements:
            seen.setdefault(e.type, None)
        return list(seen)


def _parse(page_source_xml: str) -> Optional[ElementTree.Element]:
    if not page_source_xml.strip():
        return None
    try:
        return ElementTree.fromstring(page_source_xml)
    except ElementTree.ParseError as e:
        raise ValueError(f"Failed to parse page source XML: {e}") from e


def extract_elements(page_source_xml: str) -> list[ElementInfo]:
    """Elements with a name or label, plus buttons/fields/switches/texts."""
    root = _parse(page_source_xml)
    if root is None:
        return []

    elements: list[ElementInfo] = []
    for el in root.iter():
        attrib = el.attrib
        element_type = attrib.get("type") or el.tag
        name = attrib.get("name") or None
        label = attrib.get("label") or None
        if not (name or label or any(t in element_type for t in _INTERESTING_TYPES)):
            continue
        elements.append(
            ElementInfo(
                type=element_type,
                name=name,
                label=label,
                value=attrib.get("value") or None,
                visible=attrib.get("visible") or None,
                accessible=attrib.get("accessible") or None,
                enabled=attrib.get("enabled") or None,
            )
        )
    return elements


def search_elements(page_source_xml: str, *, query: str, limit: int = 30) -> list[ElementInfo]:
    """Elements whose type, name, label or value contains `query` (case-insensitive)."""
    if not query or not query.strip():
        raise ValueError("query must be a non-empty string")

    q = query.strip().lower()
    matches: list[ElementInfo] = []
    for element in extract_elements(page_source_xml):
        haystack = " ".join(filter(None, [element.type, element.name, element.label, element.value])).lower()
        if q in haystack:
            matches.append(element)
            if len(matches) >= limit:
                break
    return matches


def suggest_locator(element: ElementInfo) -> Optional[Locator]:
    if element.name:
        return accessibility_id(element.name)
    if element.label:
        return xpath(f"//{element.type}[@label={xpath_literal(element.label)}]")
    return None


def screen_name_from_capture(path: Path) -> str:
    """'dom-tree-my-routines-20240501-100000-000000.xml' -> 'my-routines'."""
    stem = path.stem
    if stem.startswith("dom-tree-"):
        stem = stem[len("dom-tree-") :]
    return _TIMESTAMP_SUFFIX.sub("", stem) or stem


def analyze_dom_file(path: Path) -> ScreenElements:
    return ScreenElements(
        screen_name=screen_name_from_capture(path),
        elements=extract_elements(path.read_text(encoding="utf-8")),
    )


def analyze_dom_directory(directory: Path) -> list[ScreenElements]:
    if not directory.is_dir():
        raise FileNotFoundError(f"DOM capture directory not found: {directory}")
    return [analyze_dom_file(p) for p in sorted(directory.glob("*.xml"))]


def format_report(screens: Iterable[ScreenElements], *, max_named: int = 20, max_labelled: int = 10) -> str:
    lines = ["=" * 80, "ELEMENT ANALYSIS REPORT", "=" * 80]
    for screen in screens:
        lines.append("")
        lines.append(f"Screen: {screen.screen_name}")
        lines.append(f"  Total elements: {len(screen.elements)}")
        lines.append(f"  Element types: {', '.join(screen.types())}")

        named = screen.with_name
        if named:
            lines.append(f"  Elements with accessibility identifiers ({len(named)}):")
            for e in named[:max_named]:
                label = f', label="{e.label}"' if e.label else ""
                lines.append(f'    - {e.type}: name="{e.name}"{label}')
            if len(named) > max_named:
                lines.append(f"    ... and {len(named) - max_named} more")

        labelled = screen.with_label_only
        if labelled:
            lines.append(f"  Elements with labels only ({len(labelled)}):")
            for e in labelled[:max_labelled]:
                lines.append(f'    - {e.type}: label="{e.label}"')
            if len(labelled) > max_labelled:
                lines.append(f"    ... and {len(labelled) - max_labelled} more")
    return "\n".join(lines)
