"""
Content Catalog
===============
Loads the text shown in the sections from `assets/content.json`.

Why is this file needed?
------------------------
The navigator only counts sections; titles, navigation labels, the hero stats
and the terminal transcript are data. Keeping them in JSON means copy edits
never touch the widgets.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from sentience import config

logger = logging.getLogger(__name__)


class ContentError(ValueError):
    """The content catalog is missing or malformed."""


@dataclass(frozen=True)
class Stat:
    label: str
    target: int
    suffix: str = ""


@dataclass(frozen=True)
class SectionContent:
    key: str
    nav_label: str
    title: str
    eyebrow: str = ""
    body: str = ""


@dataclass(frozen=True)
class ContentCatalog:
    brand: str
    sections: list[SectionContent]
    stats: list[Stat] = field(default_factory=list)
    terminal_lines: list[str] = field(default_factory=list)

    def section(self, index: int) -> SectionContent:
        return self.sections[index]

    @classmethod
    def from_dict(cls, data: dict[str, Any], expected_sections: int = config.TOTAL_SECTIONS) -> ContentCatalog:
        try:
            sections = [
                SectionContent(
                    key=str(raw["key"]),
                    nav_label=str(raw.get("nav_label", raw["title"])),
                    title=str(raw["title"]),
                    eyebrow=str(raw.get("eyebrow", "")),
                    body=str(raw.get("body", "")),
                )
                for raw in data["sections"]
            ]
            stats = [
                Stat(label=str(raw["label"]), target=raw["target"], suffix=str(raw.get("suffix", "")))
                for raw in data.get("stats", [])
            ]
            terminal_lines = [str(line) for line in data.get("terminal_lines", [])]
            brand = str(data.get("brand", "SENTIENCE"))
        except (KeyError, TypeError) as e:
            raise ContentError(f"Malformed content catalog: {e}") from e

        if len(sections) != expected_sections:
            raise ContentError(f"Expected {expected_sections} sections, found {len(sections)}.")
        for stat in stats:
            if isinstance(stat.target, bool) or not isinstance(stat.target, int) or stat.target < 0:
                raise ContentError(f"Stat '{stat.label}' needs a non-negative integer target, got {stat.target!r}.")

        return cls(brand=brand, sections=sections, stats=stats, terminal_lines=terminal_lines)


def load_content(path: Optional[str] = None, expected_sections: int = config.TOTAL_SECTIONS) -> ContentCatalog:
    path = path or config.CONTENT_PATH
    logger.info(f"Loading content from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ContentError(f"Could not read content catalog '{path}': {e}") from e
    return ContentCatalog.from_dict(data, expected_sections=expected_sections)
