"""Meal segmenter - splits raw meal plan text into per-meal blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from app.exceptions import EmptyInputError
from services.meal_text_vocab import (
    is_bullet,
    is_category_line,
    is_meal_header,
    parse_header,
)

logger = logging.getLogger("mealtext.segmenter")

# Separator characters trimmed off a marker before a category line is joined to it
_MARKER_TAIL = " :.)-–"


@dataclass(frozen=True)
class RawBlock:
    """Contiguous input lines provisionally belonging to one meal."""
    index: int
    header: Optional[str] = None
    lines: Tuple[str, ...] = ()


@dataclass
class _Draft:
    header: Optional[str] = None
    lines: List[str] = field(default_factory=list)

    def is_bare_marker(self) -> bool:
        # "Meal 1" / "Breakfast:" with nothing under it yet
        if self.header is None or self.lines:
            return False
        info = parse_header(self.header)
        return info.is_marker and info.title is None

    def takes_category(self, line: str) -> bool:
        # "Meal 1" directly followed by "Breakfast: Oatmeal"
        if self.header is None or self.lines or not is_category_line(line):
            return False
        info = parse_header(self.header)
        return info.ordinal is not None and info.category is None and info.title is None

    def is_empty(self) -> bool:
        return self.header is None and not self.lines


def segment(text: Optional[str]) -> List[RawBlock]:
    """
    Split meal plan text into RawBlocks in order of appearance.

    - Blank lines end a block, except directly after a bare marker.
    - "Meal N" markers and category-prefixed lines always start a new block,
      except a category line right under a bare "Meal N", which joins it.
    - Simple format (first line is "Category: ..."): every non-bullet line is
      its own single-line meal; bullet lines attach to the meal above.

    Raises:
        EmptyInputError: if the trimmed text is empty
    """
    if text is None or not text.strip():
        raise EmptyInputError()

    lines = [raw.strip() for raw in text.splitlines()]
    first = next(line for line in lines if line)
    simple_format = is_category_line(first)

    drafts: List[_Draft] = []
    current: Optional[_Draft] = None

    for line in lines:
        if not line:
            if current is not None and not current.is_bare_marker():
                drafts.append(current)
                current = None
            continue

        if current is not None and current.takes_category(line):
            current.header = f"{current.header.rstrip(_MARKER_TAIL)} - {line}"
            continue

        if is_meal_header(line) or (simple_format and not is_bullet(line)):
            if current is not None:
                drafts.append(current)
            current = _Draft(header=line)
            continue

        if current is None:
            current = _Draft()
        current.lines.append(line)

    if current is not None:
        drafts.append(current)

    blocks = [
        RawBlock(index=i, header=d.header, lines=tuple(d.lines))
        for i, d in enumerate(d for d in drafts if not d.is_empty())
    ]
    logger.debug("segmented %d blocks (simple_format=%s)", len(blocks), simple_format)
    return blocks
