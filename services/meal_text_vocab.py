"""
Shared meal text vocabulary - bullets, units, and meal header patterns.

Single source of truth for the tokens the segmenter, line classifier, and
ingredient extractor agree on. Everything here is a compiled constant or a
pure helper; no per-call state lives in this module.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Optional

from domain.enums import MealCategory


# ── Bullets ──────────────────────────────────────────

BULLET_CHARS = ("-", "•", "*", "–", "·")

_BULLET_RE = re.compile(r"^\s*[-•*–·]\s*")


def is_bullet(line: str) -> bool:
    """Return True if the line starts with a recognized bullet marker."""
    return bool(_BULLET_RE.match(line))


def strip_bullet(line: str) -> str:
    """Remove one leading bullet marker and surrounding whitespace."""
    return _BULLET_RE.sub("", line, count=1).strip()


# ── Units ────────────────────────────────────────────

# Marker stored for "<amount> <name>" lines that carry no unit
COUNT_UNIT = "unit"

# Lowercase token -> canonical unit. Plural cup/piece/slice keep the
# spelling the trainer used.
UNIT_WORD_MAP: Dict[str, str] = {
    # Mass
    "g": "g",
    "gram": "g",
    "grams": "g",
    "kg": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    # Volume
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
    "cup": "cup",
    "cups": "cups",
    "tbsp": "tbsp",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tsp": "tsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    # Count-ish
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    "piece": "piece",
    "pieces": "pieces",
    "slice": "slice",
    "slices": "slices",
}

# Longest-first so "lbs" wins over "lb" and "l"
UNIT_PATTERN = "|".join(
    re.escape(u) for u in sorted(UNIT_WORD_MAP, key=len, reverse=True)
)

# Digits, optional single decimal point, optional fractional digits
AMOUNT_PATTERN = r"\d+(?:\.\d*)?"


def canonical_unit(raw: Optional[str]) -> Optional[str]:
    """Map a matched unit token to its canonical lower-case form.

    Examples:
        "G"      -> "g"
        "Cups"   -> "cups"
        "pounds" -> "lb"
    """
    if not raw:
        return None
    low = raw.strip().lower()
    return UNIT_WORD_MAP.get(low, low)


def clean_name(raw: Optional[str]) -> str:
    """Trim and collapse inner whitespace; case is left alone."""
    if not raw:
        return ""
    return re.sub(r"\s+", " ", raw).strip()


# ── Meal headers ─────────────────────────────────────

_CATEGORY_WORDS = r"breakfast|lunch|dinner|snacks?"

CATEGORY_PREFIX_RE = re.compile(
    rf"^\s*(?P<category>{_CATEGORY_WORDS})\s*:\s*(?P<title>.*)$",
    re.IGNORECASE,
)

_CATEGORY_WORD_RE = re.compile(rf"^\s*(?P<category>{_CATEGORY_WORDS})\s*$", re.IGNORECASE)

# "Meal 1", "Meal #2", "meal 3: Post workout", "Meal 4 - Snack"
ORDINAL_MARKER_RE = re.compile(
    r"^\s*meal\s*#?\s*(?P<ordinal>\d+)\b\s*(?:[:.)\-–]\s*)?(?P<title>.*)$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class HeaderInfo:
    """What a meal header line tells us about its meal."""
    category: Optional[MealCategory] = None
    title: Optional[str] = None
    ordinal: Optional[int] = None
    is_marker: bool = False


def _category_from_word(word: str) -> MealCategory:
    low = word.lower()
    if low.startswith("snack"):
        return MealCategory.SNACK
    return MealCategory(low)


def is_category_line(line: str) -> bool:
    return bool(CATEGORY_PREFIX_RE.match(line))


def is_meal_header(line: str) -> bool:
    """Return True for lines that always open a new meal block."""
    return bool(CATEGORY_PREFIX_RE.match(line) or ORDINAL_MARKER_RE.match(line))


def parse_header(line: str) -> HeaderInfo:
    """Decompose a header line into category, title, and ordinal.

    Category prefixes and ordinal markers are structural; only the text that
    follows them is a title. Any other header line is a title verbatim.
    """
    m = CATEGORY_PREFIX_RE.match(line)
    if m:
        return HeaderInfo(
            category=_category_from_word(m.group("category")),
            title=clean_name(m.group("title")) or None,
            is_marker=True,
        )

    m = ORDINAL_MARKER_RE.match(line)
    if m:
        ordinal = int(m.group("ordinal"))
        rest = clean_name(m.group("title"))

        word = _CATEGORY_WORD_RE.match(rest)
        if word:
            return HeaderInfo(
                category=_category_from_word(word.group("category")),
                ordinal=ordinal,
                is_marker=True,
            )

        prefixed = CATEGORY_PREFIX_RE.match(rest)
        if prefixed:
            return HeaderInfo(
                category=_category_from_word(prefixed.group("category")),
                title=clean_name(prefixed.group("title")) or None,
                ordinal=ordinal,
                is_marker=True,
            )

        return HeaderInfo(title=rest or None, ordinal=ordinal, is_marker=True)

    title = clean_name(line).rstrip(":").strip()
    return HeaderInfo(title=title or None)
