"""
Line classifier and ingredient extractor.

Decides which line of a block is the meal header and decomposes every
ingredient line into amount, unit, and display name. Ingredient lines are
matched against an ordered list of tagged patterns; the first match wins, so
precedence is exactly the order of INGREDIENT_MATCHERS.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from domain.schemas.meal_text_schemas import Ingredient
from services.meal_segmenter import RawBlock
from services.meal_text_vocab import (
    AMOUNT_PATTERN,
    COUNT_UNIT,
    UNIT_PATTERN,
    canonical_unit,
    clean_name,
    is_bullet,
    strip_bullet,
)


@dataclass(frozen=True)
class LineMatcher:
    """A named ingredient-line pattern with the unit it implies when none is written."""
    tag: str
    pattern: re.Pattern
    default_unit: Optional[str] = None


# Optional abbreviation period and punctuation after the unit ("1 tbsp. oil",
# "2 cups, chopped kale"); the name then starts on a word character or "("
_AFTER_UNIT = r"\b\.?[\s,:\-]*(?:of\s+)?(?P<name>[^\W_].*|\(.*)$"


INGREDIENT_MATCHERS: Tuple[LineMatcher, ...] = (
    # 175g of Jasmine Rice / 100.75g turkey breast
    LineMatcher(
        "amount_unit_attached",
        re.compile(
            rf"^(?P<amount>{AMOUNT_PATTERN})(?P<unit>{UNIT_PATTERN}){_AFTER_UNIT}",
            re.IGNORECASE,
        ),
    ),
    # 2 cups of oats / 6 oz chicken breast
    LineMatcher(
        "amount_unit_spaced",
        re.compile(
            rf"^(?P<amount>{AMOUNT_PATTERN})\s+(?P<unit>{UNIT_PATTERN}){_AFTER_UNIT}",
            re.IGNORECASE,
        ),
    ),
    # 4 eggs / 1.5 banana (150g)
    LineMatcher(
        "amount_count",
        re.compile(rf"^(?P<amount>{AMOUNT_PATTERN})\s+(?P<name>[^\W\d_].*)$"),
        default_unit=COUNT_UNIT,
    ),
    # chicken wrap
    LineMatcher("name_only", re.compile(r"^(?P<name>.+)$")),
)


@dataclass(frozen=True)
class ClassifiedBlock:
    """A block split into its header line and parsed ingredients."""
    index: int
    header: Optional[str]
    ingredient_lines: Tuple[str, ...]
    ingredients: Tuple[Ingredient, ...]


def match_line(text: str) -> Optional[Tuple[LineMatcher, re.Match]]:
    """Return the first matcher (by precedence) that accepts the text."""
    for matcher in INGREDIENT_MATCHERS:
        m = matcher.pattern.match(text)
        if m:
            return matcher, m
    return None


def extract_ingredient(line: str) -> Optional[Ingredient]:
    """
    Parse one ingredient line.

    Returns None when nothing is left after removing the bullet; such lines
    are dropped by callers rather than reported.

    Example:
        >>> extract_ingredient("-175g of Jasmine Rice")
        Ingredient(name='Jasmine Rice', amount='175', unit='g')
    """
    body = strip_bullet(line)
    if not body:
        return None

    hit = match_line(body)
    if hit is None:
        return None
    matcher, m = hit

    groups = m.groupdict()
    name = clean_name(groups.get("name"))
    if not name:
        return None

    return Ingredient(
        name=name,
        amount=groups.get("amount"),
        unit=canonical_unit(groups.get("unit")) or matcher.default_unit,
    )


def classify(block: RawBlock) -> ClassifiedBlock:
    """
    Pick the header for a block and extract its ingredients.

    A header forced by the segmenter wins. Otherwise the first line is the
    header unless it starts with a bullet marker.
    """
    header = block.header
    candidates: List[str] = list(block.lines)

    if header is None and candidates and not is_bullet(candidates[0]):
        header = candidates.pop(0)

    ingredients = []
    for line in candidates:
        ingredient = extract_ingredient(line)
        if ingredient is not None:
            ingredients.append(ingredient)

    return ClassifiedBlock(
        index=block.index,
        header=header,
        ingredient_lines=tuple(candidates),
        ingredients=tuple(ingredients),
    )
