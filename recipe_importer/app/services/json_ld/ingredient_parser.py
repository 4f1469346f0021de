"""Free-text ingredient line parsing."""

import logging
import re

from recipe_importer.app.services.json_ld.constants import APPROXIMATION_PREFIXES, UNIT_LEXICON
from recipe_importer.app.services.json_ld.models import IngredientConfidence, ParsedIngredient

logger = logging.getLogger(__name__)


def _prefix_pattern() -> str:
    parts = []
    for prefix in sorted(APPROXIMATION_PREFIXES, key=len, reverse=True):
        separator = r"\s*" if prefix.endswith(".") else r"\s+"
        parts.append(re.escape(prefix) + separator)
    return "(?:" + "|".join(parts) + ")"


_NUMBER = r"\d+(?:[.,]\d+)?"

QUANTITY_RE = re.compile(
    rf"^(?P<quantity>{_prefix_pattern()}?(?:\d+/\d+|{_NUMBER}(?:\s*-\s*{_NUMBER})?))(?=\s|$)",
    flags=re.I,
)
UNIT_RE = re.compile(
    "^(?P<unit>"
    + "|".join(re.escape(unit) for unit in sorted(UNIT_LEXICON, key=len, reverse=True))
    + r")(?=\s|$)",
    flags=re.I,
)


def parse_ingredient(line) -> ParsedIngredient:
    """Parse one ingredient line like "2 dl mjölk" into quantity, measurement and name.

    Confidence reflects how much of the line was decomposed: quantity and unit
    give high, a quantity alone gives medium, and lines without a leading
    quantity are kept whole with low confidence.
    """
    raw = line.strip() if isinstance(line, str) else str(line).strip()

    match = QUANTITY_RE.match(raw)
    if not match:
        return ParsedIngredient(name=raw, confidence=IngredientConfidence.LOW)

    quantity = match.group("quantity").replace(",", ".")
    rest = raw[match.end() :].strip()

    unit_match = UNIT_RE.match(rest)
    if unit_match:
        measurement = unit_match.group("unit").lower()
        name = rest[unit_match.end() :].strip()
        if not name:
            return ParsedIngredient(
                quantity=quantity,
                measurement=measurement,
                name=raw,
                confidence=IngredientConfidence.MEDIUM,
            )
        return ParsedIngredient(
            quantity=quantity,
            measurement=measurement,
            name=name,
            confidence=IngredientConfidence.HIGH,
        )

    if rest:
        return ParsedIngredient(quantity=quantity, name=rest, confidence=IngredientConfidence.MEDIUM)
    return ParsedIngredient(quantity=quantity, name=raw, confidence=IngredientConfidence.LOW)
