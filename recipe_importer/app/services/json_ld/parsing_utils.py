"""General parsing utilities for JSON-LD recipe fields."""

import logging
import math
import re
from typing import Optional

from recipe_importer.app.services.json_ld.models import RecipeYield

logger = logging.getLogger(__name__)

DURATION_RE = re.compile(
    r"^P(?:(?P<days>\d{1,9})D)?(?:T(?:(?P<hours>\d{1,9})H)?(?:(?P<minutes>\d{1,9})M)?(?:(?P<seconds>\d{1,9})S)?)?$"
)
YIELD_RE = re.compile(r"(?:ca\.?\s+|about\s+)?(\d+(?:[.,]\d+)?)\s*(.+)?", flags=re.I)


def clean_text(text: str) -> str:
    """Normalize whitespace in text."""
    return re.sub(r"\s+", " ", text or "").strip()


def parse_duration(value) -> Optional[int]:
    """Parse an ISO-8601 duration (e.g. PT1H30M) into whole minutes.

    Returns None when the value is missing, empty or malformed. A well-formed
    zero duration such as PT0M returns 0, which callers must keep apart from
    None. Seconds are rounded up to the next minute. Components longer than
    nine digits are treated as malformed.
    """
    if not isinstance(value, str):
        return None
    duration = value.strip()
    if not duration:
        return None
    match = DURATION_RE.match(duration)
    if not match:
        logger.debug("Unrecognized duration %r", value)
        return None
    days = int(match.group("days") or 0)
    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes") or 0)
    seconds = int(match.group("seconds") or 0)
    return days * 1440 + hours * 60 + minutes + math.ceil(seconds / 60)


def _yield_text(value) -> Optional[str]:
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, str):
        return value
    logger.debug("Ignoring recipeYield of type %s", type(value).__name__)
    return None


def parse_recipe_yield(value) -> RecipeYield:
    """Split a recipeYield value such as "ca 30 st" or "4 servings" into quantity and unit.

    Strings without any number are returned whole as the quantity.
    """
    text = _yield_text(value)
    if text is None or not text.strip():
        return RecipeYield()

    match = YIELD_RE.search(text)
    if match:
        quantity = match.group(1).replace(",", ".")
        unit = (match.group(2) or "").strip() or None
        return RecipeYield(quantity=quantity, unit_name=unit)

    return RecipeYield(quantity=text, unit_name=None)
