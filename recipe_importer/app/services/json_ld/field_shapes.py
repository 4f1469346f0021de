"""Shape detection and normalization for polymorphic schema.org fields.

Sites disagree on how to encode almost every Recipe property: ``image`` may be
a URL, a list of URLs, an ImageObject or a list of ImageObjects; ``author`` a
name, a Person/Organization or a list of either; ``recipeInstructions`` a
string, a HowToStep, or a list mixing strings, HowToSteps and HowToSections.
Each field gets one normalizer here, built on :func:`detect_shape`, and any
shape a normalizer does not expect is treated as an absent field.
"""

import logging
from enum import Enum
from typing import List, Optional

from recipe_importer.app.services.json_ld.constants import SECTION_TYPE
from recipe_importer.app.services.json_ld.models import (
    InstructionEntry,
    InstructionGroup,
    InstructionStep,
)
from recipe_importer.app.services.json_ld.parsing_utils import clean_text

logger = logging.getLogger(__name__)


class FieldShape(str, Enum):
    ABSENT = "absent"
    TEXT = "text"
    NUMBER = "number"
    LIST = "list"
    OBJECT = "object"
    OTHER = "other"


def detect_shape(value) -> FieldShape:
    if value is None:
        return FieldShape.ABSENT
    if isinstance(value, str):
        return FieldShape.TEXT
    if isinstance(value, bool):
        return FieldShape.OTHER
    if isinstance(value, (int, float)):
        return FieldShape.NUMBER
    if isinstance(value, list):
        return FieldShape.LIST
    if isinstance(value, dict):
        return FieldShape.OBJECT
    return FieldShape.OTHER


def type_names(obj: dict) -> List[str]:
    """Return the lower-cased type names of a JSON-LD node, without vocabulary prefixes."""
    raw = obj.get("@type")
    if raw is None:
        raw = obj.get("type")
    values = raw if isinstance(raw, list) else [raw]
    names = []
    for value in values:
        if not isinstance(value, str):
            continue
        name = value.strip().rsplit("/", 1)[-1].rsplit(":", 1)[-1]
        if name:
            names.append(name.lower())
    return names


def _first_with_key(value, key: str) -> Optional[str]:
    """Resolve a string, an object carrying ``key``, or a list of either to one string."""
    shape = detect_shape(value)
    if shape is FieldShape.LIST:
        if not value:
            return None
        value = value[0]
        shape = detect_shape(value)
    if shape is FieldShape.TEXT:
        return value.strip() or None
    if shape is FieldShape.OBJECT and detect_shape(value.get(key)) in (FieldShape.TEXT, FieldShape.NUMBER):
        return str(value[key]).strip() or None
    return None


def extract_image(value) -> Optional[str]:
    """Extract a single image URL from the schema.org image formats."""
    return _first_with_key(value, "url")


def extract_author(value) -> Optional[str]:
    """Extract a single author display name."""
    return _first_with_key(value, "name")


def extract_cuisine(value) -> Optional[str]:
    """Join a cuisine list with ", "; an empty list gives "" while a missing field gives None."""
    shape = detect_shape(value)
    if shape is FieldShape.LIST:
        return ", ".join(str(item) for item in value if detect_shape(item) in (FieldShape.TEXT, FieldShape.NUMBER))
    if shape is FieldShape.TEXT:
        return value
    return None


def extract_categories(value) -> List[str]:
    shape = detect_shape(value)
    if shape is FieldShape.TEXT:
        items = value.split(",")
    elif shape is FieldShape.LIST:
        items = [item for item in value if isinstance(item, str)]
    else:
        return []
    return [clean_text(item) for item in items if clean_text(item)]


def extract_text(value) -> Optional[str]:
    """Return a stripped string field, or None for blanks and non-strings."""
    if detect_shape(value) is not FieldShape.TEXT:
        return None
    return value.strip() or None


def extract_ingredient_lines(value) -> List[str]:
    """Flatten recipeIngredient into the list of non-blank lines to parse."""
    shape = detect_shape(value)
    if shape is FieldShape.TEXT:
        value = [value]
    elif shape is not FieldShape.LIST:
        if shape is not FieldShape.ABSENT:
            logger.debug("Ignoring recipeIngredient of type %s", type(value).__name__)
        return []

    lines: List[str] = []
    for idx, item in enumerate(value):
        item_shape = detect_shape(item)
        if item_shape is FieldShape.TEXT:
            text = item
        elif item_shape is FieldShape.NUMBER:
            text = str(item)
        elif item_shape is FieldShape.OBJECT:
            text = extract_text(item.get("text")) or extract_text(item.get("name")) or ""
        else:
            text = ""
        if not text.strip():
            logger.debug("Ingredient %d skipped (empty or unsupported %s)", idx, item_shape.value)
            continue
        lines.append(text)
    return lines


def _is_section(entry) -> bool:
    if detect_shape(entry) is not FieldShape.OBJECT:
        return False
    return SECTION_TYPE in type_names(entry) or isinstance(entry.get("itemListElement"), list)


def _step_text(entry) -> Optional[str]:
    shape = detect_shape(entry)
    if shape is FieldShape.TEXT:
        return entry.strip() or None
    if shape is FieldShape.OBJECT:
        return extract_text(entry.get("text"))
    return None


def _expand_section(section: dict, out: List[InstructionEntry]) -> None:
    name = extract_text(section.get("name"))
    if name:
        out.append(InstructionGroup(group=name))
    items = section.get("itemListElement")
    if detect_shape(items) is not FieldShape.LIST:
        return
    for item in items:
        text = _step_text(item)
        if text:
            out.append(InstructionStep(step=text))


def extract_instructions(value) -> List[InstructionEntry]:
    """Normalize recipeInstructions into steps interleaved with group markers."""
    entries: List[InstructionEntry] = []
    shape = detect_shape(value)

    if shape is FieldShape.TEXT or (shape is FieldShape.OBJECT and not _is_section(value)):
        text = _step_text(value)
        if text:
            entries.append(InstructionStep(step=text))
        return entries

    if shape is FieldShape.OBJECT:
        _expand_section(value, entries)
        return entries

    if shape is not FieldShape.LIST:
        return entries

    for item in value:
        if _is_section(item):
            _expand_section(item, entries)
            continue
        text = _step_text(item)
        if text:
            entries.append(InstructionStep(step=text))
    return entries
