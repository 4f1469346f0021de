"""Mapping of schema.org Recipe objects onto draft recipes."""

import logging
from typing import List

from recipe_importer.app.services.json_ld.constants import (
    LOW_CONFIDENCE_WARNING,
    NO_INSTRUCTIONS_WARNING,
    NO_NAME_WARNING,
)
from recipe_importer.app.services.json_ld.field_shapes import (
    extract_author,
    extract_categories,
    extract_cuisine,
    extract_image,
    extract_ingredient_lines,
    extract_instructions,
    extract_text,
)
from recipe_importer.app.services.json_ld.ingredient_parser import parse_ingredient
from recipe_importer.app.services.json_ld.models import (
    DraftIngredient,
    IngredientConfidence,
    MappingResult,
    RecipeDraft,
)
from recipe_importer.app.services.json_ld.parsing_utils import parse_duration, parse_recipe_yield

logger = logging.getLogger(__name__)


def map_to_draft(recipe: dict, source_url: str) -> MappingResult:
    """Map a JSON-LD Recipe object onto a draft recipe.

    Nothing here fails on odd input: fields that cannot be read are left as
    None and problems worth showing to the user are collected in
    ``warnings``. Positions of ingredients parsed with low confidence are
    listed in ``low_confidence_indices``.
    """
    if not isinstance(recipe, dict):
        logger.warning("Expected a Recipe object, got %s", type(recipe).__name__)
        recipe = {}

    warnings: List[str] = []

    name = extract_text(recipe.get("name"))
    if not name:
        warnings.append(NO_NAME_WARNING)
    description = extract_text(recipe.get("description")) or name or ""

    image = extract_image(recipe.get("image"))

    prep_time = parse_duration(recipe.get("prepTime"))
    cook_time = parse_duration(recipe.get("cookTime"))
    total_time = parse_duration(recipe.get("totalTime"))
    # An explicit zero cook time is kept; only a missing one falls back.
    if cook_time is None:
        cook_time = total_time

    recipe_yield = parse_recipe_yield(recipe.get("recipeYield"))

    ingredients: List[DraftIngredient] = []
    low_confidence: List[int] = []
    for idx, line in enumerate(extract_ingredient_lines(recipe.get("recipeIngredient"))):
        parsed = parse_ingredient(line)
        if parsed.confidence is IngredientConfidence.LOW:
            low_confidence.append(idx)
            warnings.append(LOW_CONFIDENCE_WARNING.format(text=line))
        ingredients.append(parsed.to_draft())

    instructions = extract_instructions(recipe.get("recipeInstructions"))
    if not instructions:
        warnings.append(NO_INSTRUCTIONS_WARNING)

    draft = RecipeDraft(
        recipe_name=name,
        description=description,
        url=source_url,
        author=extract_author(recipe.get("author")),
        prep_time=prep_time,
        cook_time=cook_time,
        recipe_yield=recipe_yield.quantity,
        recipe_yield_name=recipe_yield.unit_name,
        cuisine=extract_cuisine(recipe.get("recipeCuisine")),
        image=image,
        thumbnail=image,
        date_published=extract_text(recipe.get("datePublished")),
        categories=extract_categories(recipe.get("recipeCategory")),
        ingredients=ingredients,
        instructions=instructions,
    )
    logger.info(
        "Mapped recipe %r: ingredients=%d (low confidence %d), instructions=%d, warnings=%d",
        (name or "")[:50],
        len(ingredients),
        len(low_confidence),
        len(instructions),
        len(warnings),
    )
    return MappingResult(draft=draft, warnings=warnings, low_confidence_indices=low_confidence)
