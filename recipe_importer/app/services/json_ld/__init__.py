"""JSON-LD recipe import package.

This package locates schema.org Recipe data embedded in HTML and normalizes
its loosely-typed fields into a draft recipe with warnings and
low-confidence markers.
"""

from recipe_importer.app.services.json_ld.field_shapes import (
    FieldShape,
    detect_shape,
    extract_author,
    extract_categories,
    extract_cuisine,
    extract_image,
    extract_ingredient_lines,
    extract_instructions,
)
from recipe_importer.app.services.json_ld.ingredient_parser import parse_ingredient
from recipe_importer.app.services.json_ld.locator import find_recipe, locate_recipe
from recipe_importer.app.services.json_ld.models import (
    DraftIngredient,
    ImportResult,
    IngredientConfidence,
    InstructionEntry,
    InstructionGroup,
    InstructionStep,
    MappingResult,
    ParsedIngredient,
    RecipeDraft,
    RecipeYield,
)
from recipe_importer.app.services.json_ld.parsing_utils import (
    clean_text,
    parse_duration,
    parse_recipe_yield,
)
from recipe_importer.app.services.json_ld.schema_mapper import map_to_draft

__all__ = [
    # Models
    "DraftIngredient",
    "ImportResult",
    "IngredientConfidence",
    "InstructionEntry",
    "InstructionGroup",
    "InstructionStep",
    "MappingResult",
    "ParsedIngredient",
    "RecipeDraft",
    "RecipeYield",
    # Location
    "find_recipe",
    "locate_recipe",
    # Field parsing
    "clean_text",
    "parse_duration",
    "parse_ingredient",
    "parse_recipe_yield",
    # Shape normalization
    "FieldShape",
    "detect_shape",
    "extract_author",
    "extract_categories",
    "extract_cuisine",
    "extract_image",
    "extract_ingredient_lines",
    "extract_instructions",
    # Mapping
    "map_to_draft",
]
