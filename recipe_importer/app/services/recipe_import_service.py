import logging

from recipe_importer.app.services.json_ld import (
    ImportResult,
    locate_recipe,
    map_to_draft,
)
from recipe_importer.app.services.json_ld.constants import NO_RECIPE_FOUND_MESSAGE

logger = logging.getLogger(__name__)


def import_recipe_from_html(html: str, source_url: str) -> ImportResult:
    """Locate the JSON-LD Recipe in a page and map it to a draft.

    A page without recipe data is reported with ``error_code="no_recipe_found"``
    so the caller can tell the user the import failed.
    """
    recipe = locate_recipe(html)
    if recipe is None:
        logger.info("No recipe data found for %s", source_url)
        return ImportResult(
            success=False,
            error_code="no_recipe_found",
            error_message=NO_RECIPE_FOUND_MESSAGE,
        )

    mapping = map_to_draft(recipe, source_url)
    if mapping.warnings:
        logger.info("Imported %s with %d warnings", source_url, len(mapping.warnings))
    return ImportResult(success=True, mapping=mapping)
