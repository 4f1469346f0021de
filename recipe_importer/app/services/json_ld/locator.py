"""Schema.org JSON-LD recipe location."""

import json
import logging
from typing import Iterable, Optional

from bs4 import BeautifulSoup

from recipe_importer.app.core.config import get_settings
from recipe_importer.app.services.json_ld.constants import GRAPH_KEY, RECIPE_TYPE
from recipe_importer.app.services.json_ld.field_shapes import type_names

logger = logging.getLogger(__name__)


def is_recipe(obj) -> bool:
    return isinstance(obj, dict) and RECIPE_TYPE in type_names(obj)


def _first_recipe(candidates: Iterable) -> Optional[dict]:
    for obj in candidates:
        if is_recipe(obj):
            return obj
    return None


def find_recipe(data) -> Optional[dict]:
    """Return the Recipe node of one decoded JSON-LD document, if any."""
    if is_recipe(data):
        return data
    if isinstance(data, dict):
        graph = data.get(GRAPH_KEY)
        if isinstance(graph, list):
            logger.debug("Searching @graph with %d items", len(graph))
            return _first_recipe(graph)
        return None
    if isinstance(data, list):
        logger.debug("Searching JSON-LD list with %d items", len(data))
        return _first_recipe(data)
    return None


def _is_json_ld_type(content_type, accepted) -> bool:
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() in accepted


def locate_recipe(html: str) -> Optional[dict]:
    """Find the first schema.org Recipe object embedded as JSON-LD in HTML.

    Script blocks are visited in document order. Blocks that fail to decode are
    skipped. Returns None when no block yields a Recipe.
    """
    if not isinstance(html, str) or not html.strip():
        return None

    settings = get_settings()
    accepted = {t.strip().lower() for t in settings.json_ld_content_types}
    soup = BeautifulSoup(html, settings.html_parser)
    scripts = soup.find_all("script", attrs={"type": lambda value: _is_json_ld_type(value, accepted)})
    logger.info("Found %d JSON-LD script blocks", len(scripts))

    for idx, script in enumerate(scripts):
        raw_json = script.string or script.get_text()
        if not raw_json or not raw_json.strip():
            logger.debug("JSON-LD block %d is empty", idx)
            continue
        try:
            data = json.loads(raw_json, strict=False)
        except (ValueError, RecursionError) as exc:
            logger.warning(
                "JSON-LD block %d failed to parse: %s (first 200 chars: %s)",
                idx,
                exc,
                raw_json[:200],
            )
            continue

        recipe = find_recipe(data)
        if recipe is not None:
            logger.info("Recipe found in JSON-LD block %d", idx)
            return recipe
        logger.debug("JSON-LD block %d holds no Recipe", idx)

    logger.warning("No Recipe found in %d JSON-LD blocks", len(scripts))
    return None
