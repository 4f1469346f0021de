#!/usr/bin/env python
"""
Run the JSON-LD recipe import over a saved HTML page and print the result.

Run manually:
    python scripts/import_html.py page.html --url https://www.ica.se/recept/...
"""
import argparse
import logging
import sys
from pathlib import Path

from recipe_importer.app.core.config import get_settings
from recipe_importer.app.services.recipe_import_service import import_recipe_from_html

logger = logging.getLogger("import_html")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("path", type=Path, help="HTML file to import")
    parser.add_argument("--url", default="", help="source URL recorded on the draft")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))

    html = args.path.read_text(encoding="utf-8", errors="replace")
    result = import_recipe_from_html(html, args.url or args.path.resolve().as_uri())
    print(result.model_dump_json(indent=2))
    if not result.success:
        logger.warning("Import failed: %s", result.error_message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
