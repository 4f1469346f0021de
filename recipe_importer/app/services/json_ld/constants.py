"""Lexicons and fixed texts used by the JSON-LD recipe parsers."""

# Measurement units recognized after a leading quantity. Matching is
# case-insensitive and the spelling here is what ends up in the draft.
# "cl" is intentionally absent.
SWEDISH_UNITS = [
    # volume
    "krm",
    "tsk",
    "msk",
    "ml",
    "dl",
    "l",
    "liter",
    # weight
    "mg",
    "g",
    "gram",
    "hg",
    "kg",
    # count / piece
    "st",
    "styck",
    "klyfta",
    "klyftor",
    "skiva",
    "skivor",
    "kvist",
    "kvistar",
    "knippe",
    "nypa",
    # retail packaging
    "förp",
    "förpackning",
    "förpackningar",
    "burk",
    "burkar",
    "påse",
    "påsar",
    "paket",
    "kruka",
    "krukor",
    "ask",
]

ENGLISH_UNITS = [
    # volume
    "cup",
    "cups",
    "tablespoon",
    "tablespoons",
    "tbsp",
    "teaspoon",
    "teaspoons",
    "tsp",
    "pint",
    "pints",
    "quart",
    "quarts",
    # weight
    "ounce",
    "ounces",
    "oz",
    "pound",
    "pounds",
    "lb",
    "lbs",
    "grams",
    # count / piece
    "clove",
    "cloves",
    "slice",
    "slices",
    "piece",
    "pieces",
    "pinch",
    # retail packaging
    "can",
    "cans",
    "package",
    "packages",
    "jar",
    "jars",
]

UNIT_LEXICON = SWEDISH_UNITS + ENGLISH_UNITS

APPROXIMATION_PREFIXES = ["ca.", "ca", "about"]

RECIPE_TYPE = "recipe"
SECTION_TYPE = "howtosection"
GRAPH_KEY = "@graph"

NO_INSTRUCTIONS_WARNING = "No instructions found in the recipe"
NO_NAME_WARNING = "Recipe has no name"
LOW_CONFIDENCE_WARNING = 'Low-confidence ingredient parse: "{text}"'
NO_RECIPE_FOUND_MESSAGE = "No schema.org Recipe data was found on the page."
