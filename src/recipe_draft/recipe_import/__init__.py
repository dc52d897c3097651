"""Recipe import pipeline for turning web pages into recipe drafts."""

from .extractor import DEFAULT_FALLBACK_MESSAGE, import_from, parse_page
from .fetcher import FetchError, fetch_page
from .heuristics import extract_heuristic
from .html_text import normalize_html
from .json_ld import SchemaRecipe, extract_structured
from .wprm import extract_wprm

__all__ = [
    "DEFAULT_FALLBACK_MESSAGE",
    "import_from",
    "parse_page",
    "FetchError",
    "fetch_page",
    "extract_heuristic",
    "normalize_html",
    "SchemaRecipe",
    "extract_structured",
    "extract_wprm",
]
