"""Shared filesystem paths for the htmx prototype server."""

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
INDEX_TEMPLATE = "index.html"
COUNT_TEMPLATE = "counter/_count.html"
