"""Shared configuration for the parameter-table converter.

Defaults can be overridden through environment variables (or a ``.env`` file
at the project root):

  PARAMTABLE_INPUT      -- input JSON document (default: info.json)
  PARAMTABLE_SORT       -- key order: source-order, ascending, descending
  PARAMTABLE_LOG_LEVEL  -- logging level name for the CLI (default: INFO)
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")


# ─── CLI Defaults ─────────────────────────────────────────────────────────────

DEFAULT_INPUT_FILE = os.getenv("PARAMTABLE_INPUT", "info.json")
DEFAULT_SORT = os.getenv("PARAMTABLE_SORT", "source-order")
DEFAULT_LOG_LEVEL = os.getenv("PARAMTABLE_LOG_LEVEL", "INFO")

# The rendered table is HTML embedded in a markdown document
OUTPUT_SUFFIX = ".md"


# ─── Leaf Signature ──────────────────────────────────────────────────────────

# A mapping is a leaf iff it holds every required key and nothing outside required + optional
LEAF_REQUIRED_KEYS = frozenset({"header", "description"})
LEAF_OPTIONAL_KEYS = frozenset({"defaultValue", "options"})

# Display name of the empty (root) key path
ROOT_PATH_NAME = "$"


# ─── Markup Labels & Styling ─────────────────────────────────────────────────

HEADER_LABELS = {
    "first": "Parameter",
    "middle": "Sub-parameter",
    "last": "Description",
}

DETAIL_LABELS = {
    "default": "Default",
    "options": "Options",
}

TABLE_CSS = """<style>
	table th,
	table td {
		border:1px solid black;
	}
</style>
"""


def default_output_path(input_path: str | Path) -> Path:
    """Return the input path with its extension replaced by OUTPUT_SUFFIX."""
    return Path(input_path).with_suffix(OUTPUT_SUFFIX)
