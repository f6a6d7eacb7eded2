import os

# /* ~~~ search defaults (overridable per finder / per call) ~~~ */
MIN_MATCH_COUNT: int = 1
CASE_SENSITIVE: bool = False
STRICT_TOKENS: bool = False

# Ranking weights, per occurrence of a query token inside a sentence token
EXACT_WEIGHT: int = 10
PREFIX_WEIGHT: int = 2
SUBSTRING_WEIGHT: int = 1

# Loader: file types to include and folders to skip
INCLUDE_EXTS = (".txt",)
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}

# Text unit for loading: "line" or "paragraph"
TEXT_UNIT: str = "line"

# How many rows the CLI / web API show by default
TOP_K: int = 10

# Progress logging (set SENTENCE_FINDER_VERBOSE=1 to enable)
VERBOSE = os.environ.get("SENTENCE_FINDER_VERBOSE") == "1"
