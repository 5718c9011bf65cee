"""
Deterministic parsing rules.

Producer-name cleaning and CSV layout are fixed here so ingestion and
analysis agree on them.
"""

import re

# Producer field splitting + cleaning
PRODUCER_SEPARATORS = re.compile(r"[,&]|\band\b")
ROLE_PREFIX = re.compile(r"^(Producer|Produced by|Executive Producer):?\s*", re.ASCII)
TRAILING_PARENTHETICAL = re.compile(r"\s*\(.*\)$", re.ASCII)
WHITESPACE_RUN = re.compile(r"\s+", re.ASCII)
HAS_LETTER = re.compile(r"[a-zA-Z]")
MIN_NAME_LENGTH = 2
# characters trimmed from names: ASCII control characters and space
TRIM_CHARS = "".join(chr(code) for code in range(33))

# Winner flag tokens (compared lower-cased)
TRUTHY_TOKENS = frozenset({"yes", "true", "1", "y"})
FALSY_TOKENS = frozenset({"no", "false", "0", "n"})

# CSV layout: year;title;studios;producers;winner
CSV_DELIMITER = ";"
CSV_MIN_COLUMNS = 5
HEADER_MARKER = "year"

API_KEY_HEADER = "x-api-key"
