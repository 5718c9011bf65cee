"""
Startup CSV ingestion.

Responsibilities:
- encoding detection + decoding
- header detection
- row validation (bad rows are logged and skipped, never fatal)
- building the immutable movie catalog
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from charset_normalizer import from_bytes

from .catalog import MovieCatalog
from .models import Movie
from .rules import (
    CSV_DELIMITER,
    CSV_MIN_COLUMNS,
    FALSY_TOKENS,
    HEADER_MARKER,
    TRUTHY_TOKENS,
)

logger = logging.getLogger(__name__)


class IngestionError(RuntimeError):
    """Raised when the CSV source cannot be read at all."""


def decode_csv_bytes(raw: bytes) -> str:
    """
    Decode input bytes to text.

    Rules:
    - Detect encoding best-effort via charset-normalizer.
    - A UTF-8 BOM is consumed rather than kept as the first character.
    - If decode fails, fall back to UTF-8, then UTF-8 with replacement characters.
    """
    if not raw:
        return ""

    match = from_bytes(raw).best()
    decode_used = match.encoding if match is not None else "utf-8"

    if raw.startswith(b"\xef\xbb\xbf") and decode_used.lower().replace("-", "_") in ("utf_8", "utf8"):
        decode_used = "utf-8-sig"

    try:
        return raw.decode(decode_used)
    except (LookupError, UnicodeDecodeError):
        logger.warning("Could not decode CSV as %s, falling back to utf-8", decode_used)

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        # Last resort: keep going with replacement characters
        return raw.decode("utf-8", errors="replace")


def is_header_row(row: Sequence[str]) -> bool:
    if len(row) >= 2:
        return HEADER_MARKER in row[0].strip().lower()
    return False


def parse_year(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("Invalid year format: %s", value)
        return None


def parse_winner(value: Optional[str]) -> Optional[bool]:
    """
    Interpret the winner column.

    Blank means not a winner. Unknown tokens return None so the row
    can be rejected.
    """
    if value is None or not value.strip():
        return False

    token = value.strip().lower()
    if token in TRUTHY_TOKENS:
        return True
    if token in FALSY_TOKENS:
        return False
    return None


def parse_movie_row(row: Sequence[str], line_number: int) -> Optional[Movie]:
    if len(row) < CSV_MIN_COLUMNS:
        logger.warning(
            "CSV record at line %d has insufficient columns (expected %d, got %d)",
            line_number,
            CSV_MIN_COLUMNS,
            len(row),
        )
        return None

    year = parse_year(row[0])
    title = row[1].strip()
    studios = row[2].strip()
    producers = row[3].strip()
    winner = parse_winner(row[4])

    if year is None or not title or not producers or winner is None:
        logger.warning("CSV record at line %d has invalid or missing required fields", line_number)
        return None

    return Movie(
        year=year,
        title=title,
        studios=studios or None,
        producers=producers,
        winner=winner,
    )


def iter_csv_rows(text: str, delimiter: str = CSV_DELIMITER) -> Iterator[Tuple[int, List[str]]]:
    """
    Yield ``(line_number, row)`` pairs.

    Rows the csv module cannot parse (e.g. a field over the size limit)
    are logged and skipped.
    """
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            logger.warning("Error parsing CSV record at line %d: %s. Skipping record.", reader.line_num, exc)
            continue
        yield reader.line_num, row


def parse_csv_bytes(raw: bytes, delimiter: str = CSV_DELIMITER) -> List[Movie]:
    text = decode_csv_bytes(raw)

    movies: List[Movie] = []
    first = True
    for line_number, row in iter_csv_rows(text, delimiter=delimiter):
        if first:
            first = False
            if is_header_row(row):
                continue
        if not any(cell.strip() for cell in row):
            continue
        movie = parse_movie_row(row, line_number)
        if movie is not None:
            movies.append(movie)

    if first:
        logger.warning("CSV content is empty")
    return movies


def load_catalog(path: Union[str, Path], delimiter: str = CSV_DELIMITER) -> MovieCatalog:
    """
    Read the CSV file at ``path`` into a catalog.

    A missing file gives an empty catalog. Any other read failure raises
    IngestionError.
    """
    csv_path = Path(path)
    logger.info("Starting CSV data loading from %s", csv_path)

    if not csv_path.exists():
        logger.warning("CSV file %s not found. Creating empty dataset.", csv_path)
        return MovieCatalog()

    try:
        raw = csv_path.read_bytes()
    except OSError as exc:
        logger.error("Error loading CSV data: %s", exc)
        raise IngestionError(f"Failed to load CSV data from {csv_path}") from exc

    catalog = MovieCatalog(parse_csv_bytes(raw, delimiter=delimiter))
    logger.info(
        "Loaded %d movies from CSV file (%d winners)",
        len(catalog),
        catalog.winner_count,
    )
    return catalog
