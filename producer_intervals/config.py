from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .rules import CSV_DELIMITER

ENV_PREFIX = "PRODUCER_INTERVALS_"
DEFAULT_CSV_PATH = Path(__file__).resolve().parent / "data" / "movielist.csv"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    csv_path: Path = DEFAULT_CSV_PATH
    csv_delimiter: str = CSV_DELIMITER
    api_key: Optional[str] = None
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        def get(name: str, default: str) -> str:
            return env.get(ENV_PREFIX + name, default)

        return cls(
            csv_path=Path(get("CSV_PATH", str(DEFAULT_CSV_PATH))),
            csv_delimiter=get("CSV_DELIMITER", CSV_DELIMITER),
            # empty means unset
            api_key=get("API_KEY", "") or None,
            log_level=get("LOG_LEVEL", "INFO").upper(),
            host=get("HOST", "0.0.0.0"),
            port=_parse_port(get("PORT", "8080")),
        )


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {value!r}") from None


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
