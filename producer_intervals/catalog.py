from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import Movie, WinningRecord


class MovieCatalog:
    """Read-only snapshot of the movies ingested at startup."""

    def __init__(self, movies: Iterable[Movie] = ()):
        self._movies: Tuple[Movie, ...] = tuple(movies)

    @property
    def movies(self) -> Tuple[Movie, ...]:
        return self._movies

    @property
    def winner_count(self) -> int:
        return sum(1 for movie in self._movies if movie.winner)

    def __len__(self) -> int:
        return len(self._movies)

    def winning_records(self) -> List[WinningRecord]:
        """Winners ordered by year; same-year winners keep file order."""
        winners = sorted(
            (movie for movie in self._movies if movie.winner),
            key=lambda movie: movie.year,
        )
        return [
            WinningRecord(year=movie.year, raw_producers=movie.producers)
            for movie in winners
        ]
