"""Rank films by how many users liked them."""
import logging
from typing import Iterable, List, Optional

from filmorate_recommendation_service.exceptions import ValidationError
from filmorate_recommendation_service.models import Film
from filmorate_recommendation_service.ranking.likes_index import LikesIndex

logger = logging.getLogger(__name__)


class PopularityRanker:
    """Order films by like count, optionally restricted by genre and release year."""

    def __init__(self, likes: LikesIndex):
        self.likes = likes

    def rank(
        self,
        films: Iterable[Film],
        limit: int,
        genre_id: Optional[int] = None,
        year: Optional[int] = None
    ) -> List[Film]:
        """
        Get the most liked films.

        Films nobody liked are still returned, after every liked film,
        while there is room under the limit.

        Args:
            films: Candidate films (the whole catalog)
            limit: Maximum number of films to return
            genre_id: Only keep films tagged with this genre
            year: Only keep films released in this year

        Returns:
            Films sorted by like count descending, then film ID ascending
        """
        if limit < 0:
            raise ValidationError(f"limit must be non-negative, got {limit}")
        if limit == 0:
            return []

        candidates = [
            film for film in films
            if self._matches(film, genre_id, year)
        ]
        if not candidates:
            return []

        counts = self.likes.like_counts([film.id for film in candidates])
        candidates.sort(key=lambda film: (-counts.get(film.id, 0), film.id))

        logger.debug(
            f"Ranked {len(candidates)} films (genre={genre_id}, year={year}), keeping {limit}"
        )
        return candidates[:limit]

    def _matches(self, film: Film, genre_id: Optional[int], year: Optional[int]) -> bool:
        if genre_id is not None and genre_id not in film.genre_ids:
            return False
        if year is not None:
            if film.release_date is None or film.release_date.year != year:
                return False
        return True
