"""Service for like-based film rankings and recommendations."""
import logging
from typing import Callable, Dict, List, Optional

from sqlalchemy.orm import Session

from filmorate_recommendation_service.config import get_default_popular_count
from filmorate_recommendation_service.exceptions import FilmNotFoundError
from filmorate_recommendation_service.models.database import SessionLocal
from filmorate_recommendation_service.ranking import OverlapFinder, PopularityRanker, Recommender
from filmorate_recommendation_service.repos import FilmRepository, LikesRepository
from filmorate_recommendation_service.services.film_payloads import format_film

logger = logging.getLogger(__name__)


class FilmRecommendationService:
    """
    Service for like-based film rankings and recommendations.

    Each call opens its own session and re-reads the likes table, so a like
    added or removed is reflected by the very next query. Nothing is cached.
    """

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        """
        Initialize the recommendation service.

        Args:
            session_factory: Callable returning a new Session (default: SessionLocal)
        """
        self.session_factory = session_factory or SessionLocal
        logger.info("Initialized FilmRecommendationService")

    def get_popular_films(
            self,
            count: Optional[int] = None,
            genre_id: Optional[int] = None,
            year: Optional[int] = None
    ) -> List[Dict]:
        """
        Get the most liked films.

        Args:
            count: Maximum number of films (default from config)
            genre_id: Only films with this genre
            year: Only films released in this year

        Returns:
            List of film dicts, most liked first
        """
        if count is None:
            count = get_default_popular_count()

        db = self.session_factory()
        try:
            likes_repo = LikesRepository(db)
            films = FilmRepository(db).get_all_films()

            ranked = PopularityRanker(likes_repo).rank(
                films,
                limit=count,
                genre_id=genre_id,
                year=year
            )
            counts = likes_repo.like_counts([film.id for film in ranked])
            return [format_film(film, counts.get(film.id, 0)) for film in ranked]
        finally:
            db.close()

    def get_common_films(self, user_id: int, friend_id: int) -> List[Dict]:
        """
        Get films both users liked, most liked overall first.

        Args:
            user_id: First user
            friend_id: Second user

        Returns:
            List of film dicts (empty if the users share no likes)
        """
        db = self.session_factory()
        try:
            likes_repo = LikesRepository(db)
            film_ids = OverlapFinder(likes_repo).common_films_ranked(user_id, friend_id)
            return self._resolve_films(db, likes_repo, film_ids)
        finally:
            db.close()

    def get_recommendations(self, user_id: int) -> List[Dict]:
        """
        Get recommended films for a user.

        Args:
            user_id: Target user

        Returns:
            List of film dicts (possibly empty)
        """
        db = self.session_factory()
        try:
            likes_repo = LikesRepository(db)
            film_ids = Recommender(likes_repo).recommend(user_id)
            return self._resolve_films(db, likes_repo, film_ids)
        finally:
            db.close()

    def get_overlap_peers(self, user_id: int) -> List[Dict]:
        """
        Get other users ranked by how many liked films they share with a user.

        Returns:
            List of dicts with user_id and overlap
        """
        db = self.session_factory()
        try:
            peers = OverlapFinder(LikesRepository(db)).ranked_overlap_peers(user_id)
            return [
                {'user_id': peer_id, 'overlap': overlap}
                for peer_id, overlap in peers
            ]
        finally:
            db.close()

    def add_like(self, film_id: int, user_id: int) -> bool:
        """
        Record a like. Adding an existing like changes nothing.

        Returns:
            True if a new like was stored

        Raises:
            FilmNotFoundError: If the film does not exist
        """
        db = self.session_factory()
        try:
            if FilmRepository(db).find_film(film_id) is None:
                logger.warning(f"Cannot like missing film {film_id}")
                raise FilmNotFoundError(film_id)
            return LikesRepository(db).add_like(user_id, film_id)
        finally:
            db.close()

    def remove_like(self, film_id: int, user_id: int) -> bool:
        """
        Remove a like. Removing an absent like changes nothing.

        Returns:
            True if a like was removed
        """
        db = self.session_factory()
        try:
            return LikesRepository(db).remove_like(user_id, film_id)
        finally:
            db.close()

    def get_stats(self) -> Dict:
        """Get statistics about the catalog and likes."""
        db = self.session_factory()
        try:
            likes_repo = LikesRepository(db)
            return {
                'films': FilmRepository(db).count_films(),
                'likes': likes_repo.count_likes(),
                'users_with_likes': likes_repo.count_users(),
            }
        finally:
            db.close()

    def _resolve_films(self, db: Session, likes_repo: LikesRepository, film_ids: List[int]) -> List[Dict]:
        """Load films for IDs, keeping their order."""
        if not film_ids:
            return []
        films = FilmRepository(db).get_films_by_ids(film_ids)
        counts = likes_repo.like_counts(film_ids)
        return [format_film(film, counts.get(film.id, 0)) for film in films]
