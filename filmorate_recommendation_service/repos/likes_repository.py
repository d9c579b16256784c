"""Repository for user likes of films."""

import logging
from typing import Dict, Iterable, Optional, Set

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, aliased

from filmorate_recommendation_service.models import Like

logger = logging.getLogger(__name__)


class LikesRepository:
    """
    Repository for user likes of films.

    Every read goes to the database, so a like written through this
    repository is visible to the next ranking or recommendation call.
    """

    def __init__(self, db: Session):
        self.db = db

    def add_like(self, user_id: int, film_id: int) -> bool:
        """
        Record that a user likes a film.

        Args:
            user_id: User ID
            film_id: Film ID

        Returns:
            True if the like was created, False if it already existed
        """
        existing = (
            self.db.query(Like)
            .filter(Like.film_id == film_id, Like.user_id == user_id)
            .first()
        )
        if existing:
            return False

        self.db.add(Like(film_id=film_id, user_id=user_id))
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent insert of the same like
            self.db.rollback()
            return False

        logger.info(f"User {user_id} liked film {film_id}")
        return True

    def remove_like(self, user_id: int, film_id: int) -> bool:
        """
        Remove a user's like of a film.

        Returns:
            True if a like was removed, False if there was none
        """
        count = (
            self.db.query(Like)
            .filter(Like.film_id == film_id, Like.user_id == user_id)
            .delete()
        )
        self.db.commit()

        if count:
            logger.info(f"User {user_id} removed like from film {film_id}")
        return count > 0

    # noinspection PyTypeChecker
    def liked_film_ids(self, user_id: int) -> Set[int]:
        """Get IDs of all films a user liked."""
        result = self.db.query(Like.film_id).filter(Like.user_id == user_id).all()
        return {row[0] for row in result}

    def like_count(self, film_id: int) -> int:
        """Count likes of a film (0 if none)."""
        return self.db.query(Like).filter(Like.film_id == film_id).count()

    def like_counts(self, film_ids: Optional[Iterable[int]] = None) -> Dict[int, int]:
        """
        Count likes per film.

        Args:
            film_ids: Restrict to these films. Otherwise count every liked film.

        Returns:
            Dict mapping film ID to like count. Films without likes are
            present (as 0) only when film_ids is given.
        """
        query = self.db.query(Like.film_id, func.count(Like.user_id)).group_by(Like.film_id)

        if film_ids is not None:
            film_ids = list(film_ids)
            if not film_ids:
                return {}
            query = query.filter(Like.film_id.in_(film_ids))
            counts = {film_id: 0 for film_id in film_ids}
        else:
            counts = {}

        for film_id, count in query.all():
            counts[film_id] = count
        return counts

    def overlap_counts(self, user_id: int) -> Dict[int, int]:
        """
        Count, for every other user, the films both they and the given user liked.

        Args:
            user_id: Target user

        Returns:
            Dict mapping other user ID to number of shared liked films.
            Users with nothing in common are absent.
        """
        mine = aliased(Like)
        theirs = aliased(Like)
        result = (
            self.db.query(theirs.user_id, func.count(theirs.film_id))
            .join(mine, mine.film_id == theirs.film_id)
            .filter(mine.user_id == user_id, theirs.user_id != user_id)
            .group_by(theirs.user_id)
            .all()
        )
        return {peer_id: count for peer_id, count in result}

    def count_likes(self) -> int:
        """Count all likes."""
        return self.db.query(Like).count()

    def count_users(self) -> int:
        """Count users who liked at least one film."""
        return self.db.query(Like.user_id).distinct().count()
