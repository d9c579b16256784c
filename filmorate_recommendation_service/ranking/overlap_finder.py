"""Find films and users that share likes."""
import logging
from typing import List, Set, Tuple

from filmorate_recommendation_service.ranking.likes_index import LikesIndex

logger = logging.getLogger(__name__)


class OverlapFinder:
    """Compare liked-film sets between users."""

    def __init__(self, likes: LikesIndex):
        self.likes = likes

    def common_films(self, user_id: int, other_user_id: int) -> Set[int]:
        """
        Get the films both users liked.

        Args:
            user_id: First user
            other_user_id: Second user

        Returns:
            Set of film IDs (empty if either user liked nothing)
        """
        liked = self.likes.liked_film_ids(user_id)
        if not liked:
            return set()
        other_liked = self.likes.liked_film_ids(other_user_id)
        return liked & other_liked

    def common_films_ranked(self, user_id: int, other_user_id: int) -> List[int]:
        """
        Get the films both users liked, most liked overall first.

        Ties are broken by film ID ascending.
        """
        common = self.common_films(user_id, other_user_id)
        if not common:
            return []
        counts = self.likes.like_counts(common)
        return sorted(common, key=lambda film_id: (-counts.get(film_id, 0), film_id))

    def ranked_overlap_peers(self, user_id: int) -> List[Tuple[int, int]]:
        """
        Get other users ranked by how many liked films they share with a user.

        Args:
            user_id: Target user

        Returns:
            List of (peer user ID, overlap count) tuples, overlap descending,
            then user ID ascending. Users with no shared likes are left out.
        """
        overlaps = self.likes.overlap_counts(user_id)
        peers = [
            (peer_id, count)
            for peer_id, count in overlaps.items()
            if peer_id != user_id and count > 0
        ]
        peers.sort(key=lambda peer: (-peer[1], peer[0]))

        logger.debug(f"User {user_id} has {len(peers)} overlapping peers")
        return peers
