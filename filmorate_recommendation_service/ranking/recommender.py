"""Recommend films from the likes of overlapping users."""
import logging
from typing import List, Optional

from filmorate_recommendation_service.ranking.likes_index import LikesIndex
from filmorate_recommendation_service.ranking.overlap_finder import OverlapFinder

logger = logging.getLogger(__name__)


class Recommender:
    """
    Suggest films a user has not liked yet.

    Peers are visited in overlap order (see OverlapFinder.ranked_overlap_peers).
    The first peer who liked something the user has not liked supplies the
    whole recommendation; later peers are never consulted, even if they
    would add more films.
    """

    def __init__(self, likes: LikesIndex, overlap_finder: Optional[OverlapFinder] = None):
        self.likes = likes
        self.overlap_finder = overlap_finder or OverlapFinder(likes)

    def recommend(self, user_id: int) -> List[int]:
        """
        Get recommended film IDs for a user.

        Args:
            user_id: Target user

        Returns:
            Film IDs in ascending order, or an empty list when no peer has
            anything to add
        """
        liked = self.likes.liked_film_ids(user_id)
        if not liked:
            return []

        for peer_id, overlap in self.overlap_finder.ranked_overlap_peers(user_id):
            candidates = self.likes.liked_film_ids(peer_id) - liked
            if not candidates:
                continue

            logger.info(
                f"Recommending {len(candidates)} films to user {user_id} "
                f"from peer {peer_id} (overlap {overlap})"
            )
            return sorted(candidates)

        logger.info(f"No recommended films found for user {user_id}")
        return []
