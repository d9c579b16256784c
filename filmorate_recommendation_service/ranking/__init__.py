"""Like-based ranking and recommendation engine"""

from .likes_index import InMemoryLikesIndex, LikesIndex
from .overlap_finder import OverlapFinder
from .popularity_ranker import PopularityRanker
from .recommender import Recommender

__all__ = [
    "InMemoryLikesIndex",
    "LikesIndex",
    "OverlapFinder",
    "PopularityRanker",
    "Recommender",
]
