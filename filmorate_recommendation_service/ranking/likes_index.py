"""Read access to the user/film likes relation."""
from collections import Counter, defaultdict
from typing import Dict, Iterable, Optional, Protocol, Set, Tuple


class LikesIndex(Protocol):
    """
    Read operations the ranking engine needs over the likes relation.

    Implemented by LikesRepository (SQL) and InMemoryLikesIndex.
    """

    def liked_film_ids(self, user_id: int) -> Set[int]:
        ...

    def like_count(self, film_id: int) -> int:
        ...

    def like_counts(self, film_ids: Optional[Iterable[int]] = None) -> Dict[int, int]:
        ...

    def overlap_counts(self, user_id: int) -> Dict[int, int]:
        ...


class InMemoryLikesIndex:
    """
    LikesIndex over a set of (user_id, film_id) pairs held in memory.

    Args:
        likes: Iterable of (user_id, film_id) pairs; repeats collapse
    """

    def __init__(self, likes: Iterable[Tuple[int, int]] = ()):
        self._films_by_user: Dict[int, Set[int]] = defaultdict(set)
        self._users_by_film: Dict[int, Set[int]] = defaultdict(set)
        for user_id, film_id in likes:
            self.add_like(user_id, film_id)

    def add_like(self, user_id: int, film_id: int) -> bool:
        """Record a like. Returns False if it was already present."""
        if film_id in self._films_by_user[user_id]:
            return False
        self._films_by_user[user_id].add(film_id)
        self._users_by_film[film_id].add(user_id)
        return True

    def remove_like(self, user_id: int, film_id: int) -> bool:
        """Drop a like. Returns False if it was not present."""
        if film_id not in self._films_by_user.get(user_id, set()):
            return False
        self._films_by_user[user_id].discard(film_id)
        self._users_by_film[film_id].discard(user_id)
        return True

    def liked_film_ids(self, user_id: int) -> Set[int]:
        return set(self._films_by_user.get(user_id, set()))

    def like_count(self, film_id: int) -> int:
        return len(self._users_by_film.get(film_id, set()))

    def like_counts(self, film_ids: Optional[Iterable[int]] = None) -> Dict[int, int]:
        if film_ids is None:
            return {
                film_id: len(users)
                for film_id, users in self._users_by_film.items()
                if users
            }
        return {film_id: self.like_count(film_id) for film_id in film_ids}

    def overlap_counts(self, user_id: int) -> Dict[int, int]:
        counts: Counter = Counter()
        for film_id in self._films_by_user.get(user_id, set()):
            for other_user_id in self._users_by_film[film_id]:
                if other_user_id != user_id:
                    counts[other_user_id] += 1
        return dict(counts)
