"""A user's like of a film."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer

from filmorate_recommendation_service.models.base import Base


class Like(Base):
    """One row per (film, user) pair.

    The composite primary key gives likes set semantics: a user either
    likes a film or does not.
    """

    __tablename__ = "likes"

    film_id = Column(Integer, ForeignKey("films.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, primary_key=True)

    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("idx_likes_user_id", "user_id"),
    )

    def __repr__(self):
        return f"<Like(film_id={self.film_id}, user_id={self.user_id})>"
