"""Repository for MPA rating reference data."""

import logging

from sqlalchemy.orm import Session

from filmorate_recommendation_service.exceptions import MpaNotFoundError
from filmorate_recommendation_service.models import MpaRating

logger = logging.getLogger(__name__)


class MpaRepository:
    def __init__(self, db: Session):
        self.db = db

    # noinspection PyTypeChecker
    def get_all_mpa(self) -> list[MpaRating]:
        """Get all MPA ratings ordered by ID."""
        return self.db.query(MpaRating).order_by(MpaRating.id).all()

    def get_mpa(self, mpa_id: int) -> MpaRating:
        """
        Get MPA rating by ID.

        Raises:
            MpaNotFoundError: If no rating has this ID
        """
        mpa = self.db.query(MpaRating).filter(MpaRating.id == mpa_id).first()
        if mpa is None:
            logger.warning(f"MPA rating {mpa_id} not found")
            raise MpaNotFoundError(mpa_id)
        return mpa

    def create_mpa(self, mpa_data: dict) -> MpaRating:
        """
        Store a new MPA rating.

        Args:
            mpa_data: Dict with name and optionally id

        Returns:
            MpaRating object
        """
        mpa = MpaRating(id=mpa_data.get("id"), name=mpa_data["name"])
        self.db.add(mpa)
        self.db.commit()
        self.db.refresh(mpa)

        logger.info(f"Created MPA rating {mpa.id} '{mpa.name}'")
        return mpa
