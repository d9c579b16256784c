"""
Create the catalog schema and seed reference data.
Seeds the MPA ratings and genres every catalog starts with; existing rows are left alone.
"""

import sys
from pathlib import Path

# Add parent directory to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

import argparse
import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from filmorate_recommendation_service.models import Base
from filmorate_recommendation_service.repos import GenreRepository, MpaRepository

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

MPA_RATINGS = [
    (1, 'G'),
    (2, 'PG'),
    (3, 'PG-13'),
    (4, 'R'),
    (5, 'NC-17'),
]

GENRES = [
    (1, 'Comedy'),
    (2, 'Drama'),
    (3, 'Cartoon'),
    (4, 'Thriller'),
    (5, 'Documentary'),
    (6, 'Action'),
]


def create_schema(engine: Engine, drop_existing: bool = False) -> None:
    """
    Create all tables.

    Args:
        engine: SQLAlchemy engine
        drop_existing: Drop every table first (destroys data)
    """
    if drop_existing:
        logger.info("Dropping existing tables...")
        Base.metadata.drop_all(engine)

    Base.metadata.create_all(engine)
    logger.info(f"✓ Schema ready ({len(Base.metadata.tables)} tables)")


def seed_reference_data(db: Session) -> dict:
    """
    Insert the standard MPA ratings and genres that are missing.

    Args:
        db: Database session

    Returns:
        Dict with number of inserted rows per table
    """
    mpa_repo = MpaRepository(db)
    existing_mpa = {mpa.id for mpa in mpa_repo.get_all_mpa()}
    new_mpa = [(row_id, name) for row_id, name in MPA_RATINGS if row_id not in existing_mpa]
    for row_id, name in new_mpa:
        mpa_repo.create_mpa({'id': row_id, 'name': name})

    genre_repo = GenreRepository(db)
    existing_genres = {genre.id for genre in genre_repo.get_all_genres()}
    new_genres = [(row_id, name) for row_id, name in GENRES if row_id not in existing_genres]
    for row_id, name in new_genres:
        genre_repo.create_genre({'id': row_id, 'name': name})

    inserted = {'mpa_ratings': len(new_mpa), 'genres': len(new_genres)}
    logger.info(f"✓ Seeded {inserted['mpa_ratings']} MPA ratings and {inserted['genres']} genres")
    return inserted


def main():
    """Main execution function."""
    parser = argparse.ArgumentParser(
        description='Create the film catalog schema and seed reference data'
    )
    parser.add_argument(
        '--drop',
        action='store_true',
        help='Drop existing tables before creating them (destroys data)'
    )
    parser.add_argument(
        '--skip-seed',
        action='store_true',
        help='Create tables only, without reference data'
    )

    args = parser.parse_args()

    from filmorate_recommendation_service.models.database import SessionLocal, engine

    logger.info("="*70)
    logger.info("INITIALIZE DATABASE")
    logger.info("="*70)
    logger.info(f"Drop existing tables: {args.drop}")
    logger.info(f"Skip seeding: {args.skip_seed}")

    try:
        create_schema(engine, drop_existing=args.drop)

        if not args.skip_seed:
            db = SessionLocal()
            try:
                seed_reference_data(db)
            finally:
                db.close()
        else:
            logger.info("\n⊘ Skipping reference data")

        logger.info("="*70)
        logger.info("✓ DATABASE INITIALIZATION COMPLETE")
        logger.info("="*70)

    except Exception as e:
        logger.error(f"Error during database initialization: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
