"""Film catalog entry with its genre and director tags."""
from sqlalchemy import Column, Date, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from filmorate_recommendation_service.models.base import Base
from filmorate_recommendation_service.models.director import Director
from filmorate_recommendation_service.models.genre import Genre

# Composite primary keys: a (film, tag) pair can only be stored once
film_genres = Table(
    "film_genres",
    Base.metadata,
    Column("film_id", Integer, ForeignKey("films.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", Integer, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)

film_directors = Table(
    "film_directors",
    Base.metadata,
    Column("film_id", Integer, ForeignKey("films.id", ondelete="CASCADE"), primary_key=True),
    Column("director_id", Integer, ForeignKey("directors.id", ondelete="CASCADE"), primary_key=True),
)


class Film(Base):
    __tablename__ = "films"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(String(200), nullable=True)
    release_date = Column(Date, nullable=True)
    duration = Column(Integer, nullable=True)
    rating = Column(Integer, nullable=False, default=0)
    mpa_rating_id = Column(Integer, ForeignKey("mpa_ratings.id"), nullable=True)

    mpa = relationship("MpaRating", lazy="joined")
    genres = relationship(Genre, secondary=film_genres, order_by=Genre.id)
    directors = relationship(Director, secondary=film_directors, order_by=Director.id)

    @property
    def genre_ids(self) -> set[int]:
        return {genre.id for genre in self.genres}

    @property
    def director_ids(self) -> set[int]:
        return {director.id for director in self.directors}

    def __repr__(self):
        return f"<Film(id={self.id}, name='{self.name}')>"
