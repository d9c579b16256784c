"""Shared test fixtures and configuration for pytest."""
import os

# Keep the module-level engine off MySQL when the package is imported in tests
os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')

import json
from datetime import date
from typing import Dict, List
from unittest.mock import Mock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from filmorate_recommendation_service.models import Base, Director, Film, Genre, Like, MpaRating


# ===== Database Fixtures =====

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database engine shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session_factory(test_db_engine):
    """Session factory bound to the test engine, as passed to services."""
    return sessionmaker(bind=test_db_engine, autoflush=False)


@pytest.fixture(scope="function")
def test_db_session(test_session_factory):
    """Create a database session for testing."""
    session = test_session_factory()
    yield session
    session.close()


# ===== Sample Data Fixtures =====

@pytest.fixture
def sample_reference_data(test_db_session) -> Dict:
    """MPA ratings, genres and directors in the test database."""
    mpa = [MpaRating(id=1, name='G'), MpaRating(id=2, name='PG'), MpaRating(id=4, name='R')]
    genres = [Genre(id=1, name='Comedy'), Genre(id=2, name='Drama'), Genre(id=4, name='Thriller')]
    directors = [Director(id=1, name='Christopher Nolan'), Director(id=2, name='Greta Gerwig')]

    test_db_session.add_all(mpa + genres + directors)
    test_db_session.commit()

    return {'mpa': mpa, 'genres': genres, 'directors': directors}


@pytest.fixture
def sample_films(test_db_session, sample_reference_data) -> List[Film]:
    """Five films with mixed genres and release years."""
    genres = {genre.id: genre for genre in sample_reference_data['genres']}
    directors = {director.id: director for director in sample_reference_data['directors']}
    mpa = {rating.id: rating for rating in sample_reference_data['mpa']}

    films = [
        Film(id=1, name='Memento', description='A man with short-term memory loss.',
             release_date=date(2000, 9, 5), duration=113, rating=8, mpa=mpa[4],
             genres=[genres[4]], directors=[directors[1]]),
        Film(id=2, name='Lady Bird', description='A coming-of-age story.',
             release_date=date(2017, 9, 1), duration=94, rating=7, mpa=mpa[4],
             genres=[genres[1], genres[2]], directors=[directors[2]]),
        Film(id=3, name='Inception', description='Dreams within dreams.',
             release_date=date(2010, 7, 8), duration=148, rating=9, mpa=mpa[2],
             genres=[genres[4]], directors=[directors[1]]),
        Film(id=4, name='Little Women', description='Four sisters grow up.',
             release_date=date(2019, 12, 7), duration=135, rating=8, mpa=mpa[2],
             genres=[genres[2]], directors=[directors[2]]),
        Film(id=5, name='Frances Ha', description='A dancer in New York.',
             release_date=date(2012, 9, 1), duration=86, rating=7, mpa=mpa[1],
             genres=[genres[1], genres[2]], directors=[]),
    ]

    test_db_session.add_all(films)
    test_db_session.commit()
    return films


@pytest.fixture
def add_likes(test_db_session):
    """Insert (user_id, film_id) like pairs directly."""
    def _add_likes(pairs):
        for user_id, film_id in pairs:
            test_db_session.add(Like(film_id=film_id, user_id=user_id))
        test_db_session.commit()
    return _add_likes


@pytest.fixture
def sample_film_payload() -> Dict:
    """Valid film payload as received over HTTP."""
    return {
        'name': 'Oppenheimer',
        'description': 'The story of the atomic bomb.',
        'release_date': '2023-07-21',
        'duration': 180,
        'rating': 9,
        'mpa': {'id': 4},
        'genres': [{'id': 2}, {'id': 4}, {'id': 2}],
        'directors': [{'id': 1}, {'id': 1}],
    }


# ===== Mock Fixtures =====

@pytest.fixture
def mock_database_session():
    """Mock database session."""
    mock_session = Mock(spec=Session)
    mock_session.query.return_value = mock_session
    mock_session.filter = Mock(return_value=mock_session)
    mock_session.first = Mock(return_value=None)
    mock_session.all = Mock(return_value=[])
    mock_session.count = Mock(return_value=0)
    mock_session.close.return_value = None
    return mock_session


# ===== Configuration Fixtures =====

@pytest.fixture
def mock_local_settings(tmp_path):
    """Write a local.settings.json file and return its directory."""
    settings = {
        "Values": {
            "DATABASE_URL": "sqlite:///from_settings.db",
            "POPULAR_FILMS_DEFAULT_COUNT": "25"
        }
    }

    settings_file = tmp_path / "local.settings.json"
    with open(settings_file, 'w') as f:
        json.dump(settings, f)

    yield tmp_path


# ===== Azure Functions Fixtures =====

@pytest.fixture
def mock_http_request():
    """Mock Azure Functions HttpRequest."""
    mock_req = Mock()
    mock_req.route_params = {}
    mock_req.params = {}
    mock_req.get_json.return_value = {}
    return mock_req


# ===== Repository Fixtures =====

@pytest.fixture
def film_repository(test_db_session):
    """Create FilmRepository with test database session."""
    from filmorate_recommendation_service.repos import FilmRepository
    return FilmRepository(test_db_session)


@pytest.fixture
def likes_repository(test_db_session):
    """Create LikesRepository with test database session."""
    from filmorate_recommendation_service.repos import LikesRepository
    return LikesRepository(test_db_session)


@pytest.fixture
def mpa_repository(test_db_session):
    """Create MpaRepository with test database session."""
    from filmorate_recommendation_service.repos import MpaRepository
    return MpaRepository(test_db_session)


# ===== Script Fixtures =====

@pytest.fixture
def mock_sys_argv(monkeypatch):
    """Mock sys.argv for script testing."""
    def _mock_argv(args):
        monkeypatch.setattr('sys.argv', args)
    return _mock_argv


@pytest.fixture
def genre_repository(test_db_session):
    """Create GenreRepository with test database session."""
    from filmorate_recommendation_service.repos import GenreRepository
    return GenreRepository(test_db_session)


@pytest.fixture
def director_repository(test_db_session):
    """Create DirectorRepository with test database session."""
    from filmorate_recommendation_service.repos import DirectorRepository
    return DirectorRepository(test_db_session)
