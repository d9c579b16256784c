"""Unit tests for FilmCatalogService and payload parsing."""
from datetime import date

import pytest

from filmorate_recommendation_service.exceptions import (
    DirectorNotFoundError,
    FilmNotFoundError,
    GenreNotFoundError,
    MpaNotFoundError,
    ValidationError,
)
from filmorate_recommendation_service.services.film_catalog_service import (
    FilmCatalogService,
    normalize_tag_ids,
    parse_film_payload,
)
from scripts.init_database import seed_reference_data


@pytest.fixture
def service(test_session_factory):
    """Catalog service wired to the test database."""
    return FilmCatalogService(session_factory=test_session_factory)


class TestNormalizeTagIds:
    """Tests for normalize_tag_ids function."""

    def test_dedupes_keeping_first_occurrence(self):
        """Test that repeated IDs are kept once, in first-seen order."""
        # Act & Assert
        assert normalize_tag_ids([{'id': 4}, {'id': 2}, {'id': 4}, 1]) == [4, 2, 1]

    def test_none_means_no_tags(self):
        """Test that missing tags become an empty list."""
        # Act & Assert
        assert normalize_tag_ids(None) == []

    def test_invalid_id_raises(self):
        """Test that a tag without a usable ID is rejected."""
        # Act & Assert
        with pytest.raises(ValidationError):
            normalize_tag_ids([{'name': 'Drama'}])


class TestParseFilmPayload:
    """Tests for parse_film_payload function."""

    def test_parse_valid_payload(self, sample_film_payload):
        """Test a valid payload converts to repository form."""
        # Act
        data = parse_film_payload(sample_film_payload)

        # Assert
        assert data['name'] == 'Oppenheimer'
        assert data['release_date'] == date(2023, 7, 21)
        assert data['mpa_id'] == 4
        assert data['genre_ids'] == [2, 4]
        assert data['director_ids'] == [1]

    def test_rating_defaults_to_zero(self, sample_film_payload):
        """Test that a missing rating is stored as 0."""
        # Arrange
        del sample_film_payload['rating']

        # Act & Assert
        assert parse_film_payload(sample_film_payload)['rating'] == 0

    @pytest.mark.parametrize('field,value', [
        ('name', ''),
        ('name', '   '),
        ('name', None),
        ('description', 'x' * 201),
        ('description', 42),
        ('release_date', '1895-12-27'),
        ('release_date', 'yesterday'),
        ('duration', 0),
        ('duration', -5),
        ('duration', '90'),
        ('duration', True),
        ('rating', 'high'),
        ('rating', False),
        ('genres', [{'id': True}]),
        ('mpa', {'id': 'R'}),
        ('mpa', {'id': True}),
    ])
    def test_invalid_field_raises(self, sample_film_payload, field, value):
        """Test the validation rules for each field."""
        # Arrange
        sample_film_payload[field] = value

        # Act & Assert
        with pytest.raises(ValidationError):
            parse_film_payload(sample_film_payload)

    def test_boundary_values_accepted(self, sample_film_payload):
        """Test the earliest date and longest description are allowed."""
        # Arrange
        sample_film_payload['release_date'] = '1895-12-28'
        sample_film_payload['description'] = 'x' * 200

        # Act
        data = parse_film_payload(sample_film_payload)

        # Assert
        assert data['release_date'] == date(1895, 12, 28)
        assert len(data['description']) == 200

    def test_non_dict_payload_raises(self):
        """Test that a JSON array is rejected."""
        # Act & Assert
        with pytest.raises(ValidationError):
            parse_film_payload([1, 2])


class TestCreateAndUpdate:
    """Tests for create_film and update_film methods."""

    def test_create_film_stores_tags_once(self, service, sample_reference_data, sample_film_payload):
        """Test that duplicate genres and directors are stored once."""
        # Act
        film = service.create_film(sample_film_payload)

        # Assert
        assert film['id'] is not None
        assert film['mpa'] == {'id': 4, 'name': 'R'}
        assert [genre['id'] for genre in film['genres']] == [2, 4]
        assert [director['id'] for director in film['directors']] == [1]
        assert film['likes'] == 0
        assert service.get_film(film['id'])['name'] == 'Oppenheimer'

    def test_create_film_unknown_mpa(self, service, sample_reference_data, sample_film_payload):
        """Test creating a film with an unknown MPA rating."""
        # Arrange
        sample_film_payload['mpa'] = {'id': 99}

        # Act & Assert
        with pytest.raises(MpaNotFoundError):
            service.create_film(sample_film_payload)
        assert service.get_all_films() == []

    def test_create_film_unknown_genre(self, service, sample_reference_data, sample_film_payload):
        """Test creating a film with an unknown genre."""
        # Arrange
        sample_film_payload['genres'] = [{'id': 99}]

        # Act & Assert
        with pytest.raises(GenreNotFoundError):
            service.create_film(sample_film_payload)

    def test_update_film(self, service, add_likes, sample_films, sample_film_payload):
        """Test replacing a film's fields and tags."""
        # Arrange
        add_likes([(1, 3), (2, 3)])
        sample_film_payload['id'] = 3

        # Act
        film = service.update_film(sample_film_payload)

        # Assert
        assert film['id'] == 3
        assert film['name'] == 'Oppenheimer'
        assert [genre['id'] for genre in film['genres']] == [2, 4]
        assert film['likes'] == 2

    def test_update_film_without_id(self, service, sample_films, sample_film_payload):
        """Test that an update needs an id."""
        # Act & Assert
        with pytest.raises(ValidationError):
            service.update_film(sample_film_payload)

    def test_update_missing_film(self, service, sample_films, sample_film_payload):
        """Test updating a film that does not exist."""
        # Arrange
        sample_film_payload['id'] = 999

        # Act & Assert
        with pytest.raises(FilmNotFoundError):
            service.update_film(sample_film_payload)


class TestReadsAndDelete:
    """Tests for get_film, get_all_films and delete_film methods."""

    def test_get_film_with_likes(self, service, add_likes, sample_films):
        """Test that a film carries its like count."""
        # Arrange
        add_likes([(1, 2), (2, 2)])

        # Act
        film = service.get_film(2)

        # Assert
        assert film['name'] == 'Lady Bird'
        assert film['likes'] == 2
        assert film['genres'] == [{'id': 1, 'name': 'Comedy'}, {'id': 2, 'name': 'Drama'}]

    def test_get_missing_film(self, service, sample_films):
        """Test reading a film that does not exist."""
        # Act & Assert
        with pytest.raises(FilmNotFoundError):
            service.get_film(999)

    def test_get_all_films(self, service, add_likes, sample_films):
        """Test listing films in ID order."""
        # Arrange
        add_likes([(1, 5)])

        # Act
        films = service.get_all_films()

        # Assert
        assert [film['id'] for film in films] == [1, 2, 3, 4, 5]
        assert films[4]['likes'] == 1
        assert films[0]['likes'] == 0

    def test_delete_film(self, service, add_likes, sample_films):
        """Test deleting a film and its likes."""
        # Arrange
        add_likes([(1, 1)])

        # Act
        service.delete_film(1)

        # Assert
        with pytest.raises(FilmNotFoundError):
            service.get_film(1)
        assert len(service.get_all_films()) == 4

    def test_delete_missing_film(self, service, sample_films):
        """Test deleting a film that does not exist."""
        # Act & Assert
        with pytest.raises(FilmNotFoundError):
            service.delete_film(999)


class TestMpa:
    """Tests for get_all_mpa and get_mpa methods."""

    def test_get_all_mpa(self, service, sample_reference_data):
        """Test listing MPA ratings."""
        # Act & Assert
        assert service.get_all_mpa() == [
            {'id': 1, 'name': 'G'},
            {'id': 2, 'name': 'PG'},
            {'id': 4, 'name': 'R'},
        ]

    def test_get_mpa(self, service, sample_reference_data):
        """Test reading one MPA rating."""
        # Act & Assert
        assert service.get_mpa(2) == {'id': 2, 'name': 'PG'}

    def test_get_missing_mpa(self, service, sample_reference_data):
        """Test reading an MPA rating that does not exist."""
        # Act & Assert
        with pytest.raises(MpaNotFoundError):
            service.get_mpa(3)


class TestGenres:
    """Tests for get_all_genres and get_genre methods."""

    def test_get_all_genres(self, service, sample_reference_data):
        """Test listing genres."""
        # Act & Assert
        assert service.get_all_genres() == [
            {'id': 1, 'name': 'Comedy'},
            {'id': 2, 'name': 'Drama'},
            {'id': 4, 'name': 'Thriller'},
        ]

    def test_get_missing_genre(self, service, sample_reference_data):
        """Test reading a genre that does not exist."""
        # Act & Assert
        with pytest.raises(GenreNotFoundError):
            service.get_genre(3)


class TestDirectors:
    """Tests for the director methods."""

    def test_get_all_directors(self, service, sample_reference_data):
        """Test listing directors."""
        # Act & Assert
        assert service.get_all_directors() == [
            {'id': 1, 'name': 'Christopher Nolan'},
            {'id': 2, 'name': 'Greta Gerwig'},
        ]

    def test_get_director(self, service, sample_reference_data):
        """Test reading one director."""
        # Act & Assert
        assert service.get_director(1) == {'id': 1, 'name': 'Christopher Nolan'}

    def test_get_missing_director(self, service, sample_reference_data):
        """Test reading a director that does not exist."""
        # Act & Assert
        with pytest.raises(DirectorNotFoundError):
            service.get_director(42)

    @pytest.mark.parametrize('payload', [{}, {'name': '  '}, {'name': 7}, ['Nolan']])
    def test_create_director_invalid(self, service, payload):
        """Test that a director needs a non-blank name."""
        # Act & Assert
        with pytest.raises(ValidationError):
            service.create_director(payload)

    def test_create_director_strips_name(self, service):
        """Test creating a director."""
        # Act
        director = service.create_director({'name': '  Agnès Varda '})

        # Assert
        assert director['name'] == 'Agnès Varda'
        assert service.get_director(director['id']) == director

    def test_seeded_catalog_accepts_films_with_new_director(
            self, service, test_db_session, sample_film_payload
    ):
        """Test that a freshly seeded catalog can store a film with a director added through the service."""
        # Arrange
        seed_reference_data(test_db_session)
        director = service.create_director({'name': 'Christopher Nolan'})
        sample_film_payload['directors'] = [{'id': director['id']}, {'id': director['id']}]

        # Act
        film = service.create_film(sample_film_payload)

        # Assert
        assert film['directors'] == [{'id': director['id'], 'name': 'Christopher Nolan'}]
        assert [genre['name'] for genre in film['genres']] == ['Drama', 'Thriller']
