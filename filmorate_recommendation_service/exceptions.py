"""Service error hierarchy."""


class FilmorateError(Exception):
    pass


class ValidationError(FilmorateError):
    pass


class NotFoundError(FilmorateError):
    """A requested resource does not exist."""

    resource = "Resource"

    def __init__(self, resource_id: int):
        self.resource_id = resource_id
        super().__init__(f"{self.resource} {resource_id} not found")


class FilmNotFoundError(NotFoundError):
    resource = "Film"


class MpaNotFoundError(NotFoundError):
    resource = "MPA rating"


class GenreNotFoundError(NotFoundError):
    resource = "Genre"


class DirectorNotFoundError(NotFoundError):
    resource = "Director"
