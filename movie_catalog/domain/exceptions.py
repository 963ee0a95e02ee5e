class DomainError(Exception):
    pass


class NotFoundError(DomainError):
    pass


class MovieNotFoundError(NotFoundError):
    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        super().__init__(f"Movie with id {movie_id} not found")


class RepositoryError(DomainError):
    pass
