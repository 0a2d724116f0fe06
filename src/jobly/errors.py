"""Domain errors raised by the builders, repositories and auth dependencies."""


class JoblyError(Exception):
    """Base error carrying the HTTP status the API layer answers with."""

    status_code = 500

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(JoblyError):
    """Malformed or disallowed input, caught before any store mutation."""

    status_code = 400


class DuplicateEntityError(JoblyError):
    """Natural-key collision on create."""

    status_code = 400


class NotFoundError(JoblyError):
    """Identity lookup, update, delete or filter-search yielded zero rows."""

    status_code = 404


class UnauthorizedError(JoblyError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)
