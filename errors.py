"""Application errors raised by the service layer.

Each error carries a stable ``code`` and the HTTP-ish ``status_code`` an outer
transport would map it to. None of them are retried automatically.
"""


class AppError(Exception):
    """Base class for expected, client-facing application errors."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(AppError):
    """Input was well-formed but refers to something unusable."""

    code = "BAD_REQUEST"
    status_code = 400

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


class NotFoundError(AppError):
    """Resource is absent or belongs to another household."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found")
        self.resource = resource


class ConflictError(AppError):
    """A category with the same household, name and type already exists."""

    code = "CONFLICT"
    status_code = 409

    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message)


class CategoryInUseError(AppError):
    """Category is still referenced by a transaction, budget or recurring row."""

    code = "CATEGORY_IN_USE"
    status_code = 400

    def __init__(self, message: str = "Category is in use"):
        super().__init__(message)
