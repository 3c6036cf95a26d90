"""
Domain errors raised by the service layer.

Services never build HTTP responses themselves.  They raise one of the
exceptions below and the endpoint handlers translate it into an
``HTTPException`` carrying ``status_code``.
"""


class ServiceError(ValueError):
    """Base class for request-level failures."""

    status_code = 400


class ValidationError(ServiceError):
    """Raised when a required field is missing or a reference is invalid."""

    status_code = 400


class NotFoundError(ServiceError):
    """Raised when the target record does not exist."""

    status_code = 404
