"""Error taxonomy shared by every service operation."""


class ServiceError(Exception):
    """Base class for failures a service reports back to its caller."""
    kind = "internal"
    default_message = "An unexpected error occurred."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(ServiceError):
    kind = "unauthorized"
    default_message = "Unauthorized: user not logged in."


class Forbidden(ServiceError):
    kind = "forbidden"
    default_message = "You are not allowed to do that."


class NotFound(ServiceError):
    kind = "not_found"
    default_message = "Not found."


class InvalidArgument(ServiceError):
    kind = "invalid_argument"
    default_message = "Invalid request."


class Conflict(ServiceError):
    kind = "conflict"
    default_message = "Conflicting request."


class Internal(ServiceError):
    kind = "internal"
