"""Error taxonomy for the worklog API client."""


class ApiError(Exception):
    """Base class for all worklog API failures."""


class InvalidBaseUrl(ApiError):
    """The configured domain cannot be used to build a request."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url
        super().__init__(f"An invalid base url was used `{base_url}`")


class Unauthorized(ApiError):
    """The server answered 401 or 403."""

    def __init__(self) -> None:
        super().__init__("This user is not authorized for this action")


class NotFound(ApiError):
    """The resource does not exist, or the user may not see it."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"The {kind} `{name}` was not found, or the user was unauthorized")


class SerializationError(ApiError):
    """The response body did not have the expected shape."""

    def __init__(self) -> None:
        super().__init__("Failed to serialize the response")


class UnknownError(ApiError):
    """Any other transport or status failure."""

    def __init__(self) -> None:
        super().__init__("An unknown API error occurred")
