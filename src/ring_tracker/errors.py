"""API error types mapped to the JSON response envelope."""


class ApiError(Exception):
    """An error that is returned to the client as ``{success: false, error}``."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"success": False, "error": self.message}


class BadRequest(ApiError):
    status_code = 400
    default_message = "Bad request"


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"
