class StoreError(Exception):
    """Base for failures a store reports back to the caller."""

    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StoreError):
    status_code = 400
    default_message = "Invalid request."


class Unauthorized(StoreError):
    status_code = 401
    default_message = "Invalid credentials."


class Forbidden(StoreError):
    status_code = 403
    default_message = "Not allowed."


class NotFound(StoreError):
    status_code = 404
    default_message = "Not found."


class Conflict(StoreError):
    status_code = 409
    default_message = "Already exists."


class InternalError(StoreError):
    status_code = 500
