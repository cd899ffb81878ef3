"""Domain errors raised by services and rendered by the app's exception handler."""


class LiftlogError(RuntimeError):
    """Base error; subclasses pin the HTTP status the API answers with."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationFailedError(LiftlogError):
    status_code = 400


class AuthenticationError(LiftlogError):
    status_code = 401


class AuthorizationError(LiftlogError):
    """Cross-user access to a private exercise, split, session or exercise set."""

    status_code = 403


class NotFoundError(LiftlogError):
    status_code = 404
