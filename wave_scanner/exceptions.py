class AppError(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class TransportError(AppError):
    """The completion provider call did not succeed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message, code="TRANSPORT_ERROR")


class RequestError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="REQUEST_ERROR")


class BadRequestError(AppError):
    def __init__(self, message: str):
        super().__init__(message, code="BAD_REQUEST")
