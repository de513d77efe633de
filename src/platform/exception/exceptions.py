class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(CustomBaseError):
    """Malformed input or an unknown event, participant, seat or reservation; raised before any write"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    """Stored state no longer matches the batch (lost race, stale reference)"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class StorageError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
