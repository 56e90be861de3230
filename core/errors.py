class DatasetValidationError(Exception):
    def __init__(self, message: str, missing_fields: list[str] | None = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class DataFetchError(Exception):
    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class InsufficientDataError(Exception):
    """Замало точок у вікні регресії або є недодатні значення."""
