"""Domain errors raised by repositories and services."""


class KeywordsError(Exception):
    """Base error for the keyword analytics engine."""

    def __init__(self, message: str = "Keyword analytics error"):
        self.message = message
        super().__init__(self.message)


class StoreUnavailableError(KeywordsError):
    """The performance store could not be queried."""

    def __init__(self, message: str = "Performance store unavailable"):
        super().__init__(message)


class InvalidWindowError(KeywordsError):
    """Reporting windows are malformed or not comparable."""

    def __init__(self, message: str = "Invalid reporting window"):
        super().__init__(message)


class DeadlineExceededError(KeywordsError):
    """An aggregation ran past its caller-supplied deadline."""

    def __init__(self, message: str = "Deadline exceeded"):
        super().__init__(message)
