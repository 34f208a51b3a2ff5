"""Domain errors raised by the stores"""


class QueryNestError(Exception):
    """Base class for Query Nest errors"""


class NotFoundError(QueryNestError):
    """A referenced document does not exist"""

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
        self.message = message
