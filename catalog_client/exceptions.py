from typing import List, Optional


class QueryLayerError(Exception):
    """The catalog backend answered with an error or an unusable payload."""

    def __init__(self, operation: str, message: str, errors: Optional[List[str]] = None):
        self.operation = operation
        self.errors = errors or []
        detail = f"{message}: {', '.join(self.errors)}" if self.errors else message
        super().__init__(f"{operation}: {detail}")
