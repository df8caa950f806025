class ProductError(Exception):
    """Base class for catalog backend errors."""


class ProductValidationError(ProductError):
    """Raised when a product input breaks one of the configured rules."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field
