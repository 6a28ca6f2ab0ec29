"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class CheckoutValidationError(DomainException):
    """Checkout arguments are missing or outside their allowed range"""

    pass


class ToolNotFoundError(DomainException):
    """No tool is stored under the requested code"""

    pass


class ToolUnavailableError(DomainException):
    """Tool is already checked out and cannot be rented again until returned"""

    pass


class DuplicateToolError(DomainException):
    """A tool with the same code already exists in storage"""

    pass
