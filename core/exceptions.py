# core/exceptions.py


class DomainError(Exception):
    """
    Base for every error the scheduling services raise on purpose.

    ``code`` is a stable machine-readable identifier (``TASK_NOT_FOUND``,
    ``DEPENDENCY_CYCLE``...) that callers can branch on without parsing
    the message.
    """

    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ValidationError(DomainError):
    """Input rejected before anything was written (bad title, range, duration)."""


class NotFoundError(DomainError):
    """A task, dependency or workday exception id did not resolve."""


class BusinessRuleError(DomainError):
    """The write is well-formed but would break the schedule graph, e.g. a cycle."""


__all__ = ["DomainError", "ValidationError", "NotFoundError", "BusinessRuleError"]
