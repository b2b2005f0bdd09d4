"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidDateError(ValidationError):
    """Raised when a due date or timestamp cannot be parsed."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AlreadyVotedError(BusinessRuleViolationError):
    """Raised when a voter casts the same kind of vote on an idea twice."""

    def __init__(self, idea_id: str, voter_id: str, kind: str):
        self.idea_id = idea_id
        self.voter_id = voter_id
        self.kind = kind
        super().__init__(f"You have already {kind}d this idea")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
