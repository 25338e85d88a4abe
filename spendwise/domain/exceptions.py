"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ProfileNotFoundError(DomainException):
    """No profile exists for the user"""

    pass


class ExpenseNotFoundError(DomainException):
    """Expense does not exist or belongs to another user"""

    pass


class GoalNotFoundError(DomainException):
    """Goal does not exist or belongs to another user"""

    pass
