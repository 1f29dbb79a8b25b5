# backend/errors.py


class SplitError(Exception):
    """Base class for everything the split layer raises."""


class ValidationError(SplitError):
    # Message shown to the user as-is
    message = "Invalid input."

    def __init__(self, message=None):
        super().__init__(message or self.message)


class InvalidParticipantName(ValidationError):
    message = "Please enter a name."


class DuplicateParticipant(ValidationError):
    message = "That person has already been added."


class MissingExpenseName(ValidationError):
    message = "Please enter an expense name."


class InvalidExpenseAmount(ValidationError):
    message = "Please enter a valid amount."


class MissingPayer(ValidationError):
    message = "Please select who paid for this expense."


class EmptyBeneficiarySet(ValidationError):
    message = "Please select who shares this expense."


class UnknownParticipantReference(ValidationError):
    message = "Expense refers to someone who is not in the group."
