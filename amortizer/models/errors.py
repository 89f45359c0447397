class ScheduleInputError(ValueError):
    """Loan, expense or event input that violates a precondition."""
