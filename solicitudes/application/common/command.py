"""
Command base class.

Commands carry the raw input of a write operation, named in imperative
form (CreateLoanApplication, UpdateStatusDescription). They are
deliberately untyped beyond ``object``-level hints: turning raw values
into value objects is the first stage of the use case that handles them.

Example:
    @dataclass(frozen=True)
    class CreateLoanApplicationCommand(Command):
        amount: object
        term_months: object
        email: object
        loan_type_id: object
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form
    - Carry all data needed to execute the operation
    - Represent intentions, not facts
    """
