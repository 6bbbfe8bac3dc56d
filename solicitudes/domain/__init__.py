"""
Domain layer.

Business rules of the loan application service. It has no dependencies
on frameworks or infrastructure.

This layer contains:
- Value Objects: Money, Term, Email, Name, InterestRate and typed ids
- Aggregate Roots: LoanApplication, LoanType, Status
- The error taxonomy every other layer reports through
"""
