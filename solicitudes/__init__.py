"""Loan application (solicitudes de crédito) service."""
