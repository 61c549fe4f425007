"""Shared domain error messages and error types."""

from http import HTTPStatus


class DomainError(ValueError):
    """Base class for domain-level errors.

    Every error carries the transport status code the caller should report.
    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""

    status_code = HTTPStatus.UNPROCESSABLE_ENTITY


class NotFoundError(DomainError):
    """Requested record does not exist."""

    status_code = HTTPStatus.NOT_FOUND


class RepositoryError(DomainError):
    """Storage failure that the domain cannot interpret."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


def status_of(error: BaseException) -> HTTPStatus:
    """Return the transport status code for an error raised by a usecase."""
    return getattr(error, "status_code", HTTPStatus.INTERNAL_SERVER_ERROR)


def position_id_not_valid() -> str:
    """Return message for a user referencing a missing position."""
    return "position id not valid "


def secret_id_not_valid() -> str:
    """Return message for a withdrawal with the wrong secret id."""
    return "secret id not valid"


def company_not_found() -> str:
    """Return message when no company has been set up yet."""
    return "Company not found"


def position_not_found(position_id: int) -> str:
    """Return message for missing position."""
    return f"Position {position_id} not found"


def user_not_found(user_id: int) -> str:
    """Return message for missing user."""
    return f"User {user_id} not found"


def balance_not_sufficient(amount) -> str:
    """Return message when the company cannot cover a debit."""
    return f"Company balance is not sufficient to debit {amount}"


def topup_amount_not_positive(amount) -> str:
    """Return message for a top-up that would not increase the balance."""
    return f"Top-up amount must be positive, got {amount}"


def company_balance_negative(balance) -> str:
    """Return message for a company saved with a negative balance."""
    return f"Company balance cannot be negative, got {balance}"
