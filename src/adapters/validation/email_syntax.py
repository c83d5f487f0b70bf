"""
Email validator adapter - Implements EmailValidator protocol.

Wraps the email-validator library (the same one behind pydantic's
EmailStr) so the presentation layer only sees a boolean check.
"""

from email_validator import EmailNotValidError, validate_email


class EmailValidatorAdapter:
    """
    Implements EmailValidator protocol via email-validator.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Deliverability (DNS) checks are off unless explicitly enabled.
    """

    def __init__(self, check_deliverability: bool = False) -> None:
        self._check_deliverability = check_deliverability

    def is_valid(self, email: str) -> bool:
        """
        Check email syntax (and optionally deliverability).

        Non-string input is never valid. Library failures other than
        EmailNotValidError propagate to the caller.
        """
        if not isinstance(email, str):
            return False
        try:
            validate_email(email, check_deliverability=self._check_deliverability)
        except EmailNotValidError:
            return False
        return True
