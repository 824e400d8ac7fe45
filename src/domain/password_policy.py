"""
Password policy - Strength and confirmation rules for the activation form.

Rules are evaluated in field order so the first message a user sees
refers to the first field they need to fix.
"""

from dataclasses import dataclass

from .models import OperationError
from .ports import ErrorKind


@dataclass(frozen=True)
class PasswordPolicy:
    """Minimum-length strength rule plus exact confirmation match."""

    min_length: int = 8

    def check(self, new_password: str, confirm_password: str) -> OperationError | None:
        """
        Validate both password fields.

        Confirmation is compared with plain string equality
        (case-sensitive, no normalization).

        Returns:
            None when both fields pass, otherwise a VALIDATION error
            naming the offending field
        """
        if not new_password:
            return self._invalid("new_password", "Password is required")
        if len(new_password) < self.min_length:
            return self._invalid(
                "new_password",
                f"Password must be at least {self.min_length} characters",
            )
        if not confirm_password:
            return self._invalid("confirm_password", "Password confirmation is required")
        if confirm_password != new_password:
            return self._invalid("confirm_password", "The passwords do not match")
        return None

    def _invalid(self, field_name: str, message: str) -> OperationError:
        return OperationError(kind=ErrorKind.VALIDATION, message=message, field_name=field_name)
