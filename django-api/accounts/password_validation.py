"""Password rules applied on registration through Django's AUTH_PASSWORD_VALIDATORS."""

from django.core.exceptions import ValidationError


class CharacterClassValidator:
    """Require at least one digit and one uppercase letter."""

    def validate(self, password: str, user=None) -> None:
        errors = []
        if not any(char.isdigit() for char in password):
            errors.append(
                ValidationError("Password must contain at least one digit", code="password_no_digit")
            )
        if not any(char.isupper() for char in password):
            errors.append(
                ValidationError(
                    "Password must contain at least one uppercase letter", code="password_no_upper"
                )
            )
        if errors:
            raise ValidationError(errors)

    def get_help_text(self) -> str:
        return "Your password must contain at least one digit and one uppercase letter."
