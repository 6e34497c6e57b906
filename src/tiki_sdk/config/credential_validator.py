"""
Credential Validator
Validates app/shop credentials with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from tiki_sdk.config.settings import CREDENTIAL_FIELDS
from tiki_sdk.exceptions import ValidationError
from tiki_sdk.utils.helpers import redact_sensitive_data
from tiki_sdk.utils.result import Result


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)

    @property
    def fields(self) -> List[str]:
        """Names of the failing fields, in check order"""
        return [e.field for e in self.errors]


class CredentialValidator:
    """
    CredentialValidator class
    Checks the merged credential before a client is built
    """

    def validate(self, credential: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a credential mapping

        Args:
            credential: Merged credential to validate

        Returns:
            ValidationResult with any errors
        """
        errors: List[ValidationErrorDetail] = []

        for field_name, required in CREDENTIAL_FIELDS.items():
            value = credential.get(field_name)
            shown = redact_sensitive_data({field_name: value})[field_name]

            if value is None:
                if required:
                    errors.append(ValidationErrorDetail(
                        field=field_name,
                        message=f"{field_name} is required"
                    ))
            elif not isinstance(value, str):
                errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be a string",
                    value=shown
                ))
            elif required and value.strip() == "":
                errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} cannot be empty",
                    value=shown
                ))

        return ValidationResult(valid=len(errors) == 0, errors=errors)

    def validate_or_raise(self, credential: Mapping[str, Any]) -> None:
        """
        Validate and raise if invalid

        Raises:
            ValidationError: If the credential is invalid
        """
        error = self.to_error(self.validate(credential))
        if error is not None:
            raise error

    def to_error(self, result: ValidationResult) -> Optional[ValidationError]:
        """Build a ValidationError from a failed result, None if valid"""
        if result.valid:
            return None
        error_messages = "; ".join(
            f"{e.field}: {e.message}" for e in result.errors
        )
        return ValidationError(
            f"Credential validation failed: {error_messages}",
            fields=result.fields,
            details={"errors": [e.__dict__ for e in result.errors]},
        )


def validate_credential(
    credential: Mapping[str, Any], skip_signing: bool
) -> Result[Optional[Dict[str, Any]]]:
    """
    Validate the merged credential unless signing is skipped

    Returns:
        ``Result.ok(credential)`` unchanged on success, ``Result.ok(None)``
        when signing is skipped, ``Result.fail(ValidationError)`` otherwise
    """
    if skip_signing:
        return Result.ok(None)

    validator = CredentialValidator()
    error = validator.to_error(validator.validate(credential))
    if error is not None:
        return Result.fail(error)
    return Result.ok(dict(credential))
