"""
Configuration module
"""

from tiki_sdk.config.settings import (
    TikiSettings,
    ClientOptions,
    ClientConfig,
    DEFAULT_ENDPOINT,
    CREDENTIAL_FIELDS,
    ENV_VAR_MAPPING,
)
from tiki_sdk.config.settings_loader import SettingsLoader
from tiki_sdk.config.credential_validator import (
    CredentialValidator,
    ValidationResult,
    ValidationErrorDetail,
    validate_credential,
)

__all__ = [
    "TikiSettings",
    "ClientOptions",
    "ClientConfig",
    "DEFAULT_ENDPOINT",
    "CREDENTIAL_FIELDS",
    "ENV_VAR_MAPPING",
    "SettingsLoader",
    "CredentialValidator",
    "ValidationResult",
    "ValidationErrorDetail",
    "validate_credential",
]
