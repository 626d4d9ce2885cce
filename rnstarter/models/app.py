"""App identity and deep-link models collected from the command line and prompts."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from rnstarter.core.validator import (
    is_two_segment_package,
    validate_app_name,
    validate_app_scheme,
    validate_domain,
    validate_package_name,
)


class AppIdentity(BaseModel):
    """Name and optional reverse-domain package id of the app being created."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    name: str
    package_id: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not validate_app_name(v):
            raise ValueError(
                f"App name '{v}' must start with a letter, be 3-50 characters long "
                "and contain only letters, numbers, hyphens, and underscores."
            )
        return v

    @field_validator('package_id')
    @classmethod
    def validate_package(cls, v):
        if v is not None and not validate_package_name(v):
            raise ValueError(
                f"Package name '{v}' must use reverse domain notation with at least 2 "
                "lowercase segments (e.g., com.company.appname)."
            )
        return v

    @property
    def has_two_segment_package(self) -> bool:
        return self.package_id is not None and is_two_segment_package(self.package_id)

    @property
    def url_name(self) -> str:
        """Identifier used for the iOS URL type entry."""
        return self.package_id or self.name.lower()

    def with_package(self, package_id: str) -> "AppIdentity":
        """Return a copy carrying a replacement package id (re-validated)."""
        return AppIdentity(name=self.name, package_id=package_id)


class DeepLinkConfig(BaseModel):
    """Custom URL scheme and optional universal-link domain."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    scheme: Optional[str] = None
    universal_domain: Optional[str] = None

    @field_validator('scheme')
    @classmethod
    def validate_scheme(cls, v):
        if v is not None and not validate_app_scheme(v):
            raise ValueError(
                f"App scheme '{v}' must start with a letter, be 3-20 characters long "
                "and contain only lowercase letters, numbers, and hyphens."
            )
        return v

    @field_validator('universal_domain')
    @classmethod
    def validate_universal_domain(cls, v):
        if v is not None and not validate_domain(v):
            raise ValueError(f"Domain '{v}' must be a valid domain with a top-level domain.")
        return v

    @model_validator(mode='after')
    def domain_requires_scheme(self) -> 'DeepLinkConfig':
        if self.universal_domain and not self.scheme:
            raise ValueError("Universal links can only be configured together with an app scheme")
        return self

    @property
    def is_configured(self) -> bool:
        return self.scheme is not None

    @property
    def associated_domain(self) -> Optional[str]:
        if not self.universal_domain:
            return None
        return f"applinks:{self.universal_domain}"
