"""Domain value objects for Natter.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import field_validator

from natter.domain.value.common import RootValueObject


class IpHash(RootValueObject[str]):
    """Anonymised client address token used for rate limiting.

    Always 8 lowercase hexadecimal digits.
    """

    @field_validator("root")
    @classmethod
    def validate_ip_hash(cls, v: str) -> str:
        """Validate hash token format."""
        if not re.fullmatch(r"[0-9a-f]{8}", v):
            raise ValueError("IP hash must be 8 lowercase hexadecimal digits")
        return v


class Username(RootValueObject[str]):
    """Verified identity provider username (e.g. a GitHub login)."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v
