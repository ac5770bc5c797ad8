"""Strongly typed identifiers for blog domain entities.

Identifiers are random version-4 UUIDs kept in their canonical lowercase
8-4-4-4-12 hex form. NewType aliases prevent mixing up the ids of
different entities.
"""

import re
from typing import NewType
from uuid import uuid4

from pydantic import field_validator

from blog.domain.error import ValidationError
from blog.domain.value.common import RootValueObject

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


class Identifier(RootValueObject[str]):
    """Opaque entity identifier.

    Examples: '550e8400-e29b-41d4-a716-446655440000'
    """

    @field_validator("root")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Validate the hyphenated hex layout and normalize to lowercase."""
        if not _UUID_PATTERN.fullmatch(v):
            raise ValidationError(f"Invalid UUID format: {v}")
        return v.lower()

    @classmethod
    def generate(cls) -> "Identifier":
        """Draw a fresh identifier from the OS random source."""
        return cls._build(str(uuid4()))

    @classmethod
    def from_string(cls, value: str) -> "Identifier":
        """Parse an identifier from its string form.

        Raises:
            ValidationError: If the value is not a hyphenated UUID
        """
        return cls._build(value)

    def equals(self, other: "Identifier") -> bool:
        """Compare by canonical value."""
        return self.root == other.root


# Core domain entity identifiers
UserId = NewType("UserId", Identifier)
PostId = NewType("PostId", Identifier)
CommentId = NewType("CommentId", Identifier)
TagId = NewType("TagId", Identifier)
