"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime, timezone
from enum import Enum

from email_validator import EmailNotValidError, validate_email
from pydantic import field_validator

from blog.domain.error import ValidationError
from blog.domain.value.common import RootValueObject

TAG_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s\-_]+$", re.ASCII)
TAG_SLUG_PATTERN = re.compile(r"^[a-z0-9\-]+$")
TAG_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class PostStatus(str, Enum):
    """Lifecycle status of a post.

    Posts start as drafts, may be published, and end up archived.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    @classmethod
    def from_string(cls, value: str) -> "PostStatus":
        """Parse a status token.

        Raises:
            ValidationError: If the token is not a known status
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Invalid post status: {value}") from None

    def is_draft(self) -> bool:
        return self is PostStatus.DRAFT

    def is_published(self) -> bool:
        return self is PostStatus.PUBLISHED

    def is_archived(self) -> bool:
        return self is PostStatus.ARCHIVED


class UserRole(str, Enum):
    """Role of a registered user."""

    USER = "user"
    ADMIN = "admin"

    @classmethod
    def default(cls) -> "UserRole":
        """Role given to newly registered users."""
        return cls.USER

    @classmethod
    def from_string(cls, value: str) -> "UserRole":
        """Parse a role token.

        Raises:
            ValidationError: If the token is not a known role
        """
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Invalid user role: {value}") from None

    def is_user(self) -> bool:
        return self is UserRole.USER

    def is_admin(self) -> bool:
        return self is UserRole.ADMIN


class EmailAddress(RootValueObject[str]):
    """Email address of a user.

    Syntax is checked offline (no DNS lookups). Special-use domains such
    as .test or .local are accepted. The stored form is the
    normalized address returned by email-validator.
    """

    @field_validator("root")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        """Validate email syntax and length."""
        if len(v) > 255:
            raise ValidationError("Email address cannot exceed 255 characters")
        try:
            result = validate_email(
                v, check_deliverability=False, globally_deliverable=False
            )
        except EmailNotValidError as e:
            raise ValidationError(f"Invalid email address: {v}") from e
        return result.normalized

    @classmethod
    def from_string(cls, value: str) -> "EmailAddress":
        return cls._build(value)


class PostTitle(RootValueObject[str]):
    """Title of a post, 3-255 characters after trimming."""

    @field_validator("root")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title length and reject blank titles."""
        stripped = v.strip()
        if not stripped:
            raise ValidationError("Post title cannot be empty")
        if len(stripped) < 3:
            raise ValidationError("Post title must be at least 3 characters long")
        if len(stripped) > 255:
            raise ValidationError("Post title cannot exceed 255 characters")
        return stripped

    @classmethod
    def from_string(cls, value: str) -> "PostTitle":
        return cls._build(value)


class PostContent(RootValueObject[str]):
    """Body of a post.

    At least 10 characters, counted as code points. Stored verbatim.
    """

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate content length and reject blank content."""
        if not v.strip():
            raise ValidationError("Post content cannot be empty")
        if len(v) < 10:
            raise ValidationError("Post content must be at least 10 characters long")
        return v

    @classmethod
    def from_string(cls, value: str) -> "PostContent":
        return cls._build(value)


class CommentContent(RootValueObject[str]):
    """Body of a comment, 3-1000 characters after trimming."""

    @field_validator("root")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Trim and validate comment length."""
        stripped = v.strip()
        if not stripped:
            raise ValidationError("Comment content cannot be empty")
        if len(stripped) < 3:
            raise ValidationError("Comment content must be at least 3 characters long")
        if len(stripped) > 1000:
            raise ValidationError("Comment content cannot exceed 1000 characters")
        return stripped

    @classmethod
    def from_string(cls, value: str) -> "CommentContent":
        return cls._build(value)


class TagName(RootValueObject[str]):
    """Human readable tag name.

    2-50 characters after trimming; ASCII letters, digits, whitespace,
    hyphens and underscores only.
    Examples: 'Machine Learning', 'python_tips', 'web-dev'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Trim and validate tag name format."""
        stripped = v.strip()
        if not stripped:
            raise ValidationError("Tag name cannot be empty")
        if len(stripped) < 2:
            raise ValidationError("Tag name must be at least 2 characters long")
        if len(stripped) > 50:
            raise ValidationError("Tag name cannot exceed 50 characters")
        if not TAG_NAME_PATTERN.fullmatch(stripped):
            raise ValidationError("Tag name contains invalid characters")
        return stripped

    @classmethod
    def from_string(cls, value: str) -> "TagName":
        return cls._build(value)


def slugify(text: str) -> str:
    """Derive slug text from free text.

    Lowercases, drops characters outside [a-z0-9], whitespace, '-' and '_',
    turns whitespace/underscore runs into a single hyphen and trims hyphens
    from both ends. The result may be empty.
    """
    slug = re.sub(r"[^a-z0-9\s\-_]", "", text.lower())
    slug = re.sub(r"[\s_]+", "-", slug)
    return slug.strip("-")


class TagSlug(RootValueObject[str]):
    """URL-safe tag identifier.

    2-50 characters of lowercase letters, digits and hyphens, with no
    leading or trailing hyphen.
    Examples: 'machine-learning', 'python'
    """

    @field_validator("root")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Validate slug format."""
        stripped = v.strip()
        if not stripped:
            raise ValidationError("Tag slug cannot be empty")
        if len(stripped) < 2:
            raise ValidationError("Tag slug must be at least 2 characters long")
        if len(stripped) > 50:
            raise ValidationError("Tag slug cannot exceed 50 characters")
        if not TAG_SLUG_PATTERN.fullmatch(stripped):
            raise ValidationError(
                "Tag slug can only contain lowercase letters, numbers, and hyphens"
            )
        if stripped.startswith("-") or stripped.endswith("-"):
            raise ValidationError("Tag slug cannot start or end with a hyphen")
        return stripped

    @classmethod
    def from_string(cls, value: str) -> "TagSlug":
        return cls._build(value)

    @classmethod
    def from_name(cls, name: TagName) -> "TagSlug":
        """Derive a slug from a tag name.

        Raises:
            ValidationError: If nothing usable remains after derivation
        """
        slug = slugify(name.root)
        if not slug:
            raise ValidationError("Cannot generate slug from tag name")
        return cls._build(slug)


class TagColor(RootValueObject[str]):
    """Display color of a tag in '#RRGGBB' form, uppercase.

    Accepts a missing '#' and the 3-digit shorthand ('F00' -> '#FF0000').
    """

    @field_validator("root")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Normalize and validate the hex color."""
        color = v.strip()
        if not color.startswith("#"):
            color = "#" + color
        if not TAG_COLOR_PATTERN.fullmatch(color):
            raise ValidationError(f"Invalid color format: {v}")
        if len(color) == 4:
            color = "#" + "".join(c * 2 for c in color[1:])
        return color.upper()

    @classmethod
    def from_string(cls, value: str) -> "TagColor":
        return cls._build(value)

    @classmethod
    def blue(cls) -> "TagColor":
        return cls._build("#3B82F6")

    @classmethod
    def green(cls) -> "TagColor":
        return cls._build("#10B981")

    @classmethod
    def red(cls) -> "TagColor":
        return cls._build("#EF4444")

    @classmethod
    def yellow(cls) -> "TagColor":
        return cls._build("#F59E0B")

    @classmethod
    def purple(cls) -> "TagColor":
        return cls._build("#8B5CF6")

    @classmethod
    def gray(cls) -> "TagColor":
        return cls._build("#6B7280")


class CreationTimestamp(RootValueObject[datetime]):
    """Timezone-aware instant at which an entity came into being.

    Naive datetimes are taken to be UTC. The string form is
    'YYYY-MM-DD HH:MM:SS'.
    """

    @field_validator("root")
    @classmethod
    def validate_timestamp(cls, v: datetime) -> datetime:
        """Pin the instant to UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @classmethod
    def now(cls) -> "CreationTimestamp":
        return cls._build(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, value: datetime) -> "CreationTimestamp":
        return cls._build(value)

    @classmethod
    def from_string(cls, value: str) -> "CreationTimestamp":
        """Parse an ISO 8601 timestamp.

        Raises:
            ValidationError: If the value cannot be parsed
        """
        try:
            parsed = datetime.fromisoformat(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid timestamp: {value}") from None
        return cls._build(parsed)

    def to_string(self) -> str:
        return self.root.strftime(TIMESTAMP_FORMAT)

    def isoformat(self) -> str:
        return self.root.isoformat()

    def is_before(self, other: "CreationTimestamp") -> bool:
        return self.root < other.root

    def is_after(self, other: "CreationTimestamp") -> bool:
        return self.root > other.root

    def equals(self, other: "CreationTimestamp") -> bool:
        return self.root == other.root

    def __str__(self) -> str:
        return self.to_string()
