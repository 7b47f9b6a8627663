"""Domain value objects for Pinbook.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import ConfigDict, RootModel, field_validator


class VoteDirection(int, Enum):
    """Signed score change carried by a vote."""

    UP = 1
    DOWN = -1

    @property
    def delta(self) -> int:
        return int(self.value)


class ImageFormat(str, Enum):
    """Image formats accepted for ingestion, keyed by URL extension.

    The extension is trusted as the format indicator; content is not sniffed.
    """

    JPEG = ".jpg"
    PNG = ".png"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def pillow_format(self) -> str:
        """Codec name understood by Pillow."""
        return "JPEG" if self is ImageFormat.JPEG else "PNG"

    @classmethod
    def from_extension(cls, extension: str) -> "ImageFormat | None":
        """Look up a format by exact extension (case-sensitive)."""
        for fmt in cls:
            if fmt.value == extension:
                return fmt
        return None


class PostSortOrder(str, Enum):
    """Sort order for post listings (always descending)."""

    CREATED = "created"
    SCORE = "score"

    @classmethod
    def parse(cls, value: str | None) -> "PostSortOrder":
        """Parse a sort key, falling back to CREATED for unknown values."""
        try:
            return cls(value) if value else cls.CREATED
        except ValueError:
            return cls.CREATED


class UserName(RootModel[str]):
    """Public user name, used in profile URLs.

    Compared exactly: "Alice" and "alice" are different users.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("User name must be 1-255 characters")
        return v

    def __str__(self) -> str:
        return self.root
