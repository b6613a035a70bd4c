"""Display index value object."""

from pydantic import field_validator

from rolodex.domain.value.common import RootValueObject


class Index(RootValueObject[int]):
    """1-based position of a person in the displayed list."""

    @field_validator("root")
    @classmethod
    def validate_index(cls, v: int) -> int:
        """Validate index is positive."""
        if v < 1:
            raise ValueError("Index must be a positive integer")
        return v

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based + 1)

    @property
    def one_based(self) -> int:
        return self.root

    @property
    def zero_based(self) -> int:
        return self.root - 1
