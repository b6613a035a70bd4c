"""Tag entity and the per-type unique tag list."""

from collections.abc import Iterable, Iterator

from rolodex.domain.error import DuplicateTagError, TagNotFoundError
from rolodex.domain.model.common import DomainModel
from rolodex.domain.value import TagName, TagType


class Tag(DomainModel):
    """One value filed under a tag type, e.g. 'Go' under 'Skill'."""

    tag_type: TagType
    name: TagName

    @classmethod
    def of(cls, tag_type: str, name: str) -> "Tag":
        """Build a tag from raw strings."""
        return cls(tag_type=TagType(tag_type), name=TagName(name))

    def __str__(self) -> str:
        return f"{self.tag_type}: {self.name}"


class UniqueTagList:
    """Ordered list of tags sharing one tag type, without duplicate values.

    Every mutating method either succeeds completely or raises before
    touching the list.
    """

    def __init__(self, tag_type: TagType, tags: Iterable[Tag] = ()) -> None:
        """Initialize the list.

        Args:
            tag_type: Type every contained tag must have
            tags: Initial tags, must be unique

        Raises:
            DuplicateTagError: If ``tags`` contains the same value twice
        """
        self._tag_type = tag_type
        self._tags: list[Tag] = []
        for tag in tags:
            self.add(tag)

    @classmethod
    def from_names(cls, tag_type: TagType, names: Iterable[str]) -> "UniqueTagList":
        """Build a list of ``tag_type`` tags from raw value strings."""
        return cls(tag_type, [Tag(tag_type=tag_type, name=TagName(n)) for n in names])

    @property
    def tag_type(self) -> TagType:
        return self._tag_type

    def contains(self, tag: Tag) -> bool:
        """Return True if an equal tag is already in the list."""
        return tag in self._tags

    def add(self, tag: Tag) -> None:
        """Append a tag.

        Raises:
            DuplicateTagError: If the value is already present
            ValueError: If the tag belongs to a different type
        """
        self._check_type(tag)
        if self.contains(tag):
            raise DuplicateTagError(str(self._tag_type), str(tag.name))
        self._tags.append(tag)

    def remove(self, tag: Tag) -> None:
        """Remove a tag.

        Raises:
            TagNotFoundError: If the value is not present
        """
        if not self.contains(tag):
            raise TagNotFoundError(str(self._tag_type), str(tag.name))
        self._tags.remove(tag)

    def merge(self, other: "UniqueTagList") -> None:
        """Append every tag of ``other``; all-or-nothing.

        Raises:
            DuplicateTagError: If any value of ``other`` is already present
            ValueError: If ``other`` holds a different tag type
        """
        if other.tag_type != self._tag_type:
            raise ValueError(
                f"Cannot merge tags of type {other.tag_type} into {self._tag_type}"
            )
        for tag in other:
            if self.contains(tag):
                raise DuplicateTagError(str(self._tag_type), str(tag.name))
        self._tags.extend(other)

    def names(self) -> list[str]:
        return [tag.name.root for tag in self._tags]

    def copy(self) -> "UniqueTagList":
        clone = UniqueTagList(self._tag_type)
        clone._tags = list(self._tags)
        return clone

    def _check_type(self, tag: Tag) -> None:
        if tag.tag_type != self._tag_type:
            raise ValueError(
                f"Tag {tag} does not belong to tag type {self._tag_type}"
            )

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueTagList):
            return NotImplemented
        return self._tag_type == other._tag_type and self._tags == other._tags

    def __repr__(self) -> str:
        return f"UniqueTagList({self._tag_type.root!r}, {self.names()!r})"

    def __str__(self) -> str:
        return f"{self._tag_type}: {', '.join(self.names())}"
