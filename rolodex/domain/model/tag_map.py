"""Typed tag collection held by every person.

A UniqueTagTypeMap groups tag values under their tag type. It guarantees
that no tag type appears twice, that no value appears twice under one type,
and that no type is kept around without values.

Bulk operations (merge, remove, rename) validate the whole patch before
mutating anything, so a failure leaves the map exactly as it was.

A map can be frozen. Frozen maps reject every mutator and are hashable;
persons hold frozen maps so that a person shared between the working book
and history snapshots can never change.
"""

from collections.abc import Iterable, Iterator, Mapping

from rolodex.domain.error import (
    DuplicateTagError,
    DuplicateTagTypeError,
    TagNotFoundError,
    TagTypeNotFoundError,
)
from rolodex.domain.model.tag import Tag, UniqueTagList
from rolodex.domain.value import TagType


class UniqueTagTypeMap:
    """Mapping from TagType to the UniqueTagList of its values."""

    def __init__(
        self, mapping: "Mapping[TagType, UniqueTagList] | UniqueTagTypeMap | None" = None
    ) -> None:
        self._map: dict[TagType, UniqueTagList] = {}
        self._frozen = False
        if mapping is not None:
            self.set_tag_type_map(mapping)

    @classmethod
    def from_dict(cls, data: Mapping[str, Iterable[str]]) -> "UniqueTagTypeMap":
        """Build a map from raw strings, e.g. ``{"Skill": ["Java", "Go"]}``.

        Raises:
            DuplicateTagError: If a value is repeated under one type
        """
        tag_map = cls()
        for raw_type, names in data.items():
            tag_type = TagType(raw_type)
            tags = UniqueTagList.from_names(tag_type, names)
            if tags:
                tag_map._map[tag_type] = tags
        return tag_map

    def set_tag_type_map(
        self, mapping: "Mapping[TagType, UniqueTagList] | UniqueTagTypeMap"
    ) -> None:
        """Replace the whole content with a defensive copy of ``mapping``.

        Raises:
            ValueError: If a list is filed under a type other than its own
        """
        self._check_mutable()
        items = mapping.items()
        replacement: dict[TagType, UniqueTagList] = {}
        for tag_type, tags in items:
            if tags.tag_type != tag_type:
                raise ValueError(
                    f"Tag list of type {tags.tag_type} filed under {tag_type}"
                )
            if tags:
                replacement[tag_type] = tags.copy()
        self._map = replacement

    def merge_tag_type_map(self, other: "UniqueTagTypeMap") -> None:
        """Union every list of ``other`` into this map.

        Types missing here are created. The merge is all-or-nothing.

        Raises:
            DuplicateTagError: If a value of ``other`` already exists under
                the same type here
        """
        self._check_mutable()
        for tag_type, tags in other.items():
            existing = self._map.get(tag_type)
            if existing is None:
                continue
            for tag in tags:
                if existing.contains(tag):
                    raise DuplicateTagError(str(tag_type), str(tag.name))

        for tag_type, tags in other.items():
            existing = self._map.get(tag_type)
            if existing is None:
                if tags:
                    self._map[tag_type] = tags.copy()
            else:
                existing.merge(tags)

    def remove_tags(self, other: "UniqueTagTypeMap") -> None:
        """Remove every value named in ``other``.

        Types left without values are dropped. The removal is all-or-nothing.

        Raises:
            TagTypeNotFoundError: If a type of ``other`` is not present here
            TagNotFoundError: If a value of ``other`` is not under its type here
        """
        self._check_mutable()
        for tag_type, tags in other.items():
            existing = self._map.get(tag_type)
            if existing is None:
                raise TagTypeNotFoundError(str(tag_type))
            for tag in tags:
                if not existing.contains(tag):
                    raise TagNotFoundError(str(tag_type), str(tag.name))

        for tag_type, tags in other.items():
            existing = self._map[tag_type]
            for tag in tags:
                existing.remove(tag)
            if not existing:
                del self._map[tag_type]

    def remove_tag_type(self, tag_type: TagType) -> None:
        """Drop a type together with all of its values.

        Raises:
            TagTypeNotFoundError: If the type is not present
        """
        self._check_mutable()
        if tag_type not in self._map:
            raise TagTypeNotFoundError(str(tag_type))
        del self._map[tag_type]

    def rename_tag_type(self, old: TagType, new: TagType) -> None:
        """File every value of ``old`` under ``new`` instead, keeping key order.

        Raises:
            TagTypeNotFoundError: If ``old`` is not present
            DuplicateTagTypeError: If ``new`` is already present
        """
        self._check_mutable()
        if old not in self._map:
            raise TagTypeNotFoundError(str(old))
        if old == new:
            return
        if new in self._map:
            raise DuplicateTagTypeError(str(new))

        renamed = UniqueTagList(
            new, [Tag(tag_type=new, name=tag.name) for tag in self._map[old]]
        )
        self._map = {
            (new if tag_type == old else tag_type): (
                renamed if tag_type == old else tags
            )
            for tag_type, tags in self._map.items()
        }

    def contains_tag_type(self, tag_type: TagType) -> bool:
        return tag_type in self._map

    def get(self, tag_type: TagType) -> UniqueTagList | None:
        """Return a copy of the values under ``tag_type``, or None."""
        tags = self._map.get(tag_type)
        return tags.copy() if tags is not None else None

    def tag_types(self) -> list[TagType]:
        return list(self._map)

    def items(self) -> Iterator[tuple[TagType, UniqueTagList]]:
        """Iterate (type, values) pairs. The lists are copies."""
        return ((tag_type, tags.copy()) for tag_type, tags in self._map.items())

    def is_empty(self) -> bool:
        return not self._map

    def to_dict(self) -> dict[str, list[str]]:
        """Return the map as plain strings, e.g. for serialization."""
        return {tag_type.root: tags.names() for tag_type, tags in self._map.items()}

    def copy(self) -> "UniqueTagTypeMap":
        """Return a mutable copy, also of a frozen map."""
        return UniqueTagTypeMap(self)

    def freeze(self) -> "UniqueTagTypeMap":
        """Make this map read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError("Frozen UniqueTagTypeMap cannot be changed, change a copy()")

    def __contains__(self, tag_type: object) -> bool:
        return tag_type in self._map

    def __iter__(self) -> Iterator[TagType]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueTagTypeMap):
            return NotImplemented
        return self._map == other._map

    def __hash__(self) -> int:
        if not self._frozen:
            raise TypeError("unhashable type: 'UniqueTagTypeMap' (not frozen)")
        return hash(
            frozenset((tag_type, tuple(tags.names())) for tag_type, tags in self._map.items())
        )

    def __repr__(self) -> str:
        return f"UniqueTagTypeMap({self.to_dict()!r})"

    def __str__(self) -> str:
        return "; ".join(str(tags) for tags in self._map.values())
