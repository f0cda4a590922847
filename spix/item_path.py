"""Paths that address items in a scene, and positions relative to them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from spix.geometry import Point, Size


class ItemPath:
    """A slash separated path such as ``"mainWindow/item/subitem"``.

    Empty components are dropped, so leading, trailing and doubled
    slashes carry no meaning.
    """

    __slots__ = ("_components",)

    def __init__(self, path: str | ItemPath | Iterable[str] | None = None) -> None:
        if path is None:
            components: tuple[str, ...] = ()
        elif isinstance(path, ItemPath):
            components = path.components
        elif isinstance(path, str):
            components = tuple(part for part in path.split("/") if part)
        else:
            components = tuple(path)
        self._components = components

    @property
    def components(self) -> tuple[str, ...]:
        """The individual names that make up the path."""
        return self._components

    def root_component(self) -> str:
        """Return the first component; raise IndexError if the path is empty."""
        if not self._components:
            raise IndexError("item path has no components")
        return self._components[0]

    def sub_path(self, offset: int) -> ItemPath:
        """Return the path without its first ``offset`` components."""
        if offset >= len(self._components):
            return ItemPath()
        return ItemPath(self._components[offset:])

    def __str__(self) -> str:
        return "/".join(self._components)

    def __repr__(self) -> str:
        return f"ItemPath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemPath):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)


@dataclass(frozen=True)
class ItemPosition:
    """A point on an item, given as a proportion of its size plus an offset.

    The default proportion addresses the centre of the item.
    """

    item_path: ItemPath
    proportion: Point = field(default_factory=lambda: Point(0.5, 0.5))
    offset: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        if not isinstance(self.item_path, ItemPath):
            object.__setattr__(self, "item_path", ItemPath(self.item_path))
        if not isinstance(self.proportion, Point):
            object.__setattr__(self, "proportion", Point(*self.proportion))
        if not isinstance(self.offset, Point):
            object.__setattr__(self, "offset", Point(*self.offset))

    def position_for_item_size(self, size: Size) -> Point:
        """Resolve the position for an item of the given size."""
        return Point(
            size.width * self.proportion.x + self.offset.x,
            size.height * self.proportion.y + self.offset.y,
        )