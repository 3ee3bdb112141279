"""Intersection records and the sorted intersection collection.

Intersections order by ``t`` with non-finite values last, so a genuine
numeric hit always wins over an unbounded one. Intersections sharing a
``t`` keep their insertion order.

Example:
    >>> from whitted.scene.intersection import Intersection, Intersections
    >>> from whitted.scene.object import Object
    >>> s = Object()
    >>> xs = Intersections([Intersection(5.0, s), Intersection(-3.0, s), Intersection(2.0, s)])
    >>> xs.hit().t
    2.0
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from whitted.core.ray import Ray
    from whitted.scene.object import Object


@dataclass(frozen=True, eq=False)
class Intersection:
    """A hit parameter on a specific object.

    Two intersections are equal when they have the same ``t`` on the same
    object (by identity).

    Attributes:
        t: The ray parameter of the hit.
        object: The object that was hit.
    """

    t: float
    object: Object

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.object is other.object

    def __hash__(self) -> int:
        return hash((self.t, id(self.object)))


def _sort_key(intersection: Intersection) -> tuple[bool, float]:
    t = intersection.t
    finite = math.isfinite(t)
    return (not finite, t if finite else 0.0)


class Intersections:
    """A collection of intersections kept sorted by ``t``."""

    def __init__(self, intersections: Iterable[Intersection] = ()) -> None:
        self._items: list[Intersection] = sorted(intersections, key=_sort_key)

    def add(self, ts: Iterable[float], obj: Object) -> None:
        """Record every hit parameter in ``ts`` against ``obj``."""
        new = [Intersection(t, obj) for t in ts]
        if new:
            self._items.extend(new)
            self._items.sort(key=_sort_key)

    def intersect(self, ray: Ray, obj: Object) -> None:
        """Intersect ``ray`` with ``obj`` and record the hits."""
        self.add(obj.intersect(ray), obj)

    def hit(self) -> Intersection | None:
        """Return the intersection with the smallest non-negative ``t``.

        Returns:
            The visible intersection, or None if every ``t`` is negative.
        """
        for intersection in self._items:
            if intersection.t >= 0.0:
                return intersection
        return None

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __repr__(self) -> str:
        ts = ", ".join(f"{i.t:g}" for i in self._items)
        return f"Intersections([{ts}])"
