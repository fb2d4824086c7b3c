"""In-memory drawing document model used as the host collaborator."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union

OBJECT_TYPES = ("path", "group", "reference", "text", "image")
SEGMENT_KINDS = ("segment", "bezier", "arc", "spline")


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __iter__(self):
        return iter((self.x, self.y))


class Rect:
    """Axis-aligned rectangle; ``top`` is the larger y coordinate."""

    def __init__(self, *points: Vector) -> None:
        self._min: Optional[Vector] = None
        self._max: Optional[Vector] = None
        for point in points:
            self.add(point)

    def __repr__(self) -> str:
        if self.is_empty():
            return "Rect()"
        return f"Rect({self._min!r}, {self._max!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return self._min == other._min and self._max == other._max

    def is_empty(self) -> bool:
        return self._min is None

    def add(self, item: Union[Vector, "Rect"]) -> None:
        if isinstance(item, Rect):
            if not item.is_empty():
                self.add(item.bottom_left())
                self.add(item.top_right())
            return
        if self._min is None or self._max is None:
            self._min = item
            self._max = item
            return
        self._min = Vector(min(self._min.x, item.x), min(self._min.y, item.y))
        self._max = Vector(max(self._max.x, item.x), max(self._max.y, item.y))

    def _require(self) -> Tuple[Vector, Vector]:
        if self._min is None or self._max is None:
            raise ValueError("empty rectangle has no extent")
        return self._min, self._max

    def left(self) -> float:
        return self._require()[0].x

    def right(self) -> float:
        return self._require()[1].x

    def bottom(self) -> float:
        return self._require()[0].y

    def top(self) -> float:
        return self._require()[1].y

    def width(self) -> float:
        return self.right() - self.left()

    def height(self) -> float:
        return self.top() - self.bottom()

    def bottom_left(self) -> Vector:
        return self._require()[0]

    def top_right(self) -> Vector:
        return self._require()[1]

    def top_left(self) -> Vector:
        return Vector(self.left(), self.top())

    def center(self) -> Vector:
        return (self.bottom_left() + self.top_right()) * 0.5

    def contains(self, point: Vector) -> bool:
        if self.is_empty():
            return False
        lo, hi = self._require()
        return lo.x <= point.x <= hi.x and lo.y <= point.y <= hi.y

    def expanded(self, margin: float) -> "Rect":
        offset = Vector(margin, margin)
        return Rect(self.bottom_left() - offset, self.top_right() + offset)


@dataclass(frozen=True)
class Matrix:
    """Affine map ``x' = a*x + c*y + e``, ``y' = b*x + d*y + f``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def translation(cls, offset: Vector) -> "Matrix":
        return cls(1.0, 0.0, 0.0, 1.0, offset.x, offset.y)

    def is_identity(self) -> bool:
        return self == Matrix()

    def elements(self) -> Tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return Vector(
                self.a * other.x + self.c * other.y + self.e,
                self.b * other.x + self.d * other.y + self.f,
            )
        if isinstance(other, Matrix):
            return Matrix(
                self.a * other.a + self.c * other.b,
                self.b * other.a + self.d * other.b,
                self.a * other.c + self.c * other.d,
                self.b * other.c + self.d * other.d,
                self.a * other.e + self.c * other.f + self.e,
                self.b * other.e + self.d * other.f + self.f,
            )
        return NotImplemented


@dataclass
class Segment:
    kind: str
    points: List[Vector]

    def __post_init__(self) -> None:
        if self.kind not in SEGMENT_KINDS:
            raise ValueError(f"unknown segment kind {self.kind!r}")
        if len(self.points) < 2:
            raise ValueError(f"{self.kind} needs at least two points")


@dataclass
class Curve:
    segments: List[Segment]
    closed: bool = False
    type: str = field(default="curve", init=False)

    def first_point(self) -> Vector:
        return self.segments[0].points[0]

    def last_point(self) -> Vector:
        return self.segments[-1].points[-1]

    def points(self) -> Iterator[Vector]:
        for segment in self.segments:
            yield from segment.points


@dataclass
class Ellipse:
    matrix: Matrix
    type: str = field(default="ellipse", init=False)

    def points(self) -> Iterator[Vector]:
        # corners of the tight box around the image of the unit circle
        m = self.matrix
        half = Vector(math.hypot(m.a, m.c), math.hypot(m.b, m.d))
        center = Vector(m.e, m.f)
        yield center - half
        yield center + half


SubPath = Union[Curve, Ellipse]
Shape = List[SubPath]


def straight_segment(start: Vector, end: Vector) -> Shape:
    """Return a shape made of one open curve with a single straight segment."""

    return [Curve([Segment("segment", [start, end])], closed=False)]


@dataclass
class PageObject:
    type: str
    matrix: Matrix = field(default_factory=Matrix)
    shape: Shape = field(default_factory=list)
    extent: Optional[Rect] = None
    children: List["PageObject"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.type not in OBJECT_TYPES:
            raise ValueError(f"unknown object type {self.type!r}")

    def local_bbox(self) -> Rect:
        box = Rect()
        if self.type == "path":
            for subpath in self.shape:
                for point in subpath.points():
                    box.add(point)
        elif self.type == "group":
            for child in self.children:
                box.add(child.bbox())
        elif self.extent is not None:
            box.add(self.extent)
        return box

    def bbox(self) -> Rect:
        local = self.local_bbox()
        if local.is_empty():
            return local
        lo, hi = local.bottom_left(), local.top_right()
        corners = (lo, Vector(hi.x, lo.y), hi, Vector(lo.x, hi.y))
        return Rect(*(self.matrix * corner for corner in corners))


class Page:
    """Ordered objects with a per-object selection flag."""

    def __init__(self, objects: Optional[Sequence[Tuple[PageObject, bool]]] = None) -> None:
        self._objects: List[PageObject] = []
        self._selected: List[bool] = []
        for obj, selected in objects or ():
            self.insert(obj, selected)

    def __len__(self) -> int:
        return len(self._objects)

    def __getitem__(self, index: int) -> PageObject:
        return self._objects[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self._objects == other._objects and self._selected == other._selected

    def insert(self, obj: PageObject, selected: bool = False) -> int:
        self._objects.append(obj)
        self._selected.append(bool(selected))
        return len(self._objects) - 1

    def objects(self) -> Iterator[Tuple[int, PageObject, bool]]:
        for index, obj in enumerate(self._objects):
            yield index, obj, self._selected[index]

    def is_selected(self, index: int) -> bool:
        return self._selected[index]

    def set_selected(self, index: int, selected: bool) -> None:
        self._selected[index] = bool(selected)

    def bbox(self, index: int) -> Rect:
        return self._objects[index].bbox()

    def transform(self, index: int, matrix: Matrix) -> None:
        obj = self._objects[index]
        obj.matrix = matrix * obj.matrix

    def set_shape(self, index: int, shape: Shape) -> None:
        obj = self._objects[index]
        if obj.type != "path":
            raise ValueError(f"object {index} is a {obj.type}, not a path")
        obj.shape = shape

    def set_matrix(self, index: int, matrix: Matrix) -> None:
        self._objects[index].matrix = matrix

    def clone(self) -> "Page":
        return copy.deepcopy(self)


class Document:
    def __init__(self, pages: Optional[Sequence[Page]] = None) -> None:
        self.pages: List[Page] = list(pages or [])

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(self, pno: int) -> Page:
        return self.pages[pno]

    def __setitem__(self, pno: int, page: Page) -> None:
        self.pages[pno] = page


__all__ = [
    "OBJECT_TYPES",
    "SEGMENT_KINDS",
    "Vector",
    "Rect",
    "Matrix",
    "Segment",
    "Curve",
    "Ellipse",
    "SubPath",
    "Shape",
    "straight_segment",
    "PageObject",
    "Page",
    "Document",
]
