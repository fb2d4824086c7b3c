"""JSON persistence for documents handled by the command-line tool."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from .document import (
    Curve,
    Document,
    Ellipse,
    Matrix,
    Page,
    PageObject,
    Rect,
    Segment,
    Shape,
    Vector,
)


def _numbers(values: Any, where: str) -> List[float]:
    try:
        return [float(v) for v in values]
    except (TypeError, ValueError):
        raise ValueError(f"{where}: expected numbers, got {values!r}") from None


def _vector(value: Any, where: str) -> Vector:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{where}: expected [x, y], got {value!r}")
    return Vector(*_numbers(value, where))


def _matrix(value: Any, where: str) -> Matrix:
    if value is None:
        return Matrix()
    if not isinstance(value, (list, tuple)) or len(value) != 6:
        raise ValueError(f"{where}: matrix needs six numbers, got {value!r}")
    return Matrix(*_numbers(value, where))


def _rect(value: Any, where: str) -> Rect:
    if not isinstance(value, (list, tuple)) or len(value) != 4:
        raise ValueError(f"{where}: extent needs [x0, y0, x1, y1], got {value!r}")
    x0, y0, x1, y1 = _numbers(value, where)
    return Rect(Vector(x0, y0), Vector(x1, y1))


def _require_dict(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{where}: expected an object, got {value!r}")
    return value


def _require_list(value: Any, where: str) -> List[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{where}: expected a list, got {value!r}")
    return value


def _segment(value: Any, where: str) -> Segment:
    seg = _require_dict(value, where)
    points = [_vector(p, where) for p in _require_list(seg.get("points", []), f"{where}.points")]
    try:
        return Segment(seg.get("type", "segment"), points)
    except ValueError as exc:
        raise ValueError(f"{where}: {exc}") from exc


def _shape(value: Any, where: str) -> Shape:
    if not isinstance(value, list):
        raise ValueError(f"{where}: shape must be a list of subpaths")
    shape: Shape = []
    for i, sub in enumerate(value):
        sub_where = f"{where}[{i}]"
        kind = sub.get("type") if isinstance(sub, dict) else None
        if kind == "curve":
            raw_segments = _require_list(sub.get("segments", []), f"{sub_where}.segments")
            segments = [
                _segment(seg, f"{sub_where}.segments[{j}]") for j, seg in enumerate(raw_segments)
            ]
            if not segments:
                raise ValueError(f"{sub_where}: curve has no segments")
            shape.append(Curve(segments, closed=bool(sub.get("closed", False))))
        elif kind == "ellipse":
            shape.append(Ellipse(_matrix(sub.get("matrix"), sub_where)))
        else:
            raise ValueError(f"{sub_where}: unknown subpath type {kind!r}")
    return shape


def object_from_dict(data: Dict[str, Any], where: str = "object") -> PageObject:
    if not isinstance(data, dict) or "type" not in data:
        raise ValueError(f"{where}: object needs a 'type'")
    kind = data["type"]
    matrix = _matrix(data.get("matrix"), where)
    try:
        obj = PageObject(kind, matrix=matrix)
    except ValueError as exc:
        raise ValueError(f"{where}: {exc}") from exc
    if kind == "path":
        obj.shape = _shape(data.get("shape", []), f"{where}.shape")
    elif kind == "group":
        children = _require_list(data.get("children", []), f"{where}.children")
        obj.children = [
            object_from_dict(child, f"{where}.children[{i}]")
            for i, child in enumerate(children)
        ]
    elif "extent" in data:
        obj.extent = _rect(data["extent"], where)
    return obj


def document_from_dict(data: Dict[str, Any]) -> Document:
    data = _require_dict(data, "document")
    pages: List[Page] = []
    for pno, page_data in enumerate(_require_list(data.get("pages", []), "pages")):
        page_data = _require_dict(page_data, f"pages[{pno}]")
        page = Page()
        objects = _require_list(page_data.get("objects", []), f"pages[{pno}].objects")
        for i, obj_data in enumerate(objects):
            where = f"pages[{pno}].objects[{i}]"
            page.insert(object_from_dict(obj_data, where), bool(obj_data.get("selected", False)))
        pages.append(page)
    if not pages:
        raise ValueError("document has no pages")
    return Document(pages)


def _point(v: Vector) -> List[float]:
    return [v.x, v.y]


def _shape_to_list(shape: Shape) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for sub in shape:
        if isinstance(sub, Curve):
            out.append(
                {
                    "type": "curve",
                    "closed": sub.closed,
                    "segments": [
                        {"type": seg.kind, "points": [_point(p) for p in seg.points]}
                        for seg in sub.segments
                    ],
                }
            )
        else:
            out.append({"type": "ellipse", "matrix": list(sub.matrix.elements())})
    return out


def object_to_dict(obj: PageObject) -> Dict[str, Any]:
    data: Dict[str, Any] = {"type": obj.type}
    if not obj.matrix.is_identity():
        data["matrix"] = list(obj.matrix.elements())
    if obj.type == "path":
        data["shape"] = _shape_to_list(obj.shape)
    elif obj.type == "group":
        data["children"] = [object_to_dict(child) for child in obj.children]
    elif obj.extent is not None and not obj.extent.is_empty():
        lo, hi = obj.extent.bottom_left(), obj.extent.top_right()
        data["extent"] = [lo.x, lo.y, hi.x, hi.y]
    return data


def document_to_dict(document: Document) -> Dict[str, Any]:
    pages = []
    for page in document.pages:
        objects = []
        for _, obj, selected in page.objects():
            data = object_to_dict(obj)
            data["selected"] = selected
            objects.append(data)
        pages.append({"objects": objects})
    return {"pages": pages}


def load_document(path: Union[str, Path]) -> Document:
    with open(path, encoding="utf-8") as fin:
        return document_from_dict(json.load(fin))


def dump_document(document: Document, path: Union[str, Path]) -> None:
    Path(path).write_text(json.dumps(document_to_dict(document), indent=2), encoding="utf-8")


__all__ = [
    "object_from_dict",
    "object_to_dict",
    "document_from_dict",
    "document_to_dict",
    "load_document",
    "dump_document",
]
