from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from .polygon import Polygon
from .utils import format_number


PathLike = Union[str, Path]

_SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="{viewbox}">\n'
    '<path d="{d}" fill="{fill}" fill-opacity="{fill_opacity}" fill-rule="evenodd" '
    'stroke="{stroke}" stroke-width="{stroke_width}"/>\n'
    "</svg>\n"
)


def load_json(path: PathLike) -> Polygon:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return Polygon.from_dict(data)


def save_json(polygon: Polygon, path: PathLike) -> None:
    Path(path).write_text(polygon.to_json(), encoding="utf-8")


def to_svg_document(
    polygon: Polygon,
    fill: str = "#5aa9e6",
    fill_opacity: float = 0.3,
    stroke: str = "#2b2b2b",
    stroke_width: float = 1.0,
    padding: float = 0.5,
) -> str:
    """Standalone SVG document holding one path with every face."""
    box = polygon.box
    if box.is_empty():
        viewbox = "0 0 0 0"
    else:
        viewbox = " ".join(
            format_number(v)
            for v in (
                box.xmin - padding,
                box.ymin - padding,
                box.width + 2 * padding,
                box.height + 2 * padding,
            )
        )
    return _SVG_TEMPLATE.format(
        viewbox=viewbox,
        d=polygon.svg().strip(),
        fill=fill,
        fill_opacity=fill_opacity,
        stroke=stroke,
        stroke_width=stroke_width,
    )


def save_svg(polygon: Polygon, path: PathLike, **style) -> None:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(to_svg_document(polygon, **style), encoding="utf-8")
