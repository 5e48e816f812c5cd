import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polyface import Box, Circle, Point, Polygon
from polyface.io import save_svg
from polyface.render import render_png


def main() -> None:
    output_dir = ROOT / "validation_outputs"
    output_dir.mkdir(parents=True, exist_ok=True)

    donut = Polygon([Circle(Point(0, 0), 2)])
    donut.add_face(Box(-0.5, -0.5, 0.5, 0.5)).reverse()
    render_png(donut, output_dir / "donut.png")
    save_svg(donut, output_dir / "donut.svg")

    bowtie = Polygon([[(0, 0), (1, 1), (1, 0), (0, 1)]])
    render_png(bowtie, output_dir / "bowtie.png")

    print("Saved validation outputs to", output_dir)


if __name__ == "__main__":
    main()
