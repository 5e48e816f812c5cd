import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from polyface import Box, Circle, Point, Polygon


def main() -> None:
    polygon = Polygon()
    polygon.add_face(Circle(Point(0, 0), 2))
    hole = polygon.add_face(Box(-0.5, -0.5, 0.5, 0.5))
    hole.reverse()

    errors = polygon.validate()
    if errors:
        raise SystemExit("\n".join(errors))

    print("Faces:", len(polygon.faces))
    print("Edges:", len(polygon.edges))
    print("Area:", round(polygon.area(), 6))
    for i, face in enumerate(polygon.faces):
        print(f"Face {i}:", face.orientation().name, "perimeter", round(face.perimeter, 6))
    print("SVG path:", polygon.svg().strip())


if __name__ == "__main__":
    main()
