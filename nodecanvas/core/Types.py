from typing import NamedTuple

NODE_WIDTH = 200
NODE_HEIGHT = 100
CONNECTOR_SIZE = 10

# Half-extent of the square hit region around a connector point.
CONNECTOR_HIT = 10


class Point(NamedTuple):
    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)


def inside_rect(p: Point, left: float, top: float, width: float, height: float) -> bool:
    # Strict containment, matching the pointer hit-tests of the editor.
    return left < p.x < left + width and top < p.y < top + height


def inside_square(p: Point, center: Point, half: float = CONNECTOR_HIT) -> bool:
    return (center.x - half < p.x < center.x + half
            and center.y - half < p.y < center.y + half)
