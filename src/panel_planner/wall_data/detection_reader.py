# File: src/panel_planner/wall_data/detection_reader.py
"""
Reading wall geometry produced by the color detection step.

The detector writes one line per detected region: an HSV triple followed by
vertex pairs, e.g.::

    "(0, 0, 255)","(10, 20)","(210, 20)","(10, 30)","(210, 30)"

Rectangle mode has four vertices; corner-selection mode has two (the user
picked the wall's end points). The detector itself is an external script run
as a subprocess; its failure only shows up as a missing or empty output file.
"""

import logging
import math
import os
import re
import subprocess
from typing import List, Optional, Sequence, Tuple

from .wall_model import ColorTag, Wall

logger = logging.getLogger(__name__)

DETECTOR_SCRIPT = "imageProcTest.py"

_GROUP = re.compile(r"\(([^()]*)\)")

Point = Tuple[float, float]


def euclidean_distance(p1: Point, p2: Point) -> float:
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def rectangle_sides(vertices: Sequence[Point]) -> Tuple[float, float]:
    """Two sides of a rectangle from its four vertices.

    Distances from the first vertex to the other three are two sides and a
    diagonal; the strictly longest distance is the diagonal.

    Args:
        vertices: Four (x, y) points in any order

    Returns:
        The two side lengths, in vertex order
    """
    d1 = euclidean_distance(vertices[0], vertices[1])
    d2 = euclidean_distance(vertices[0], vertices[2])
    d3 = euclidean_distance(vertices[0], vertices[3])

    if d1 > d2 and d1 > d3:
        return d2, d3
    if d2 > d1 and d2 > d3:
        return d1, d3
    return d1, d2


def _numbers(group: str) -> List[float]:
    return [float(part) for part in group.split(",")]


def parse_detection_line(line: str, corner_selection: bool = False) -> Optional[Wall]:
    """Parse one detection line into a Wall with raw sides.

    Args:
        line: Detector output line
        corner_selection: Expect two vertices instead of four

    Returns:
        Wall, or None when the line cannot be parsed
    """
    groups = _GROUP.findall(line)
    needed_vertices = 2 if corner_selection else 4
    if len(groups) < 1 + needed_vertices:
        return None

    try:
        hsv = _numbers(groups[0])
        vertices = [_numbers(group) for group in groups[1:1 + needed_vertices]]
    except ValueError:
        return None

    if len(hsv) != 3 or any(len(vertex) != 2 for vertex in vertices):
        return None

    try:
        color = ColorTag(*(int(component) for component in hsv))
    except ValueError:
        return None

    points = [(vertex[0], vertex[1]) for vertex in vertices]
    if corner_selection:
        sides = [euclidean_distance(points[0], points[1])]
    else:
        sides = list(rectangle_sides(points))

    return Wall(color=color, raw_sides=sides)


def read_detection_file(path: str, corner_selection: bool = False) -> List[Wall]:
    """Read all walls from a detector output file.

    A missing file yields no walls; unparsable lines, including lines with
    bytes that are not valid UTF-8, are skipped.

    Args:
        path: Detector output CSV
        corner_selection: Lines carry two vertices instead of four

    Returns:
        Walls in file order
    """
    if not os.path.exists(path):
        logger.warning(f"Detection output not found: {path}")
        return []

    walls = []
    skipped = 0
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip():
                continue
            wall = parse_detection_line(line, corner_selection)
            if wall is None:
                skipped += 1
                logger.debug(f"{path}:{line_number}: unparsable detection line")
                continue
            walls.append(wall)

    logger.info(f"Read {len(walls)} detected walls from {path} ({skipped} skipped)")
    return walls


def build_detector_command(
    image_path: str,
    output_path: str,
    corner_selection: bool = False,
    script: str = DETECTOR_SCRIPT,
    python: str = "python",
) -> List[str]:
    command = [python, script, "--image", image_path, "--output", output_path]
    if corner_selection:
        command += ["--corner", "True"]
    return command


def run_detector(
    image_path: str,
    output_path: str,
    corner_selection: bool = False,
    script: str = DETECTOR_SCRIPT,
    python: str = "python",
) -> int:
    """Run the external detection script.

    Failures are logged, not raised: a missing output file simply leads to
    an empty ingestion.

    Returns:
        The process return code (-1 when it could not be started)
    """
    command = build_detector_command(image_path, output_path, corner_selection, script, python)
    logger.info(f"Running detector: {' '.join(command)}")

    try:
        completed = subprocess.run(command, check=False)
    except OSError as e:
        logger.error(f"Could not start detector: {e}")
        return -1

    if completed.returncode != 0:
        logger.warning(f"Detector exited with status {completed.returncode}")
    return completed.returncode
