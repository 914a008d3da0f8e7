"""Canny edge detection on 8-bit grayscale images."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from dataclasses import replace

from dsalgo.bitmap import StrPath, read_bitmap, write_bitmap

SOBEL_Y = ((-1, -2, -1), (0, 0, 0), (1, 2, 1))
SOBEL_X = ((1, 0, 1), (-2, 0, 2), (-1, 0, 1))

_OFFSETS = (-1, 0, 1)

_VERTICAL = ((-1, 0), (1, 0))
_ANTI_DIAGONAL = ((-1, 1), (1, -1))
_HORIZONTAL = ((0, -1), (0, 1))
_DIAGONAL = ((-1, -1), (1, 1))

_NEIGHBOURS = {
    0: _VERTICAL,
    4: _VERTICAL,
    1: _ANTI_DIAGONAL,
    5: _ANTI_DIAGONAL,
    2: _HORIZONTAL,
    6: _HORIZONTAL,
    3: _DIAGONAL,
    7: _DIAGONAL,
}

Grid = list[list[float]]


def _convolve(
    rows: Sequence[Sequence[int]], kernel: tuple[tuple[int, ...], ...], row: int, col: int
) -> int:
    return sum(
        weight * rows[row + dr][col + dc]
        for dr, kernel_row in zip(_OFFSETS, kernel)
        for dc, weight in zip(_OFFSETS, kernel_row)
    )


def _direction(dx: int, dy: int) -> int:
    angle = math.atan(dy / dx) if dx else math.copysign(math.pi / 2, dy)
    angle -= 90 + 22.5
    if angle < 0 or angle >= 315:
        return 0
    return math.ceil(angle / 45) + 1


def _shape(grid: Sequence[Sequence]) -> tuple[int, int]:
    height = len(grid)
    width = len(grid[0]) if height else 0
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    return height, width


def gradient_maps(rows: Sequence[Sequence[int]]) -> tuple[Grid, list[list[int]]]:
    """Sobel gradient magnitude and direction sector for every interior pixel.

    Border pixels get magnitude 0 and direction 0.
    """
    height, width = _shape(rows)
    gradient = [[0.0] * width for _ in range(height)]
    directions = [[0] * width for _ in range(height)]
    for row in range(1, height - 1):
        for col in range(1, width - 1):
            dy = _convolve(rows, SOBEL_Y, row, col)
            dx = _convolve(rows, SOBEL_X, row, col)
            gradient[row][col] = math.sqrt(dx * dx + dy * dy)
            directions[row][col] = _direction(dx, dy)
    return gradient, directions


def suppress_non_maxima(gradient: Sequence[Sequence[float]], directions: Sequence[Sequence[int]]) -> Grid:
    """Zero interior magnitudes not strictly above both neighbours along their direction.

    Pixels are visited row by row, so earlier suppressions affect later ones.
    """
    height, width = _shape(gradient)
    if _shape(directions) != (height, width):
        raise ValueError("gradient and directions differ in shape")
    result = [list(row) for row in gradient]
    for row in range(1, height - 1):
        for col in range(1, width - 1):
            try:
                offsets = _NEIGHBOURS[directions[row][col]]
            except KeyError:
                raise ValueError(
                    f"direction {directions[row][col]} outside 0..7"
                ) from None
            value = result[row][col]
            if any(value <= result[row + dr][col + dc] for dr, dc in offsets):
                result[row][col] = 0.0
    return result


def follow_edges(gradient: Sequence[Sequence[float]], high: float, low: float) -> list[bytes]:
    """Hysteresis: grow edges from interior pixels above high through pixels above low."""
    height, width = _shape(gradient)
    edge = [bytearray(width) for _ in range(height)]
    visited: set[tuple[int, int]] = set()
    for row in range(1, height - 1):
        for col in range(1, width - 1):
            if gradient[row][col] <= high or (row, col) in visited:
                continue
            visited.add((row, col))
            stack = [(row, col)]
            while stack:
                r, c = stack.pop()
                edge[r][c] = 255
                for dr in _OFFSETS:
                    for dc in _OFFSETS:
                        nr, nc = r + dr, c + dc
                        if (
                            (dr or dc)
                            and 0 <= nr < height
                            and 0 <= nc < width
                            and (nr, nc) not in visited
                            and gradient[nr][nc] > low
                        ):
                            visited.add((nr, nc))
                            stack.append((nr, nc))
    return [bytes(row) for row in edge]


def canny_edge(rows: Sequence[Sequence[int]], low: float, high: float) -> list[bytes]:
    """Edge map (0 or 255 per pixel) of a grayscale image given as rows."""
    gradient, directions = gradient_maps(rows)
    thinned = suppress_non_maxima(gradient, directions)
    return follow_edges(thinned, high, low)


def canny_file(source: StrPath, target: StrPath, low: float, high: float) -> None:
    """Detect edges in an 8-bit bitmap file and save them as a bitmap of the same format."""
    bitmap = read_bitmap(source)
    edges = canny_edge(bitmap.rows(), low, high)
    write_bitmap(target, replace(bitmap, pixels=b"".join(edges)))


def main(argv: list[str] | None = None) -> int:
    """Run Canny edge detection on a grayscale bitmap file."""
    parser = argparse.ArgumentParser(
        description="Detect edges in an 8-bit grayscale bitmap."
    )
    parser.add_argument("source", nargs="?", default="Lenna(gray).bmp")
    parser.add_argument("target", nargs="?", default="Lenna(Canny).bmp")
    parser.add_argument("--low", type=int, default=50)
    parser.add_argument("--high", type=int, default=150)
    args = parser.parse_args(argv)
    try:
        canny_file(args.source, args.target, args.low, args.high)
    except (OSError, ValueError) as exc:
        print(f"Failed to Canny Edge: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())