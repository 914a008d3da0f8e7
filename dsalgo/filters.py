"""Median filtering, thresholding and cross-shaped morphology on 8-bit images."""

from __future__ import annotations

from collections.abc import Callable, Iterable

_CROSS = ((-1, 0), (0, -1), (0, 0), (0, 1), (1, 0))


def _check(data: bytes, width: int, height: int) -> bytes:
    data = bytes(data)
    if width < 1 or height < 1:
        raise ValueError("width and height must be positive")
    if len(data) != width * height:
        raise ValueError("data length does not match width * height")
    return data


def median_filter(data: bytes, width: int, height: int) -> bytes:
    """3x3 median filter.

    Pixels in the first and last columns of the processed span keep their
    input value; the first row, the last row and the pixels just outside the
    span are left black.
    """
    data = _check(data, width, height)
    out = bytearray(width * height)
    for idx in range(width + 1, (height - 2) * width + (width - 1)):
        row, col = divmod(idx, width)
        if col == 0 or col == width - 1:
            out[idx] = data[idx]
        else:
            window = sorted(
                data[(row + dr) * width + col + dc]
                for dr in (-1, 0, 1)
                for dc in (-1, 0, 1)
            )
            out[idx] = window[4]
    return bytes(out)


def binarize(data: Iterable[int], threshold: int = 120) -> bytes:
    """255 where a value exceeds threshold, 0 elsewhere."""
    return bytes(255 if value > threshold else 0 for value in data)


def _morph(
    data: bytes,
    width: int,
    height: int,
    reduce: Callable[[Iterable[bool]], bool],
    border: bool,
) -> bytes:
    data = _check(data, width, height)
    out = bytearray(width * height)
    for row in range(height):
        for col in range(width):
            if 0 < row < height - 1 and 0 < col < width - 1:
                hit = reduce(
                    data[(row + dr) * width + col + dc] != 0 for dr, dc in _CROSS
                )
            else:
                hit = border
            out[row * width + col] = 255 if hit else 0
    return bytes(out)


def dilate(data: bytes, width: int, height: int) -> bytes:
    """Dilate a binary image (nonzero is foreground) with a 3x3 cross.

    Border pixels come out as background.
    """
    return _morph(data, width, height, any, False)


def erode(data: bytes, width: int, height: int) -> bytes:
    """Erode a binary image (nonzero is foreground) with a 3x3 cross.

    Border pixels come out as foreground.
    """
    return _morph(data, width, height, all, True)