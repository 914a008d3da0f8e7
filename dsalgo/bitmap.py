"""Windows bitmap (BMP) headers, pixel rows and file helpers."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

BMP_SIGNATURE = 0x4D42  # b"BM" read as a little-endian WORD

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")

FILE_HEADER_SIZE = _FILE_HEADER.size
INFO_HEADER_SIZE = _INFO_HEADER.size

StrPath = str | PathLike


def row_stride(bit_count: int, width: int) -> int:
    """Bytes in one stored pixel row, padded up to a multiple of four."""
    return ((bit_count // 8) * width + 3) // 4 * 4


@dataclass
class FileHeader:
    """The 14-byte header that starts every bitmap file."""

    signature: int = BMP_SIGNATURE
    size: int = 0
    reserved1: int = 0
    reserved2: int = 0
    off_bits: int = 0

    def pack(self) -> bytes:
        """The header as stored in a file."""
        return _FILE_HEADER.pack(
            self.signature, self.size, self.reserved1, self.reserved2, self.off_bits
        )

    @classmethod
    def unpack(cls, data: bytes) -> FileHeader:
        """Read a header from the start of data."""
        if len(data) < FILE_HEADER_SIZE:
            raise ValueError("data too short for a bitmap file header")
        return cls(*_FILE_HEADER.unpack_from(data))


@dataclass
class InfoHeader:
    """The 40-byte header describing the image's size and pixel format."""

    size: int = INFO_HEADER_SIZE
    width: int = 0
    height: int = 0
    planes: int = 1
    bit_count: int = 8
    compression: int = 0
    size_image: int = 0
    x_pels_per_meter: int = 0
    y_pels_per_meter: int = 0
    clr_used: int = 0
    clr_important: int = 0

    def pack(self) -> bytes:
        """The header as stored in a file."""
        return _INFO_HEADER.pack(
            self.size,
            self.width,
            self.height,
            self.planes,
            self.bit_count,
            self.compression,
            self.size_image,
            self.x_pels_per_meter,
            self.y_pels_per_meter,
            self.clr_used,
            self.clr_important,
        )

    @classmethod
    def unpack(cls, data: bytes) -> InfoHeader:
        """Read a header from the start of data."""
        if len(data) < INFO_HEADER_SIZE:
            raise ValueError("data too short for a bitmap info header")
        return cls(*_INFO_HEADER.unpack_from(data))


@dataclass
class Bitmap:
    """A bitmap image: both headers, whatever lies before the pixels, and the pixels."""

    file_header: FileHeader
    info_header: InfoHeader
    palette: bytes = b""
    pixels: bytes = b""

    @property
    def stride(self) -> int:
        """Bytes per stored row."""
        return row_stride(self.info_header.bit_count, self.info_header.width)

    @property
    def row_count(self) -> int:
        """Number of stored rows."""
        return abs(self.info_header.height)

    @classmethod
    def from_bytes(cls, data: bytes) -> Bitmap:
        """Parse a whole bitmap file."""
        data = bytes(data)
        headers_end = FILE_HEADER_SIZE + INFO_HEADER_SIZE
        if len(data) < headers_end:
            raise ValueError("data too short for bitmap headers")
        file_header = FileHeader.unpack(data[:FILE_HEADER_SIZE])
        if file_header.signature != BMP_SIGNATURE:
            raise ValueError("not a bitmap: bad signature")
        info_header = InfoHeader.unpack(data[FILE_HEADER_SIZE:headers_end])
        start = file_header.off_bits
        if start < headers_end:
            raise ValueError("pixel data offset points inside the headers")
        end = start + row_stride(info_header.bit_count, info_header.width) * abs(
            info_header.height
        )
        if len(data) < end:
            raise ValueError("bitmap pixel data is truncated")
        return cls(file_header, info_header, data[headers_end:start], data[start:end])

    def to_bytes(self) -> bytes:
        """The whole bitmap file."""
        return (
            self.file_header.pack()
            + self.info_header.pack()
            + bytes(self.palette)
            + bytes(self.pixels)
        )

    def rows(self) -> list[bytes]:
        """The stored pixel rows, padding included, in file order."""
        stride = self.stride
        return [
            bytes(self.pixels[row * stride : (row + 1) * stride])
            for row in range(self.row_count)
        ]


def read_bitmap(path: StrPath) -> Bitmap:
    """Load a bitmap file."""
    return Bitmap.from_bytes(Path(path).read_bytes())


def write_bitmap(path: StrPath, bitmap: Bitmap) -> None:
    """Save a bitmap file."""
    Path(path).write_bytes(bitmap.to_bytes())


def bmp_to_raw(source: StrPath, target: StrPath) -> int:
    """Write the raw pixel data of a bitmap file to target; return its length."""
    pixels = read_bitmap(source).pixels
    Path(target).write_bytes(pixels)
    return len(pixels)