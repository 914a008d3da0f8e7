import pytest

from dsalgo.bitmap import (
    Bitmap,
    FileHeader,
    InfoHeader,
    bmp_to_raw,
    read_bitmap,
    row_stride,
    write_bitmap,
)


def _gray_bitmap(width, height, fill=0):
    stride = row_stride(8, width)
    palette = bytes(b for v in range(256) for b in (v, v, v, 0))
    offset = len(FileHeader().pack()) + len(InfoHeader().pack()) + len(palette)
    pixels = bytes(((fill + i) % 256 for i in range(stride * height)))
    return Bitmap(
        FileHeader(size=offset + len(pixels), off_bits=offset),
        InfoHeader(width=width, height=height, bit_count=8),
        palette,
        pixels,
    )


def test_file_header_layout():
    packed = FileHeader(size=100, off_bits=54).pack()
    assert len(packed) == 14
    assert packed[:2] == b"BM"


def test_info_header_layout():
    assert len(InfoHeader(width=3, height=2).pack()) == 40


def test_file_header_round_trip():
    header = FileHeader(size=1234, reserved1=1, reserved2=2, off_bits=1078)
    assert FileHeader.unpack(header.pack()) == header


def test_info_header_round_trip():
    header = InfoHeader(width=7, height=-5, bit_count=24, x_pels_per_meter=3780)
    assert InfoHeader.unpack(header.pack()) == header


def test_short_headers_rejected():
    with pytest.raises(ValueError):
        FileHeader.unpack(b"BM")
    with pytest.raises(ValueError):
        InfoHeader.unpack(bytes(10))


@pytest.mark.parametrize("bit_count", [8, 24, 32])
@pytest.mark.parametrize("width", range(0, 12))
def test_row_stride_is_padded_to_four(bit_count, width):
    raw = bit_count // 8 * width
    stride = row_stride(bit_count, width)
    assert stride % 4 == 0
    assert raw <= stride < raw + 4


def test_bitmap_bytes_round_trip():
    bitmap = _gray_bitmap(5, 3, fill=7)
    data = bitmap.to_bytes()
    parsed = Bitmap.from_bytes(data)
    assert parsed == bitmap
    assert parsed.to_bytes() == data


def test_rows_split_pixels_by_stride():
    bitmap = _gray_bitmap(5, 3)
    rows = bitmap.rows()
    assert len(rows) == 3
    assert all(len(row) == row_stride(8, 5) for row in rows)
    assert b"".join(rows) == bitmap.pixels


def test_truncated_pixels_rejected():
    data = _gray_bitmap(4, 4).to_bytes()
    with pytest.raises(ValueError):
        Bitmap.from_bytes(data[:-1])


def test_bad_signature_rejected():
    data = _gray_bitmap(4, 4).to_bytes()
    with pytest.raises(ValueError):
        Bitmap.from_bytes(b"XX" + data[2:])


def test_too_short_for_headers_rejected():
    with pytest.raises(ValueError):
        Bitmap.from_bytes(b"BM" + bytes(20))


def test_file_round_trip_and_raw(tmp_path):
    bitmap = _gray_bitmap(6, 4, fill=3)
    path = tmp_path / "image.bmp"
    write_bitmap(path, bitmap)
    assert read_bitmap(path) == bitmap
    raw = tmp_path / "image.raw"
    written = bmp_to_raw(path, raw)
    assert raw.read_bytes() == bitmap.pixels
    assert written == len(bitmap.pixels)