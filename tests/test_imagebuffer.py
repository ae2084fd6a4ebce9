import struct
import zlib

import pytest

from raytracer.imagebuffer import ImageBuffer
from raytracer.vector import Vec3


def _chunks(data):
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    pos = 8
    chunks = []
    while pos < len(data):
        (length,) = struct.unpack(">I", data[pos:pos + 4])
        kind = data[pos + 4:pos + 8]
        payload = data[pos + 8:pos + 8 + length]
        (crc,) = struct.unpack(">I", data[pos + 8 + length:pos + 12 + length])
        assert crc == zlib.crc32(kind + payload) & 0xFFFFFFFF
        chunks.append((kind, payload))
        pos += 12 + length
    return chunks


def _decode_rows(data):
    chunks = dict(_chunks(data))
    width, height = struct.unpack(">II", chunks[b"IHDR"][:8])
    raw = zlib.decompress(chunks[b"IDAT"])
    stride = width * 3 + 1
    rows = [raw[i * stride:(i + 1) * stride] for i in range(height)]
    assert all(row[0] == 0 for row in rows)
    return width, height, [row[1:] for row in rows]


def test_initialize_sets_dimensions():
    image = ImageBuffer()
    image.initialize(5, 3)
    assert (image.width, image.height) == (5, 3)


def test_checkerboard_pattern():
    image = ImageBuffer()
    image.initialize(32, 32)
    assert tuple(image.get_pixel(0, 0)) == pytest.approx((0.2, 0.2, 0.2))
    assert tuple(image.get_pixel(16, 0)) == pytest.approx((0.3, 0.3, 0.3))
    assert tuple(image.get_pixel(16, 16)) == pytest.approx((0.2, 0.2, 0.2))


def test_initialize_clears_modified():
    image = ImageBuffer()
    image.initialize(4, 4)
    assert image.modified is False
    assert image.modified_lower == 4
    assert image.modified_upper == 0


def test_set_pixel_round_trip_and_modified_range():
    image = ImageBuffer()
    image.initialize(4, 6)
    colour = Vec3(0.1, 0.5, 0.9)
    image.set_pixel(2, 3, colour)
    image.set_pixel(1, 1, colour)
    assert image.get_pixel(2, 3) == colour
    assert image.modified is True
    assert (image.modified_lower, image.modified_upper) == (1, 4)
    image.reset_modified()
    assert image.modified is False


def test_out_of_range_pixel_raises():
    image = ImageBuffer()
    image.initialize(2, 2)
    with pytest.raises(IndexError):
        image.set_pixel(2, 0, Vec3())
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_encode_uninitialized_raises():
    with pytest.raises(ValueError):
        ImageBuffer().encode_png()


def test_png_header_and_chunk_order():
    image = ImageBuffer()
    image.initialize(3, 2)
    chunks = _chunks(image.encode_png())
    assert [kind for kind, _ in chunks] == [b"IHDR", b"IDAT", b"IEND"]
    assert struct.unpack(">IIBBBBB", chunks[0][1]) == (3, 2, 8, 2, 0, 0, 0)


def test_png_rows_are_flipped_and_clamped():
    image = ImageBuffer()
    image.initialize(2, 2)
    for x in range(2):
        for y in range(2):
            image.set_pixel(x, y, Vec3(0, 0, 0))
    image.set_pixel(0, 0, Vec3(2.0, -1.0, 1.0))
    width, height, rows = _decode_rows(image.encode_png())
    assert (width, height) == (2, 2)
    assert rows[1][:3] == bytes([255, 0, 255])
    assert rows[0] == bytes(6)


def test_save_to_file_writes_encoded_png(tmp_path):
    image = ImageBuffer()
    image.initialize(3, 3)
    image.set_pixel(1, 1, Vec3(1, 0, 0))
    target = tmp_path / "out.png"
    image.save_to_file(target)
    assert target.read_bytes() == image.encode_png()