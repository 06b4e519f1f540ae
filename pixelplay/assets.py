"""PCX decoding and the sprite asset cache."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from pixelplay.sprites import CachedSprite, Frame

_HEADER_SIZE = 128
_MANUFACTURER = 0x0A
_VGA_PALETTE_MARKER = 0x0C
_VGA_PALETTE_SIZE = 768
_OPAQUE = 255

_SPRITE_FILES: dict[Frame, str] = {
    Frame.BLIPJOY1: "blipjoy1.pcx",
    Frame.BLIPJOY2: "blipjoy2.pcx",
    Frame.FERRIS1: "ferris1.pcx",
    Frame.FERRIS2: "ferris2.pcx",
    Frame.CTHULHU1: "cthulhu1.pcx",
    Frame.CTHULHU2: "cthulhu2.pcx",
    Frame.PLAYER1: "player1.pcx",
    Frame.PLAYER2: "player2.pcx",
    Frame.SHIELD1: "shield.pcx",
    Frame.BULLET1: "bullet1.pcx",
    Frame.BULLET2: "bullet2.pcx",
    Frame.BULLET3: "bullet3.pcx",
    Frame.BULLET4: "bullet4.pcx",
    Frame.BULLET5: "bullet5.pcx",
    Frame.LASER1: "laser1.pcx",
    Frame.LASER2: "laser2.pcx",
    Frame.LASER3: "laser3.pcx",
    Frame.LASER4: "laser4.pcx",
    Frame.LASER5: "laser5.pcx",
    Frame.LASER6: "laser6.pcx",
    Frame.LASER7: "laser7.pcx",
    Frame.LASER8: "laser8.pcx",
}


class PcxError(ValueError):
    """Raised when PCX data is malformed or uses an unsupported layout."""


@dataclass(frozen=True)
class Assets:
    """All sprites loaded into memory, keyed by frame."""

    sprites: Mapping[Frame, CachedSprite]


def _decode(body: bytes, size: int, encoding: int) -> bytes:
    if encoding == 0:
        if len(body) < size:
            raise PcxError("truncated image data")
        return bytes(body[:size])
    out = bytearray()
    stream = iter(body)
    try:
        while len(out) < size:
            byte = next(stream)
            if byte >= 0xC0:
                out.extend(bytes([next(stream)]) * (byte & 0x3F))
            else:
                out.append(byte)
    except StopIteration:
        raise PcxError("truncated image data") from None
    return bytes(out[:size])


def _unpack_indices(row: bytes, width: int, bpp: int) -> list[int]:
    if bpp == 8:
        return list(row[:width])
    mask = (1 << bpp) - 1
    shifts = range(8 - bpp, -1, -bpp)
    return [(byte >> shift) & mask for byte in row for shift in shifts][:width]


def _rgba(triples: Iterable[tuple[int, int, int]]) -> bytes:
    return bytes(c for rgb in triples for c in (*rgb, _OPAQUE))


def load_pcx(data: bytes) -> CachedSprite:
    """Decode a PCX image into an RGBA sprite."""
    if len(data) < _HEADER_SIZE:
        raise PcxError("truncated header")
    if data[0] != _MANUFACTURER:
        raise PcxError("not a PCX image")
    encoding = data[2]
    bpp = data[3]
    xmin, ymin, xmax, ymax = struct.unpack_from("<4H", data, 4)
    planes = data[65]
    (bytes_per_line,) = struct.unpack_from("<H", data, 66)

    if encoding not in (0, 1):
        raise PcxError(f"unknown encoding {encoding}")
    if xmax < xmin or ymax < ymin:
        raise PcxError("invalid image dimensions")
    width = xmax - xmin + 1
    height = ymax - ymin + 1

    paletted = planes == 1 and bpp in (1, 2, 4, 8)
    if not paletted and not (planes == 3 and bpp == 8):
        raise PcxError(f"unsupported layout: {planes} planes of {bpp} bits")
    if bytes_per_line * 8 < width * bpp:
        raise PcxError("scanline too short for image width")

    scanline = planes * bytes_per_line
    raw = _decode(data[_HEADER_SIZE:], scanline * height, encoding)
    rows = [raw[start : start + scanline] for start in range(0, len(raw), scanline)]

    if not paletted:
        return CachedSprite(
            width,
            height,
            b"".join(
                _rgba(
                    zip(
                        row[:width],
                        row[bytes_per_line : bytes_per_line + width],
                        row[2 * bytes_per_line : 2 * bytes_per_line + width],
                    )
                )
                for row in rows
            ),
        )

    if bpp == 8:
        if (
            len(data) < _HEADER_SIZE + _VGA_PALETTE_SIZE + 1
            or data[-_VGA_PALETTE_SIZE - 1] != _VGA_PALETTE_MARKER
        ):
            raise PcxError("missing 256-colour palette")
        palette = data[-_VGA_PALETTE_SIZE:]
    else:
        palette = data[16 : 16 + 3 * (1 << bpp)]
    colours = [tuple(palette[i : i + 3]) for i in range(0, len(palette), 3)]

    def lookup(index: int) -> tuple[int, int, int]:
        try:
            return colours[index]
        except IndexError:
            raise PcxError(f"palette index {index} out of range") from None

    indices = (i for row in rows for i in _unpack_indices(row, width, bpp))
    return CachedSprite(width, height, _rgba(lookup(i) for i in indices))


def load_assets(directory: str | PathLike[str]) -> Assets:
    """Load every sprite frame from the PCX files in ``directory``."""
    root = Path(directory)
    return Assets(
        {frame: load_pcx((root / name).read_bytes()) for frame, name in _SPRITE_FILES.items()}
    )