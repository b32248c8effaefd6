"""Reader for QVis volume descriptions (.dat files with a raw data file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from scivis.flowfield import _parse_float, _parse_int
from scivis.volume import Volume

_C_SPACE = " \t\n\v\f\r"
_EIGHT_BIT_FORMATS = frozenset({"char", "uchar", "byte"})


class QVisFileError(Exception):
    """Raised when a QVis description or its data cannot be read."""


@dataclass(frozen=True)
class DatLine:
    """One ``key: value`` line of a .dat file, trimmed and lower-cased."""

    id: str = ""
    value: str = ""


def _ascii_lower(text: str) -> str:
    return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def parse_dat_line(line: str) -> DatLine:
    """Split a line at its first colon; lines without a colon give empty fields."""
    key, sep, value = line.partition(":")
    if not sep:
        return DatLine()
    return DatLine(
        _ascii_lower(key.strip(_C_SPACE)),
        _ascii_lower(value.strip(_C_SPACE)),
    )


def _three_tokens(value: str, tag: str) -> list[str]:
    tokens = value.split()
    if len(tokens) != 3:
        raise QVisFileError(f"invalid {tag} tag")
    return tokens


def _parse_resolution(value: str) -> tuple[int, int, int]:
    tokens = _three_tokens(value, "resolution")
    try:
        sizes = tuple(_parse_int(t) for t in tokens)
    except ValueError as exc:
        raise QVisFileError("invalid resolution tag") from exc
    if min(sizes) < 0:
        raise QVisFileError("invalid resolution tag")
    return sizes  # type: ignore[return-value]


def _parse_slice_thickness(value: str) -> np.ndarray:
    tokens = _three_tokens(value, "slicethickness")
    try:
        return np.array([_parse_float(t) for t in tokens], dtype=np.float64)
    except ValueError as exc:
        raise QVisFileError("invalid slicethickness tag") from exc


def _read_text(filename: str | Path) -> str:
    try:
        with open(filename, encoding="latin-1", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise QVisFileError(f"Unable to read file {filename}") from exc


def _read_raw(filename: str) -> bytes:
    try:
        with open(filename, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise QVisFileError(f"Unable to read file {filename}") from exc


def _convert_16bit(raw: bytes, count: int) -> np.ndarray:
    """Rescale little-endian 16-bit samples to 0..254 using their value range."""
    samples = np.zeros(count, dtype=np.int64)
    available = min(len(raw) // 2, count)
    if available:
        samples[:available] = np.frombuffer(raw[: available * 2], dtype="<u2")
    if count == 0:
        return np.zeros(0, dtype=np.uint8)
    low, high = int(samples.min()), int(samples.max())
    return ((samples - low) * 255 // (1 + high - low)).astype(np.uint8)


def load_qvis(filename: str | Path) -> Volume:
    """Load the volume described by a .dat file."""
    text = _read_text(filename)
    volume = Volume()
    needs_conversion = False
    raw_filename = ""
    parent = os.path.dirname(str(filename))

    for line in text.split("\n"):
        entry = parse_dat_line(line)
        if entry.id == "objectfilename":
            raw_filename = f"{parent}/{entry.value}" if parent else entry.value
        elif entry.id == "resolution":
            volume.width, volume.height, volume.depth = _parse_resolution(entry.value)
        elif entry.id == "slicethickness":
            volume.scale = _parse_slice_thickness(entry.value)
            volume.normalize_scale()
        elif entry.id == "format":
            if entry.value not in _EIGHT_BIT_FORMATS:
                needs_conversion = True
        elif entry.id == "endianess":
            if entry.value != "little":
                raise QVisFileError(
                    "only little endian data supported by this mini-reader"
                )

    if not raw_filename:
        raise QVisFileError("object filename not found")

    raw = _read_raw(raw_filename)
    count = volume.width * volume.height * volume.depth
    if needs_conversion:
        volume.data = _convert_16bit(raw, count)
    else:
        volume.data = np.frombuffer(raw, dtype=np.uint8).copy()

    if volume.data.size != count:
        raise QVisFileError(
            f"raw file {raw_filename} holds {volume.data.size} samples, expected {count}"
        )
    volume.compute_normals()
    return volume


class QVis:
    """A QVis data set; ``volume`` holds what was loaded."""

    def __init__(self, filename: str | Path) -> None:
        self.volume = Volume()
        self.load(filename)

    def load(self, filename: str | Path) -> None:
        """Replace ``volume`` with the one described by ``filename``."""
        self.volume = load_qvis(filename)