# file_temp/app/domain/files/value_objects.py
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


DEFAULT_MAX_SIZE = 524288
DEFAULT_ACCEPTED_TYPES = ("application/octet-stream",)
DEFAULT_IDENTIFIER_LENGTH = 64

_SIZE_UNITS = {
    "b": 1,
    "kb": 1 << 10,
    "mb": 1 << 20,
    "gb": 1 << 30,
    "tb": 1 << 40,
    "pb": 1 << 50,
}
_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(b|kb|mb|gb|tb|pb)?\s*$", re.IGNORECASE)


def parse_size(value: int | str) -> int:
    """
    Accepts a byte count or a human readable size ("100kb", "1.5 MB").
    Units are 1024-based.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid size: {value!r}")
    if isinstance(value, int):
        size = value
    else:
        match = _SIZE_RE.match(value)
        if not match:
            raise ValueError(f"Invalid size: {value!r}")
        number, unit = match.groups()
        size = int(float(number) * _SIZE_UNITS[(unit or "b").lower()])

    if size <= 0:
        raise ValueError("Size must be a positive number of bytes.")
    return size


def normalize_media_type(content_type: str) -> str:
    """'Image/PNG; charset=binary' -> 'image/png'"""
    return content_type.split(";", 1)[0].strip().lower()


class Charset(StrEnum):
    HEX = "hex"
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    READABLE = "readable"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]


_DIGITS = "0123456789"
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"

_ALPHABETS = {
    Charset.HEX: _DIGITS + "abcdef",
    Charset.NUMERIC: _DIGITS,
    Charset.ALPHANUMERIC: _DIGITS + _UPPER + _LOWER,
    # no 0/O/o, 1/I/l
    Charset.READABLE: "23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnpqrstuvwxyz",
}


@dataclass(frozen=True)
class IdentifierPolicy:
    charset: Charset = Charset.ALPHANUMERIC
    length: int = DEFAULT_IDENTIFIER_LENGTH

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Identifier length must be positive.")
        object.__setattr__(self, "charset", Charset(self.charset))

    def is_valid(self, identifier: str) -> bool:
        if not identifier:
            return False
        alphabet = self.charset.alphabet
        return all(ch in alphabet for ch in identifier)


@dataclass(frozen=True)
class UploadPolicy:
    folder: Path
    max_size: int = DEFAULT_MAX_SIZE
    accepted_types: frozenset[str] = field(default_factory=lambda: frozenset(DEFAULT_ACCEPTED_TYPES))
    identifier: IdentifierPolicy = field(default_factory=IdentifierPolicy)

    def __post_init__(self) -> None:
        object.__setattr__(self, "max_size", parse_size(self.max_size))
        types = frozenset(normalize_media_type(t) for t in self.accepted_types)
        if not types:
            raise ValueError("At least one accepted content type is required.")
        object.__setattr__(self, "accepted_types", types)
        object.__setattr__(self, "folder", Path(self.folder))

    def accepts(self, media_type: str) -> bool:
        return normalize_media_type(media_type) in self.accepted_types


@dataclass(frozen=True)
class FileType:
    ext: str
    mime: str
