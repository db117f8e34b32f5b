"""Crash-recovery snapshots of unsaved buffers."""

from __future__ import annotations

import os
import struct
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Sequence

MAGIC = b"QER\x01"
PATH_MAX = 4096
MAX_ROWS = 10_000_000
MAX_ROW_LEN = 10_000_000

_TIMESTAMP = struct.Struct("<q")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class RecoveryError(Exception):
    """A recovery file could not be written or read."""


@dataclass(frozen=True)
class RecoveryState:
    """Contents restored from a recovery file."""

    lines: list[str]
    cx: int
    cy: int
    timestamp: int
    stored_path: str


def _resolve(filepath: str | os.PathLike[str]) -> str:
    try:
        return str(Path(filepath).resolve(strict=True))
    except OSError:
        return os.fspath(filepath)


def path_hash(filepath: str | os.PathLike[str]) -> str:
    """Hash of the file's absolute path as 16 hex digits."""
    h = 5381
    for byte in _resolve(filepath).encode(_ENCODING, _ERRORS):
        h = ((h << 5) + h + byte) & 0xFFFFFFFFFFFFFFFF
    return f"{h:016x}"


def _read_exact(fp: BinaryIO, size: int) -> bytes:
    data = fp.read(size)
    if len(data) != size:
        raise RecoveryError("recovery file is truncated")
    return data


def _read_i32(fp: BinaryIO) -> int:
    return _I32.unpack(_read_exact(fp, _I32.size))[0]


class RecoveryStore:
    """Recovery files kept under ``<base_dir>/.qe/recovery``."""

    def __init__(self, base_dir: str | os.PathLike[str] = ".") -> None:
        self.directory = Path(base_dir) / ".qe" / "recovery"

    def recovery_path(self, filepath: str | os.PathLike[str]) -> Path:
        return self.directory / f"{path_hash(filepath)}.rec"

    def save(
        self, filepath: str | os.PathLike[str], lines: Sequence[str], cx: int, cy: int
    ) -> Path:
        """Write a snapshot of ``lines`` and the cursor; return its path."""
        if not filepath:
            raise RecoveryError("no file name to recover")
        stored = _resolve(filepath).encode(_ENCODING, _ERRORS)
        try:
            parts = [
                MAGIC,
                _TIMESTAMP.pack(int(time.time())),
                _U32.pack(len(stored)),
                stored,
                _I32.pack(cx),
                _I32.pack(cy),
                _I32.pack(len(lines)),
            ]
            for line in lines:
                raw = line.encode(_ENCODING, _ERRORS)
                parts.append(_I32.pack(len(raw)))
                parts.append(raw)
        except struct.error as exc:
            raise RecoveryError(str(exc)) from exc

        target = self.recovery_path(filepath)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"".join(parts))
        except OSError as exc:
            raise RecoveryError(f"cannot write {target}: {exc}") from exc
        return target

    def exists(self, filepath: str | os.PathLike[str]) -> bool:
        """True when a snapshot is newer than the file, or the file is gone."""
        if not filepath:
            return False
        try:
            rec_mtime = int(self.recovery_path(filepath).stat().st_mtime)
        except OSError:
            return False
        try:
            file_mtime = int(os.stat(filepath).st_mtime)
        except OSError:
            return True
        return rec_mtime > file_mtime

    def load(self, filepath: str | os.PathLike[str]) -> RecoveryState:
        """Read back a snapshot written by :meth:`save`."""
        if not filepath:
            raise RecoveryError("no file name to recover")
        source = self.recovery_path(filepath)
        try:
            with source.open("rb") as fp:
                return self._parse(fp)
        except OSError as exc:
            raise RecoveryError(f"cannot read {source}: {exc}") from exc

    @staticmethod
    def _parse(fp: BinaryIO) -> RecoveryState:
        if _read_exact(fp, len(MAGIC)) != MAGIC:
            raise RecoveryError("not a recovery file")
        timestamp = _TIMESTAMP.unpack(_read_exact(fp, _TIMESTAMP.size))[0]
        path_len = _U32.unpack(_read_exact(fp, _U32.size))[0]
        if path_len > PATH_MAX:
            raise RecoveryError("stored path is too long")
        stored = _read_exact(fp, path_len).decode(_ENCODING, _ERRORS)
        cx = _read_i32(fp)
        cy = _read_i32(fp)
        numrows = _read_i32(fp)
        if not 0 <= numrows <= MAX_ROWS:
            raise RecoveryError(f"invalid row count {numrows}")
        lines = []
        for _ in range(numrows):
            length = _read_i32(fp)
            if not 0 <= length <= MAX_ROW_LEN:
                raise RecoveryError(f"invalid row length {length}")
            lines.append(_read_exact(fp, length).decode(_ENCODING, _ERRORS))
        return RecoveryState(lines, cx, cy, timestamp, stored)

    def remove(self, filepath: str | os.PathLike[str]) -> None:
        """Delete the snapshot for ``filepath`` if there is one."""
        if not filepath:
            return
        try:
            self.recovery_path(filepath).unlink()
        except FileNotFoundError:
            pass