"""Reading a whole binary file."""

from __future__ import annotations

import os


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of ``path``.

    Raises OSError if fewer bytes are read than the file's size.
    """
    with open(path, "rb") as handle:
        size = os.fstat(handle.fileno()).st_size
        data = handle.read(size)
    if len(data) != size:
        raise OSError(f"read {len(data)} of {size} bytes from {os.fspath(path)}")
    return data