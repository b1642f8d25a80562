"""Zip compression of a page payload stored as the single entry "d"."""

from __future__ import annotations

import io
import zipfile

PAYLOAD_ENTRY_NAME = "d"


def compress_payload(payload: bytes) -> bytes:
    """Return a zip archive holding `payload` deflated under the entry name "d"."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr(PAYLOAD_ENTRY_NAME, bytes(payload))
    return buffer.getvalue()


def decompress_payload(payload: bytes) -> bytes:
    """Return the joined contents of every "d" entry of a zip archive.

    Raises zipfile.BadZipFile if `payload` is not a valid archive.
    """
    with zipfile.ZipFile(io.BytesIO(bytes(payload))) as archive:
        return b"".join(
            archive.read(info)
            for info in archive.infolist()
            if info.filename == PAYLOAD_ENTRY_NAME
        )