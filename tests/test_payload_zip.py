import io
import zipfile

import pytest

from buspages.payload_zip import compress_payload, decompress_payload


def test_zip_unzip():
    src = bytes([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
    compressed = compress_payload(src)
    assert decompress_payload(compressed) == src


def test_archive_has_single_deflated_entry_named_d():
    compressed = compress_payload(b"hello hello hello")
    with zipfile.ZipFile(io.BytesIO(compressed)) as archive:
        infos = archive.infolist()
    assert [i.filename for i in infos] == ["d"]
    assert infos[0].compress_type == zipfile.ZIP_DEFLATED


def test_empty_payload_round_trip():
    assert decompress_payload(compress_payload(b"")) == b""


def test_large_payload_round_trip():
    src = bytes(range(256)) * 5000
    compressed = compress_payload(src)
    assert len(compressed) < len(src)
    assert decompress_payload(compressed) == src


def test_other_entries_are_ignored():
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("other", b"ignored")
        archive.writestr("d", b"wanted")
    assert decompress_payload(buffer.getvalue()) == b"wanted"


def test_archive_without_d_gives_empty_payload():
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr("1", b"abc")
    assert decompress_payload(buffer.getvalue()) == b""


def test_invalid_archive_raises():
    with pytest.raises(zipfile.BadZipFile):
        decompress_payload(b"not a zip archive")