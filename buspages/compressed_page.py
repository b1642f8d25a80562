"""Building and reading compressed pages of stored messages.

A page is a zip archive written in one of two layouts. The single-file
layout holds one deflated entry named "d" carrying an encoded
MessagesModel. The by-files layout holds one deflated entry per message,
named after the message id and carrying an encoded MessageModel.
"""

from __future__ import annotations

import io
import zipfile
import zlib
from collections import deque
from collections.abc import Iterable, Iterator

from buspages.payload_zip import PAYLOAD_ENTRY_NAME
from buspages.protobuf_models import DecodeError, MessageModel, MessagesModel


class CompressedPageWriterError(Exception):
    """Raised when a compressed page can not be built."""


class CompressedPageReaderError(Exception):
    """Raised when a compressed page can not be read."""


class InvalidSingleFileCompressedPage(CompressedPageReaderError):
    """The archive holds no entries at all."""

    def __init__(self, message: str = "Compressed page archive has no entries") -> None:
        super().__init__(message)


def _zip_bytes(entries: Iterable[tuple[str, bytes]]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, payload in entries:
            archive.writestr(name, payload)
    return buffer.getvalue()


class CompressedPageBuilderSingleFile:
    """Collects messages and packs them into a single "d" entry."""

    def __init__(self) -> None:
        self._messages: list[MessageModel] | None = []

    def add_message(self, model: MessageModel) -> None:
        """Queue a message for the page."""
        if self._messages is None:
            raise CompressedPageWriterError("Page payload has already been taken")
        self._messages.append(model)

    def get_payload(self) -> bytes:
        """Return the zipped page; the builder can not be used afterwards."""
        if self._messages is None:
            raise CompressedPageWriterError("Page payload has already been taken")
        messages, self._messages = self._messages, None
        try:
            encoded = MessagesModel(messages=messages).serialize()
        except ValueError as err:
            raise CompressedPageWriterError(f"Can not encode messages: {err}") from err
        return _zip_bytes([(PAYLOAD_ENTRY_NAME, encoded)])


class CompressedPageBuilderByFiles:
    """Writes every message into its own archive entry named by message id."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()
        self._archive: zipfile.ZipFile | None = zipfile.ZipFile(
            self._buffer, "w", compression=zipfile.ZIP_DEFLATED
        )
        self._names: set[str] = set()

    def add_message(self, model: MessageModel) -> None:
        """Write a message as a new archive entry."""
        if self._archive is None:
            raise CompressedPageWriterError("Page archive is already finished")
        file_name = str(model.message_id)
        if file_name in self._names:
            raise CompressedPageWriterError(f"Duplicate file name: {file_name}")
        try:
            payload = model.serialize()
        except ValueError as err:
            raise CompressedPageWriterError(f"Can not encode message: {err}") from err
        try:
            self._archive.writestr(file_name, payload)
        except (OSError, zipfile.LargeZipFile) as err:
            raise CompressedPageWriterError(str(err)) from err
        self._names.add(file_name)

    def get_payload(self) -> bytes:
        """Finish the archive and return its bytes."""
        if self._archive is not None:
            try:
                self._archive.close()
            except (OSError, zipfile.LargeZipFile) as err:
                raise CompressedPageWriterError(str(err)) from err
            self._archive = None
        return self._buffer.getvalue()


class CompressedPageBuilder:
    """A page builder using either the single-file or the by-files layout."""

    def __init__(
        self, inner: CompressedPageBuilderSingleFile | CompressedPageBuilderByFiles
    ) -> None:
        self._inner = inner

    @classmethod
    def new_as_single_file(cls) -> CompressedPageBuilder:
        return cls(CompressedPageBuilderSingleFile())

    @classmethod
    def new_by_files(cls) -> CompressedPageBuilder:
        return cls(CompressedPageBuilderByFiles())

    @property
    def is_single_file(self) -> bool:
        return isinstance(self._inner, CompressedPageBuilderSingleFile)

    def add_message(self, model: MessageModel) -> None:
        self._inner.add_message(model)

    def get_payload(self) -> bytes:
        return self._inner.get_payload()


def _read_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> bytes:
    try:
        return archive.read(info)
    except (zipfile.BadZipFile, zlib.error, OSError, NotImplementedError) as err:
        raise CompressedPageReaderError(f"Can not read entry {info.filename}: {err}") from err


class CompressedPageReaderByFiles:
    """Reads a page archive entry by entry, one message per entry."""

    def __init__(self, zipped: bytes) -> None:
        try:
            self._archive = zipfile.ZipFile(io.BytesIO(bytes(zipped)))
        except (zipfile.BadZipFile, OSError, ValueError) as err:
            raise CompressedPageReaderError(f"Invalid zip archive: {err}") from err
        self._entries = self._archive.infolist()
        self._file_index = 0

    def files_amount(self) -> int:
        return len(self._entries)

    def get_next_message(self) -> MessageModel | None:
        """Return the message of the next entry, or None once all are read."""
        if self._file_index >= len(self._entries):
            return None
        payload = _read_entry(self._archive, self._entries[self._file_index])
        self._file_index += 1
        try:
            return MessageModel.parse(payload)
        except DecodeError as err:
            raise CompressedPageReaderError(f"Can not decode message: {err}") from err

    def decompress_as_single_file(self) -> MessagesModel | None:
        """Decode the page as the single-file layout, or None if it is not one."""
        if not self._entries:
            raise InvalidSingleFileCompressedPage()
        first = self._entries[0]
        if first.filename != PAYLOAD_ENTRY_NAME:
            return None
        payload = _read_entry(self._archive, first)
        try:
            return MessagesModel.parse(payload)
        except DecodeError as err:
            raise CompressedPageReaderError(f"Can not decode messages: {err}") from err


class CompressedPageReaderSingleFile:
    """Hands out messages already decoded from a single-file page."""

    def __init__(self, messages: Iterable[MessageModel]) -> None:
        self._messages: deque[MessageModel] = deque(messages)
        self._messages_amount = len(self._messages)

    def get_next_message(self) -> MessageModel | None:
        return self._messages.popleft() if self._messages else None

    def messages_amount(self) -> int:
        return self._messages_amount


class CompressedPageReader:
    """Reads a compressed page in whichever layout it was written."""

    def __init__(self, zipped: bytes) -> None:
        by_files = CompressedPageReaderByFiles(zipped)
        single = by_files.decompress_as_single_file()
        self._inner: CompressedPageReaderByFiles | CompressedPageReaderSingleFile
        if single is None:
            self._inner = by_files
        else:
            self._inner = CompressedPageReaderSingleFile(single.messages)

    @property
    def is_single_file(self) -> bool:
        return isinstance(self._inner, CompressedPageReaderSingleFile)

    def get_next_message(self) -> MessageModel | None:
        return self._inner.get_next_message()

    def files_amount(self) -> int:
        if isinstance(self._inner, CompressedPageReaderByFiles):
            return self._inner.files_amount()
        return 1

    def messages_amount(self) -> int:
        if isinstance(self._inner, CompressedPageReaderByFiles):
            return self._inner.files_amount()
        return self._inner.messages_amount()

    def __iter__(self) -> Iterator[MessageModel]:
        while (message := self.get_next_message()) is not None:
            yield message