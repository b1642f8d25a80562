# buspages

Building blocks for storing service bus messages in pages.

Message ids are grouped into pages of 100,000 ids, and each page is split
into 100 sub-pages of 1,000 ids. A page of messages can be packed into a zip
archive and read back, either as one protobuf-encoded entry holding every
message or as one entry per message.

The package has no dependencies outside the standard library.

## Installation

    pip install buspages

With the test requirements:

    pip install "buspages[test]"

## Modules

### `buspages.pages`

- `PageId(value)`: a frozen, ordered identifier. `PageId.from_message_id(id)`
  gives the page of a message id; `first_message_id()` and
  `last_message_id()` give its bounds; `iterate_messages()` returns the range
  of its message ids and `iterate_sub_page_ids()` yields its 100 `SubPageId`s.
  An integer can be added to or subtracted from a `PageId`, and `int()` and
  `str()` give its value.
- `SubPageId(value)`: the same for sub-pages, with `from_message_id`,
  `from_page_id`, `first_message_id()`, `last_message_id()`,
  `first_message_id_of_next_sub_page()`, `iterate_message_ids()` and
  `is_my_message_id(id)`.
- `SizeAndAmount`: a running total of `size` and `amount`, changed with
  `added(size)`, `removed(size)`, `added_page(other)` and
  `removed_page(other)`. A change that would make either value negative
  raises `ValueError`.
- The constants `MESSAGES_IN_PAGE`, `SUB_PAGE_MESSAGES_AMOUNT` and
  `SUB_PAGES_PER_PAGE`.

### `buspages.split`

`split_by_page_id(intervals)` takes ordered `QueueIndexRange(from_id, to_id)`
ranges (both ends inclusive) and yields one `SplitByPageId(page_id, ids)` per
page, cutting ranges that cross a page border. The input ranges are left
unchanged. Iteration stops at an empty range met at the start of a page.

### `buspages.protobuf_models`

`MessageModel(message_id, created, data, headers)`, `MessagesModel(messages)`
and `MessageMetaData(key, value)` are dataclasses with `serialize()` returning
bytes in the protobuf wire format and a `parse(payload)` class method.
Malformed input raises `DecodeError`, a `ValueError`. `created` is a Unix
time in microseconds.

### `buspages.payload_zip`

`compress_payload(payload)` returns a zip archive holding the payload deflated
under the entry name `"d"`. `decompress_payload(payload)` returns the joined
contents of every `"d"` entry; an invalid archive raises
`zipfile.BadZipFile`.

### `buspages.compressed_page`

- `CompressedPageBuilder.new_as_single_file()` packs all messages into one
  `MessagesModel` entry named `"d"`; `CompressedPageBuilder.new_by_files()`
  writes each message to its own entry named after its message id (a repeated
  id raises `CompressedPageWriterError`). Add messages with `add_message` and
  take the archive bytes with `get_payload()`. A single-file builder can not
  be used again after `get_payload()`.
- `CompressedPageReader(zipped)` detects the layout from the first entry and
  hands out messages with `get_next_message()` (returning `None` at the end)
  or by iteration. `files_amount()` and `messages_amount()` report what the
  archive holds. Failures raise `CompressedPageReaderError`; an archive with
  no entries raises its subclass `InvalidSingleFileCompressedPage`.
- The layout-specific classes `CompressedPageBuilderSingleFile`,
  `CompressedPageBuilderByFiles`, `CompressedPageReaderSingleFile` and
  `CompressedPageReaderByFiles` can also be used directly.

### `buspages.validators`

`validate_topic_name(name)` returns nothing for a valid name and otherwise
raises `NameIsReserved` (for `"topics"`) or `InvalidNameFormat`, both
subclasses of `InvalidTopicName` (a `ValueError`). A valid name is 3 to 63
characters of `a`-`z`, `0`-`9` and `-`, neither starting nor ending with `-`
and without two `-` in a row.

### `buspages.locks`

`Locks` records nested lock holders for debugging: `new_lock(id, process)`
pushes a process name, `exit(id)` pops the latest one and forgets the lock once
it is empty, and `get_all()` returns copies of the held `LockItem`s.
`str(item)` joins its process names with `->`.

### `buspages.settings`

`get_settings_filename_path(file_name)` returns the path of `file_name` in the
directory named by `HOME`, or the user's home directory if `HOME` is unset.

## Example

    from buspages.pages import PageId
    from buspages.protobuf_models import MessageModel
    from buspages.compressed_page import CompressedPageBuilder, CompressedPageReader

    page = PageId.from_message_id(150_000)
    print(page.first_message_id(), page.last_message_id())   # 100000 199999

    builder = CompressedPageBuilder.new_as_single_file()
    builder.add_message(MessageModel(message_id=1, created=0, data=b"\x00\x01"))
    payload = builder.get_payload()

    for message in CompressedPageReader(payload):
        print(message.message_id, message.data)

    from buspages.validators import validate_topic_name, InvalidTopicName

    try:
        validate_topic_name("my--topic")
    except InvalidTopicName as err:
        print(err)

## What it does not do

This package only provides ids, encodings and archive formats. It does not
keep pages of messages in memory, track which messages still need to be
persisted, or read and write pages to disk or a database; that storage layer
is left to the application. It has no command-line interface.