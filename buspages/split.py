"""Splitting of message-id intervals by the page they belong to."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from buspages.pages import PageId


@dataclass
class QueueIndexRange:
    """An inclusive range of message ids."""

    from_id: int
    to_id: int

    def is_empty(self) -> bool:
        return self.to_id < self.from_id


@dataclass
class SplitByPageId:
    """The ranges of message ids that fall into one page."""

    page_id: PageId
    ids: list[QueueIndexRange] = field(default_factory=list)


def split_by_page_id(intervals: Iterable[QueueIndexRange]) -> Iterator[SplitByPageId]:
    """Yield the given ordered ranges grouped by page, cutting ranges at page borders.

    The input ranges are not modified. Iteration stops at an empty range met
    at the start of a page group.
    """
    pending = [QueueIndexRange(r.from_id, r.to_id) for r in intervals]
    index = 0

    while index < len(pending):
        if pending[index].is_empty():
            return

        page_id = PageId.from_message_id(pending[index].from_id)
        ids: list[QueueIndexRange] = []

        while index < len(pending):
            current = pending[index]

            if PageId.from_message_id(current.from_id).value > page_id.value:
                break

            if PageId.from_message_id(current.to_id).value > page_id.value:
                last_id = page_id.last_message_id()
                ids.append(QueueIndexRange(current.from_id, last_id))
                current.from_id = last_id + 1
                break

            ids.append(QueueIndexRange(current.from_id, current.to_id))
            index += 1

        yield SplitByPageId(page_id, ids)