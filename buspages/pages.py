"""Page and sub-page identifiers of the message store."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

MESSAGES_IN_PAGE = 100_000
SUB_PAGE_MESSAGES_AMOUNT = 1000
SUB_PAGES_PER_PAGE = 100


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


@dataclass(frozen=True, order=True)
class PageId:
    """Identifier of a page holding MESSAGES_IN_PAGE consecutive messages."""

    value: int

    @classmethod
    def from_message_id(cls, message_id: int) -> PageId:
        return cls(_div(message_id, MESSAGES_IN_PAGE))

    def first_message_id(self) -> int:
        return self.value * MESSAGES_IN_PAGE

    def last_message_id(self) -> int:
        return (self.value + 1) * MESSAGES_IN_PAGE - 1

    def iterate_messages(self) -> range:
        first = self.first_message_id()
        return range(first, first + MESSAGES_IN_PAGE)

    def iterate_sub_page_ids(self) -> Iterator[SubPageId]:
        first = SubPageId.from_message_id(self.first_message_id()).value
        for value in range(first, first + SUB_PAGES_PER_PAGE):
            yield SubPageId(value)

    def __add__(self, other: int) -> PageId:
        if not isinstance(other, int):
            return NotImplemented
        return PageId(self.value + other)

    def __sub__(self, other: int) -> PageId:
        if not isinstance(other, int):
            return NotImplemented
        return PageId(self.value - other)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class SubPageId:
    """Identifier of a sub-page holding SUB_PAGE_MESSAGES_AMOUNT messages."""

    value: int

    @classmethod
    def from_message_id(cls, message_id: int) -> SubPageId:
        return cls(_div(message_id, SUB_PAGE_MESSAGES_AMOUNT))

    @classmethod
    def from_page_id(cls, page_id: PageId) -> SubPageId:
        return cls(page_id.value * SUB_PAGES_PER_PAGE)

    def first_message_id(self) -> int:
        return self.value * SUB_PAGE_MESSAGES_AMOUNT

    def last_message_id(self) -> int:
        return self.first_message_id_of_next_sub_page() - 1

    def first_message_id_of_next_sub_page(self) -> int:
        return self.first_message_id() + SUB_PAGE_MESSAGES_AMOUNT

    def iterate_message_ids(self) -> range:
        first = self.first_message_id()
        return range(first, first + SUB_PAGE_MESSAGES_AMOUNT)

    def is_my_message_id(self, message_id: int) -> bool:
        return self.first_message_id() <= message_id <= self.last_message_id()

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class SizeAndAmount:
    """Running total of content size and message count."""

    size: int = 0
    amount: int = 0

    def _apply(self, size: int, amount: int) -> None:
        new_size = self.size + size
        new_amount = self.amount + amount
        if new_size < 0 or new_amount < 0:
            raise ValueError("size and amount can not become negative")
        self.size = new_size
        self.amount = new_amount

    def added(self, size: int) -> None:
        self._apply(size, 1)

    def removed(self, size: int) -> None:
        self._apply(-size, -1)

    def added_page(self, other: SizeAndAmount) -> None:
        self._apply(other.size, other.amount)

    def removed_page(self, other: SizeAndAmount) -> None:
        self._apply(-other.size, -other.amount)