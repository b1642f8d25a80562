from buspages.pages import PageId
from buspages.split import QueueIndexRange, SplitByPageId, split_by_page_id


def test_both_on_the_same_page():
    result = list(split_by_page_id([QueueIndexRange(100, 200)]))

    assert len(result) == 1
    assert result[0].page_id.value == 0
    assert result[0].ids[0].from_id == 100
    assert result[0].ids[0].to_id == 200


def test_we_are_jumping_behind_the_page():
    result = list(split_by_page_id([QueueIndexRange(99998, 100002)]))

    assert len(result) == 2
    assert result[0].page_id.value == 0
    assert result[1].page_id.value == 1

    assert result[0].ids[0].from_id == 99998
    assert result[0].ids[0].to_id == 99999

    assert result[1].ids[0].from_id == 100000
    assert result[1].ids[0].to_id == 100002


def test_we_are_jumping_behind_the_page_2():
    src = [
        QueueIndexRange(99_998, 100_002),
        QueueIndexRange(100_010, 100_020),
        QueueIndexRange(199_990, 200_020),
    ]

    result = list(split_by_page_id(src))

    assert len(result) == 3
    assert result[0].page_id.value == 0
    assert result[1].page_id.value == 1
    assert result[2].page_id.value == 2

    assert result[0].ids[0].from_id == 99_998
    assert result[0].ids[0].to_id == 99_999

    assert result[1].ids[0].from_id == 100_000
    assert result[1].ids[0].to_id == 100_002

    assert result[1].ids[1].from_id == 100_010
    assert result[1].ids[1].to_id == 100_020

    assert result[1].ids[2].from_id == 199_990
    assert result[1].ids[2].to_id == 199_999

    assert result[2].ids[0].from_id == 200_000
    assert result[2].ids[0].to_id == 200_020


def test_empty_input_yields_nothing():
    assert list(split_by_page_id([])) == []


def test_empty_range_stops_iteration():
    assert list(split_by_page_id([QueueIndexRange(0, -1)])) == []


def test_input_is_not_modified():
    src = [QueueIndexRange(99_998, 100_002)]
    list(split_by_page_id(src))
    assert src == [QueueIndexRange(99_998, 100_002)]


def test_range_spanning_several_pages():
    result = list(split_by_page_id([QueueIndexRange(99_999, 200_000)]))

    assert [r.page_id for r in result] == [PageId(0), PageId(1), PageId(2)]
    assert result[0].ids == [QueueIndexRange(99_999, 99_999)]
    assert result[1].ids == [QueueIndexRange(100_000, 199_999)]
    assert result[2].ids == [QueueIndexRange(200_000, 200_000)]


def test_result_ranges_stay_within_their_page():
    src = [QueueIndexRange(5, 10), QueueIndexRange(99_000, 300_500)]
    for part in split_by_page_id(src):
        assert isinstance(part, SplitByPageId)
        for r in part.ids:
            assert part.page_id.first_message_id() <= r.from_id <= r.to_id
            assert r.to_id <= part.page_id.last_message_id()