import pytest

from buspages.validators import (
    InvalidNameFormat,
    InvalidTopicName,
    NameIsReserved,
    validate_topic_name,
)


def test_lower_cases_and_dashes_ok():
    assert validate_topic_name("my-test-name-5") is None


def test_lower_cases_and_two_dashes():
    with pytest.raises(InvalidNameFormat) as exc:
        validate_topic_name("my-test--name")
    assert str(exc.value) == (
        "Two following '-' symbols are not allowed. Check please position 8"
    )


def test_lower_cases_and_start_with_dash():
    with pytest.raises(InvalidNameFormat) as exc:
        validate_topic_name("-my-test-name")
    assert str(exc.value) == "Table can not be started from '-' symbol"


def test_lower_cases_and_ended_with_dash():
    with pytest.raises(InvalidNameFormat) as exc:
        validate_topic_name("my-test-name-")
    assert str(exc.value) == "Table can not be ended with '-' symbol"


def test_upper_cases():
    with pytest.raises(InvalidNameFormat) as exc:
        validate_topic_name("my-test-Name")
    assert str(exc.value) == "Symbol N is not allowed which stays at position 8"


def test_we_handle_reserved_name():
    with pytest.raises(NameIsReserved):
        validate_topic_name("topics")


def test_too_short():
    with pytest.raises(InvalidNameFormat) as exc:
        validate_topic_name("ab")
    assert str(exc.value) == "Table name must contain at least 3 symbols"


def test_too_long():
    with pytest.raises(InvalidNameFormat) as exc:
        validate_topic_name("a" * 64)
    assert str(exc.value) == "Table name must contain 3-63 symbols"


def test_boundary_lengths_are_accepted():
    assert validate_topic_name("abc") is None
    assert validate_topic_name("a" * 63) is None


@pytest.mark.parametrize("name", ["topics", "ab", "a_b", "AbC"])
def test_all_errors_share_base_class(name):
    with pytest.raises(InvalidTopicName):
        validate_topic_name(name)