import pytest

from pgnames.utils.dns import DNS1123_LABEL_MAX_LENGTH, dns1123_label_errors, is_dns1123_label
from pgnames.utils.string_utils import MAX_LABEL_LENGTH


@pytest.mark.parametrize(
    "value",
    ["a", "0", "pg0", "pg0-ha-config", "some-such-certs", "a" * 63, "1-2-3"],
)
def test_valid_labels(value: str):
    assert is_dns1123_label(value)
    assert dns1123_label_errors(value) == []


@pytest.mark.parametrize(
    "value",
    ["", "-pg0", "pg0-", "Pg0", "pg_0", "pg.0", "pg 0", "pg0\n", "ä"],
)
def test_invalid_labels(value: str):
    assert not is_dns1123_label(value)
    assert len(dns1123_label_errors(value)) == 1


def test_too_long_label_reports_length():
    errors = dns1123_label_errors("a" * 64)

    assert errors == ["must be no more than 63 characters"]


def test_too_long_and_malformed_reports_both():
    errors = dns1123_label_errors("A" * 64)

    assert len(errors) == 2
    assert "no more than 63" in errors[0]
    assert "RFC 1123" in errors[1]


@pytest.mark.parametrize("value", [None, 42, b"pg0"])
def test_non_string_is_invalid(value):
    assert not is_dns1123_label(value)
    assert dns1123_label_errors(value) == [f"must be a string, got {type(value).__name__}"]


def test_label_length_limit_shared_with_truncation():
    assert MAX_LABEL_LENGTH == DNS1123_LABEL_MAX_LENGTH == 63
