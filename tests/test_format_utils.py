import pytest

from query_collector.util.format_utils import format_bytes, format_duration


@pytest.mark.parametrize("seconds, expected", [
    (0, "0μs"),
    (0.0000042, "4μs"),
    (0.0123, "12.3ms"),
    (0.01, "10ms"),
    (0.5, "500ms"),
    (1.5, "1.5s"),
    (2.0, "2s"),
    (12.346, "12.35s"),
])
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


@pytest.mark.parametrize("size, expected", [
    (0, "0B"),
    (0.0, "0B"),
    (512, "512B"),
    (1536, "1.5KB"),
    (1024 * 1024, "1MB"),
    (2097152, "2MB"),
    (-2048, "-2KB"),
    (5 * 1024 ** 5, "5120TB"),
])
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected
