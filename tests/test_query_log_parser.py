import pytest

from query_collector.service.log_parser.query_log_parser import QueryLogParser, parse_query_line


@pytest.fixture
def parser():
    return QueryLogParser()


def test_well_formed_line():
    parsed = parse_query_line("DebugPDOStatement::execute|0.25s elapsed|3.00 MB peak|  SELECT 1  ")
    assert parsed.duration == 0.25
    assert parsed.memory == 3 * 1024 * 1024
    assert parsed.sql == "SELECT 1"


def test_propel_style_labels():
    parsed = parse_query_line("DebugPDOStatement::execute|Time: 0.0123 sec|Memory: 1.50 KB|SELECT * FROM book")
    assert parsed.duration == 0.0123
    assert parsed.memory == 1536
    assert parsed.sql == "SELECT * FROM book"


@pytest.mark.parametrize("text, expected", [
    ("10 KB", 10240),
    ("2 MB", 2097152),
    ("512", 512),
    ("512 B", 512),
    ("1.5 GB", 1.5),
    ("Memory: 0.50 MB", 524288),
])
def test_memory_units(parser, text, expected):
    assert parser.parse_memory(text) == expected


@pytest.mark.parametrize("text", ["", "n/a", "Memory: unknown"])
def test_memory_defaults_to_zero(parser, text):
    assert parser.parse_memory(text) == 0


def test_duration_takes_first_decimal(parser):
    assert parser.parse_duration("took 1.25 of 9.75 sec") == 1.25


def test_duration_requires_decimal_point(parser):
    assert parser.parse_duration("2 sec") == 0


def test_sql_keeps_inner_pipes():
    parsed = parse_query_line("m|0.1|1 KB| SELECT a || b FROM t ")
    assert parsed.sql == "SELECT a || b FROM t"


@pytest.mark.parametrize("line", [
    "DebugPDOStatement::execute",
    "DebugPDOStatement::execute|",
    "DebugPDOStatement::execute|garbage|more garbage",
])
def test_malformed_lines_degrade_to_zero(line):
    parsed = parse_query_line(line)
    assert parsed.duration == 0
    assert parsed.memory == 0
    assert parsed.sql == ""


def test_split_segments_pads_to_four(parser):
    assert parser.split_segments("marker|0.1") == ["marker", "0.1", "", ""]
    assert parser.split_segments("a|b|c|d|e") == ["a", "b", "c", "d|e"]
