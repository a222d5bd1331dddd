import pytest

from query_collector.consts.LogLevel import LEVEL_MAP, LogLevel, SourceLogLevel, convert_log_level
from query_collector.exceptions import UnmappedLogLevelError


def test_mapping_is_total_and_one_to_one():
    assert set(LEVEL_MAP) == set(SourceLogLevel)
    assert set(LEVEL_MAP.values()) == set(LogLevel)


@pytest.mark.parametrize("source, target", [
    (SourceLogLevel.EMERG, LogLevel.EMERGENCY),
    (SourceLogLevel.ALERT, LogLevel.ALERT),
    (SourceLogLevel.CRIT, LogLevel.CRITICAL),
    (SourceLogLevel.ERR, LogLevel.ERROR),
    (SourceLogLevel.WARNING, LogLevel.WARNING),
    (SourceLogLevel.NOTICE, LogLevel.NOTICE),
    (SourceLogLevel.INFO, LogLevel.INFO),
    (SourceLogLevel.DEBUG, LogLevel.DEBUG),
])
def test_convert_log_level(source, target):
    assert convert_log_level(source) is target
    assert convert_log_level(int(source)) is target


@pytest.mark.parametrize("level", [8, -1, None, "debug", 3.0, True])
def test_unknown_levels_raise(level):
    with pytest.raises(UnmappedLogLevelError) as excinfo:
        convert_log_level(level)
    assert excinfo.value.level == level
    assert isinstance(excinfo.value, ValueError)
