import pytest

from query_collector.service.caller_resolver.caller_resolver import CallerResolver
from query_collector.service.recorder.statement_recorder import StatementRecorder
from tests.conftest import QUERY_LINE, frame


@pytest.fixture
def recorder():
    return StatementRecorder()


def test_record_builds_statement(recorder):
    trace = [frame("Foo", "/srv/app/lib/Foo.php", 12, "save")]
    sql, duration_str = recorder.record(QUERY_LINE, trace)

    assert (sql, duration_str) == ("SELECT * FROM t", "12.3ms")
    [statement] = recorder.state.statements
    assert statement.sql == "SELECT * FROM t"
    assert statement.is_success is True
    assert statement.duration == 0.0123
    assert statement.duration_str == "12.3ms"
    assert statement.memory == 1536
    assert statement.memory_str == "1.5KB"
    assert statement.caller_label == "Foo.php:12"
    assert statement.caller_message == "Called Foo->save in /srv/app/lib/Foo.php on line 12"


def test_missing_attribution_is_tolerated(recorder):
    recorder.record(QUERY_LINE, [])
    statement = recorder.state.statements[0]
    assert statement.caller is None
    assert statement.to_dict()['caller'] is None
    assert statement.to_dict()['caller_str'] is None


def test_aggregates_are_monotonic(recorder):
    lines = [
        "DebugPDOStatement::execute|0.5000 sec|2.00 MB|SELECT 1",
        "DebugPDOStatement::execute|0.2500 sec|1.00 KB|SELECT 2",
        "DebugPDOStatement::execute|bad|bad|SELECT 3",
        "DebugPDOStatement::execute|0.1000 sec|3.00 MB|SELECT 4",
    ]
    durations, peaks = [], []
    for line in lines:
        recorder.record(line, [])
        durations.append(recorder.state.accumulated_duration)
        peaks.append(recorder.state.peak_memory)

    assert durations == sorted(durations)
    assert peaks == sorted(peaks)
    assert len(recorder.state.statements) == 4
    assert recorder.state.accumulated_duration == pytest.approx(0.85)
    assert recorder.state.peak_memory == 3 * 1024 * 1024
    assert [s.sql for s in recorder.state.statements] == ["SELECT 1", "SELECT 2", "SELECT 3", "SELECT 4"]


def test_empty_state_snapshot(recorder):
    summary = recorder.state.snapshot()
    assert summary.nb_statements == 0
    assert summary.accumulated_duration == 0
    assert summary.peak_memory_usage == 0
    assert summary.peak_memory_usage_str == "0B"


def test_trace_captured_from_current_stack():
    recorder = StatementRecorder(resolver=CallerResolver())
    recorder.record(QUERY_LINE)
    label = recorder.state.statements[0].caller_label
    assert label.startswith("test_statement_recorder.py:")


def test_custom_trace_provider():
    recorder = StatementRecorder(trace_provider=lambda: [frame("Job", "/srv/app/jobs/Job.php", 4, "handle")])
    recorder.record(QUERY_LINE)
    assert recorder.state.statements[0].caller_label == "Job.php:4"
