import pytest

from query_collector.models.trace_frame import TraceFrame
from query_collector.service.collector.downstream import MessagesCollector
from query_collector.service.collector.query_collector import QueryCollector

QUERY_LINE = "DebugPDOStatement::execute|0.0123 sec|1.50 KB|  SELECT * FROM t  "


def frame(class_name=None, file=None, line=None, function="run", call_type="->"):
    return TraceFrame(file=file, line=line, function=function, class_name=class_name, call_type=call_type)


@pytest.fixture
def messages():
    return MessagesCollector()


@pytest.fixture
def collector(messages):
    return QueryCollector(messages)
