import logging

import pytest

from segworker.segmentation import (
	CancellationToken,
	ListTraceSink,
	LoggingTraceSink,
	NullTraceSink,
	SegmentationCancelled,
)
from segworker.segmentation.cancellation import check
from segworker.segmentation.trace import Tracer


def test_tracer_only_emits_when_enabled():
	sink = ListTraceSink()
	Tracer(sink, enabled=False)("hidden")
	Tracer(sink, enabled=True)("shown")
	assert sink.lines == ["shown"]


def test_null_sink_discards_lines():
	Tracer(NullTraceSink(), enabled=True)("nothing to see")


def test_logging_sink_writes_debug_records(caplog):
	target = logging.getLogger("segworker.tests.trace")
	with caplog.at_level(logging.DEBUG, logger="segworker.tests.trace"):
		LoggingTraceSink(target).emit("Page 1: start=0.79")
	assert [r.levelno for r in caplog.records] == [logging.DEBUG]
	assert caplog.records[0].getMessage() == "Page 1: start=0.79"


def test_cancellation_token():
	token = CancellationToken()
	assert not token.cancelled
	token.raise_if_cancelled()
	check(None)

	token.cancel()
	assert token.cancelled
	with pytest.raises(SegmentationCancelled):
		check(token)


def test_empty_sink_is_kept():
	sink = ListTraceSink()
	assert len(sink) == 0
	tracer = Tracer(sink, enabled=True)
	assert tracer.sink is sink
	tracer("first line")
	assert sink.lines == ["first line"]
