# (c) Copyright Datacraft, 2026
"""Diagnostic trace sinks for verbose segmentation runs."""
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class TraceSink(ABC):
	"""Receives one human-readable line per scoring, merge or validation decision."""

	@abstractmethod
	def emit(self, line: str) -> None:
		pass


class NullTraceSink(TraceSink):
	def emit(self, line: str) -> None:
		return None


class LoggingTraceSink(TraceSink):
	"""Forward trace lines to a logger at DEBUG level."""

	def __init__(self, target: logging.Logger | None = None, level: int = logging.DEBUG):
		self.target = target or logger
		self.level = level

	def emit(self, line: str) -> None:
		self.target.log(self.level, line)


class ListTraceSink(TraceSink):
	"""Collect trace lines in memory."""

	def __init__(self):
		self.lines: list[str] = []

	def emit(self, line: str) -> None:
		self.lines.append(line)

	def __len__(self) -> int:
		return len(self.lines)


class Tracer:
	"""Gate around a sink so callers need not check the verbose flag."""

	def __init__(self, sink: TraceSink | None = None, enabled: bool = False):
		self.sink = sink if sink is not None else NullTraceSink()
		self.enabled = enabled

	def __call__(self, line: str) -> None:
		if self.enabled:
			self.sink.emit(line)


NULL_TRACER = Tracer()
