# (c) Copyright Datacraft, 2026
"""Cooperative cancellation for long segmentation runs."""
import threading


class SegmentationCancelled(Exception):
	"""Raised when a run is aborted through its CancellationToken."""


class CancellationToken:
	"""Thread-safe flag polled by the engine between pages and spans."""

	def __init__(self):
		self._event = threading.Event()

	def cancel(self) -> None:
		self._event.set()

	@property
	def cancelled(self) -> bool:
		return self._event.is_set()

	def raise_if_cancelled(self) -> None:
		if self._event.is_set():
			raise SegmentationCancelled("Segmentation was cancelled")


def check(token: CancellationToken | None) -> None:
	if token is not None:
		token.raise_if_cancelled()
