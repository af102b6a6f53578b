# (c) Copyright Datacraft, 2026
"""Sequential boundary identification.

A two-state reducer walks the page scores in order. ``Idle`` means no
document is open; ``Open`` carries the document being extended. A
likely start always opens a new document (closing the current one on
the previous page), a likely end closes the open document on the
current page, and any other page extends the open document.
"""
from dataclasses import dataclass, replace
from typing import Iterable, Union

from .models import BoundaryScore, DocumentSpan
from .trace import NULL_TRACER, Tracer


@dataclass(frozen=True)
class Idle:
	pass


@dataclass(frozen=True)
class Open:
	span: DocumentSpan


State = Union[Idle, Open]


def step(
	state: State,
	score: BoundaryScore,
	index: int,
	tracer: Tracer = NULL_TRACER,
) -> tuple[State, list[DocumentSpan]]:
	"""Advance the reducer by one page.

	``index`` is the 0-based position of the page, so ``index`` is also
	the 1-based number of the page before it. Returns the new state and
	the spans emitted by this transition.
	"""
	page = index + 1

	if score.is_likely_start:
		emitted = []
		if isinstance(state, Open):
			emitted.append(replace(state.span, end_page=index))
			tracer(f"Closed document {state.span.start_page}-{index}: new start on page {page}")
		span = DocumentSpan(
			start_page=page,
			end_page=page,
			confidence=score.start_score,
			start_indicators=score.indicators,
		)
		tracer(f"Opened document on page {page} with confidence {score.start_score:.2f}")
		return Open(span), emitted

	if isinstance(state, Open):
		if score.is_likely_end:
			closed = replace(
				state.span,
				end_page=page,
				confidence=(state.span.confidence + score.end_score) / 2,
				end_indicators=state.span.end_indicators + score.indicators,
			)
			tracer(
				f"Ended document {closed.start_page}-{page} "
				f"with confidence {closed.confidence:.2f}"
			)
			return Idle(), [closed]
		return Open(replace(state.span, end_page=page)), []

	return state, []


def flush(state: State, tracer: Tracer = NULL_TRACER) -> list[DocumentSpan]:
	"""Emit the document left open at the end of the scan."""
	if isinstance(state, Open):
		tracer(f"Closed final document {state.span.start_page}-{state.span.end_page} at end of file")
		return [state.span]
	return []


def identify_boundaries(
	scores: Iterable[BoundaryScore],
	tracer: Tracer = NULL_TRACER,
) -> list[DocumentSpan]:
	"""Turn page scores into raw document spans.

	When no page ever opens a document (always the case when every
	detection signal is disabled) the whole file is returned as a single
	span with confidence 0.
	"""
	state: State = Idle()
	spans: list[DocumentSpan] = []
	total = 0
	opened = False

	for index, score in enumerate(scores):
		total += 1
		state, emitted = step(state, score, index, tracer)
		opened = opened or isinstance(state, Open) or bool(emitted)
		spans.extend(emitted)

	spans.extend(flush(state, tracer))

	if not opened and total:
		tracer(f"No document boundaries found, treating pages 1-{total} as one document")
		spans.append(DocumentSpan(start_page=1, end_page=total, confidence=0.0))

	tracer(f"Identified {len(spans)} raw documents")
	return spans
