# (c) Copyright Datacraft, 2026
"""Grouping of adjacent spans and reattachment of orphan pages.

Both passes take a list of spans and return a new list; the input
spans are never modified.
"""
from dataclasses import replace

from segworker import constants as const
from .cancellation import CancellationToken, check
from .models import DocumentSpan, SegmentationConfig
from .trace import NULL_TRACER, Tracer


def is_contiguous(span: DocumentSpan) -> bool:
	"""Pages of the span form one unbroken, non-inverted run."""
	return len(span.pages()) == span.end_page - span.start_page + 1


def group_adjacent(
	spans: list[DocumentSpan],
	total_pages: int,
	config: SegmentationConfig,
	tracer: Tracer = NULL_TRACER,
	cancel_token: CancellationToken | None = None,
) -> list[DocumentSpan]:
	"""Stretch short spans up to the next start and merge orphan pages."""
	grouped = []

	for i, span in enumerate(spans):
		check(cancel_token)

		# Spans from identify_boundaries are always contiguous
		if config.require_contiguous_pages and not is_contiguous(span):
			tracer(f"Document {span.start_page}-{span.end_page} rejected: non-contiguous pages")
			continue

		if span.page_count <= config.max_group_distance and i + 1 < len(spans):
			next_span = spans[i + 1]
			if next_span.start_page - span.end_page <= config.max_group_distance:
				if span.end_page != next_span.start_page - 1:
					tracer(
						f"Document {span.start_page}-{span.end_page} extended "
						f"to page {next_span.start_page - 1}"
					)
				span = replace(span, end_page=next_span.start_page - 1)

		grouped.append(span)

	if config.merge_orphan_pages:
		grouped = merge_orphans(grouped, total_pages, tracer, cancel_token)

	return grouped


def merge_orphans(
	spans: list[DocumentSpan],
	total_pages: int,
	tracer: Tracer = NULL_TRACER,
	cancel_token: CancellationToken | None = None,
) -> list[DocumentSpan]:
	"""Attach uncovered pages at the edges and in small gaps.

	- pages before the first span join it if it starts on page 3 or earlier
	- a gap of one or two pages joins the span before it
	- one or two trailing pages join the last span
	"""
	if not spans:
		return []

	merged = list(spans)

	first = merged[0]
	if 1 < first.start_page <= const.ORPHAN_LEADING_MAX_START:
		tracer(f"Leading pages 1-{first.start_page - 1} merged into document starting at {first.start_page}")
		merged[0] = replace(first, start_page=1)

	for i in range(len(merged) - 1):
		check(cancel_token)
		current, following = merged[i], merged[i + 1]
		gap = following.start_page - current.end_page - 1
		if 0 < gap <= const.ORPHAN_MAX_GAP:
			tracer(
				f"Orphan pages {current.end_page + 1}-{following.start_page - 1} "
				f"merged into document {current.start_page}-{current.end_page}"
			)
			merged[i] = replace(current, end_page=following.start_page - 1)

	last = merged[-1]
	if last.end_page < total_pages and total_pages - last.end_page <= const.ORPHAN_MAX_GAP:
		tracer(f"Trailing pages {last.end_page + 1}-{total_pages} merged into last document")
		merged[-1] = replace(last, end_page=total_pages)

	return merged
