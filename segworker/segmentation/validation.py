# (c) Copyright Datacraft, 2026
"""Paper-size validation and final filtering of document spans."""
from dataclasses import replace
from typing import Sequence

from .cancellation import CancellationToken, check
from .models import DocumentSpan, PageRecord, SegmentationConfig
from .trace import NULL_TRACER, Tracer


def has_uniform_paper_size(
	span: DocumentSpan,
	pages: Sequence[PageRecord],
	tracer: Tracer = NULL_TRACER,
) -> bool:
	"""Check that every page of the span matches its first page's size.

	Single-page spans always pass. Spans reaching past the last page, or
	touching a page without a known size, fail.
	"""
	if span.page_count <= 1:
		return True

	if span.start_page < 1 or span.end_page > len(pages):
		return False

	reference = pages[span.start_page - 1]
	if not reference.has_size:
		return False

	for page_number in span.pages():
		page = pages[page_number - 1]
		if not page.has_size or not page.same_size_as(reference):
			tracer(
				f"Document {span.start_page}-{span.end_page} rejected: different paper sizes "
				f"(page {span.start_page} is {reference.width}x{reference.height}, "
				f"page {page_number} is {page.width}x{page.height})"
			)
			return False
	return True


def validate_paper_size(
	spans: list[DocumentSpan],
	pages: Sequence[PageRecord],
	tracer: Tracer = NULL_TRACER,
	cancel_token: CancellationToken | None = None,
) -> list[DocumentSpan]:
	valid = []
	for span in spans:
		check(cancel_token)
		if has_uniform_paper_size(span, pages, tracer):
			valid.append(span)
	tracer(f"After paper size validation: {len(valid)} documents")
	return valid


def finalize(
	spans: list[DocumentSpan],
	total_pages: int,
	config: SegmentationConfig,
	tracer: Tracer = NULL_TRACER,
	cancel_token: CancellationToken | None = None,
) -> list[DocumentSpan]:
	"""Clamp, filter by size and confidence, sort and number the spans."""
	tracer(
		f"Validating {len(spans)} documents: min_pages={config.min_document_pages}, "
		f"min_confidence={config.min_confidence_score}"
	)
	validated = []

	for span in spans:
		check(cancel_token)
		start = max(span.start_page, 1)
		end = min(span.end_page, total_pages)
		if start > end:
			tracer(f"Document {span.start_page}-{span.end_page} dropped: empty after clamping")
			continue
		if (start, end) != (span.start_page, span.end_page):
			span = replace(span, start_page=start, end_page=end)

		if span.page_count < config.min_document_pages:
			tracer(f"Document {start}-{end} failed validation: {span.page_count} pages")
			continue
		if span.confidence < config.min_confidence_score:
			tracer(f"Document {start}-{end} failed validation: confidence {span.confidence:.2f}")
			continue

		tracer(f"Document {start}-{end} passed validation: confidence {span.confidence:.2f}")
		validated.append(span)

	validated.sort(key=lambda s: s.start_page)
	return [replace(span, number=n) for n, span in enumerate(validated, start=1)]
