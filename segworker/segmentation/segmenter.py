# (c) Copyright Datacraft, 2026
"""Document segmentation - recover document boundaries in a concatenated PDF."""
import logging
import time
from typing import Sequence

from .boundaries import identify_boundaries
from .cancellation import CancellationToken
from .enricher import DocumentEnricher
from .grouping import group_adjacent
from .models import DocumentSpan, PageRecord, SegmentationConfig, SegmentationResult
from .scorer import PageScorer
from .trace import LoggingTraceSink, TraceSink, Tracer
from .validation import finalize, validate_paper_size

logger = logging.getLogger(__name__)


class DocumentSegmenter:
	"""Split the pages of a multi-document PDF into documents.

	The pages are scored for "start of document" and "end of document"
	likelihood, the scores are reduced to raw spans, and the spans are
	grouped, validated and enriched:

		pages -> scores -> raw spans -> grouped -> size-validated
		      -> enriched -> final

	Example usage:
		segmenter = DocumentSegmenter(SegmentationConfig(verbose=True))
		result = segmenter.segment(pages)

		for doc in result.documents:
			print(doc.number, doc.start_page, doc.end_page, doc.detected_type)
	"""

	def __init__(
		self,
		config: SegmentationConfig | None = None,
		trace_sink: TraceSink | None = None,
		enricher: DocumentEnricher | None = None,
	):
		"""Initialize the document segmenter.

		Args:
			config: Run configuration (defaults to SegmentationConfig())
			trace_sink: Receiver for verbose trace lines; logs at DEBUG if omitted
			enricher: Document enricher, mainly for swapping the type detector
		"""
		self.config = config or SegmentationConfig()
		if trace_sink is None:
			trace_sink = LoggingTraceSink()
		self.tracer = Tracer(trace_sink, enabled=self.config.verbose)
		self.scorer = PageScorer(self.config, self.tracer)
		self.enricher = enricher or DocumentEnricher()

	def segment(
		self,
		pages: Sequence[PageRecord],
		cancel_token: CancellationToken | None = None,
	) -> SegmentationResult:
		"""Segment pages and return the documents with their page scores."""
		start_time = time.time()
		pages = list(pages)
		if pages:
			self.tracer(f"Starting document segmentation for {len(pages)} pages")

		scores = self.scorer.score_pages(pages, cancel_token) if pages else []
		documents = self._find_documents(pages, scores, cancel_token)

		result = SegmentationResult(
			documents=documents,
			total_pages=len(pages),
			scores=scores,
			processing_time_ms=(time.time() - start_time) * 1000,
		)
		logger.info(
			f"Segmented {result.total_pages} pages into {result.document_count} documents "
			f"in {result.processing_time_ms:.1f} ms"
		)
		return result

	def find_documents(
		self,
		pages: Sequence[PageRecord],
		cancel_token: CancellationToken | None = None,
	) -> list[DocumentSpan]:
		"""Segment pages and return only the final documents."""
		return self.segment(pages, cancel_token).documents

	def _find_documents(
		self,
		pages: list[PageRecord],
		scores: list,
		cancel_token: CancellationToken | None,
	) -> list[DocumentSpan]:
		if not pages:
			return []

		config = self.config
		total_pages = len(pages)
		trace = self.tracer

		spans = identify_boundaries(scores, trace)

		if config.group_adjacent_pages:
			spans = group_adjacent(spans, total_pages, config, trace, cancel_token)

		if config.require_same_paper_size:
			spans = validate_paper_size(spans, pages, trace, cancel_token)

		spans = self.enricher.enrich_all(spans, pages, trace, cancel_token)
		spans = finalize(spans, total_pages, config, trace, cancel_token)

		trace(f"Final document count: {len(spans)}")
		return spans
