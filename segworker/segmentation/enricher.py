# (c) Copyright Datacraft, 2026
"""Recompute document attributes from the pages of each span."""
import logging
from dataclasses import replace
from typing import Sequence

from segworker.classification import DocumentTypeDetector
from segworker.textutils import significant_lines
from .cancellation import CancellationToken, check
from .models import DocumentSpan, PageRecord
from .trace import NULL_TRACER, Tracer

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 120


class DocumentEnricher:
	"""Fill fonts, word totals, texts, page size, signature flag and type."""

	def __init__(self, detector: DocumentTypeDetector | None = None):
		self.detector = detector or DocumentTypeDetector()

	def enrich_all(
		self,
		spans: list[DocumentSpan],
		pages: Sequence[PageRecord],
		tracer: Tracer = NULL_TRACER,
		cancel_token: CancellationToken | None = None,
	) -> list[DocumentSpan]:
		enriched = []
		for span in spans:
			check(cancel_token)
			enriched.append(self.enrich(span, pages))
			doc = enriched[-1]
			tracer(
				f"Document {doc.start_page}-{doc.end_page}: type={doc.detected_type}, "
				f"words={doc.total_words}, size={doc.page_size or '-'}"
			)
		return enriched

	def enrich(self, span: DocumentSpan, pages: Sequence[PageRecord]) -> DocumentSpan:
		members = [p for p in pages if span.start_page <= p.page_number <= span.end_page]
		if not members:
			logger.debug(f"No pages found for document {span.start_page}-{span.end_page}")
			return span

		fonts: set[str] = set()
		for page in members:
			fonts.update(page.font_set)

		first, last = members[0], members[-1]
		texts = [p.text for p in members if p.text]

		return replace(
			span,
			fonts=fonts,
			total_words=sum(p.word_count or 0 for p in members),
			page_size=first.size_label if first.has_size else '',
			first_page_text=first.text or '',
			last_page_text=last.text or '',
			full_text='\n\n'.join(texts).strip(),
			detected_type=self.detector.detect(first.text),
			title=_title(first.text),
			has_signature_image=any(
				img.is_signature_sized for p in members for img in p.images
			),
		)


def _title(text: str | None) -> str:
	lines = significant_lines(text)
	if not lines:
		return ''
	return lines[0].strip()[:TITLE_MAX_LENGTH]
