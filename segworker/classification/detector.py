# (c) Copyright Datacraft, 2026
import logging
from dataclasses import dataclass, field
from enum import Enum

from segworker import constants as const
from segworker.textutils import first_significant_lines

logger = logging.getLogger(__name__)


class DocumentType(str, Enum):
	"""Court document types, valued by their display label."""
	DESPACHO = 'Despacho'
	SENTENCA = 'Sentença'
	DECISAO = 'Decisão'
	CERTIDAO = 'Certidão'
	OFICIO = 'Ofício'
	ATA = 'Ata'
	PROCESSO_JUDICIAL = 'Processo Judicial'
	RELATORIO = 'Relatório'
	DOCUMENTO = const.DEFAULT_DOCUMENT_TYPE


@dataclass
class ClassificationResult:
	"""Result of document type detection."""
	document_type: DocumentType
	matched_keyword: str = ''
	metadata: dict = field(default_factory=dict)

	def to_dict(self) -> dict:
		return {
			'document_type': self.document_type.value,
			'matched_keyword': self.matched_keyword,
			'metadata': self.metadata,
		}


class DocumentTypeDetector:
	"""Keyword based document type detector.

	Keywords are searched (case-insensitively, as plain substrings) in
	the first significant lines of a document's first page. The first
	rule that matches wins, so the order of KEYWORD_RULES matters.
	"""

	KEYWORD_RULES: list[tuple[tuple[str, ...], DocumentType]] = [
		(('DESPACHO',), DocumentType.DESPACHO),
		(('SENTENÇA',), DocumentType.SENTENCA),
		(('DECISÃO',), DocumentType.DECISAO),
		(('CERTIDÃO',), DocumentType.CERTIDAO),
		(('OFÍCIO',), DocumentType.OFICIO),
		(('ATA',), DocumentType.ATA),
		(('PROCESSO', 'AUTOS'), DocumentType.PROCESSO_JUDICIAL),
		(('RELATÓRIO',), DocumentType.RELATORIO),
	]

	def __init__(self, max_lines: int = const.TYPE_DETECTION_LINES):
		self.max_lines = max_lines

	def classify(self, text: str | None) -> ClassificationResult:
		"""
		Detect the type of a document from the text of its first page.

		Args:
			text: Full text of the first page

		Returns:
			ClassificationResult; DOCUMENTO when no keyword matches
		"""
		head = first_significant_lines(text, self.max_lines).upper()
		if not head:
			return ClassificationResult(document_type=DocumentType.DOCUMENTO)

		for keywords, doc_type in self.KEYWORD_RULES:
			for keyword in keywords:
				if keyword in head:
					return ClassificationResult(
						document_type=doc_type,
						matched_keyword=keyword,
						metadata={'lines_checked': min(self.max_lines, head.count('\n') + 1)},
					)

		return ClassificationResult(document_type=DocumentType.DOCUMENTO)

	def detect(self, text: str | None) -> str:
		"""Return only the display label of the detected type."""
		return self.classify(text).document_type.value
