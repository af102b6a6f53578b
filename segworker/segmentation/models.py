# (c) Copyright Datacraft, 2026
"""Data models for page-level document segmentation."""
import re
from dataclasses import dataclass, field, fields, replace
from typing import Any, Iterable

from segworker import constants as const
from .patterns import DEFAULT_END_PATTERNS, DEFAULT_START_PATTERNS


# Standard paper sizes in points (width, height)
PAPER_SIZES = {
	'Letter': (612, 792),
	'A4': (595, 842),
	'Legal': (612, 1008),
	'A5': (420, 595),
	'A3': (842, 1191),
}


@dataclass(frozen=True)
class ImageInfo:
	"""Image embedded in a page."""
	width: int = 0
	height: int = 0
	name: str = ''

	@property
	def is_signature_sized(self) -> bool:
		"""Small images are usually scanned signatures or stamps."""
		return (
			self.width < const.SIGNATURE_IMAGE_MAX_WIDTH
			and self.height < const.SIGNATURE_IMAGE_MAX_HEIGHT
		)

	def to_dict(self) -> dict[str, Any]:
		return {'name': self.name, 'width': self.width, 'height': self.height}

	@classmethod
	def from_dict(cls, data: dict[str, Any]) -> 'ImageInfo':
		return cls(
			width=int(data.get('width') or 0),
			height=int(data.get('height') or 0),
			name=data.get('name') or '',
		)


@dataclass(frozen=True)
class PageRecord:
	"""Features extracted from a single PDF page.

	Produced by the page loader (or any other upstream extractor) and
	never modified afterwards. Page numbers are 1-based.
	"""
	page_number: int
	text: str = ''
	word_count: int = 0
	char_count: int = 0
	fonts: tuple[str, ...] = ()
	width: float = 0.0
	height: float = 0.0
	images: tuple[ImageInfo, ...] = ()
	rotation: int = 0

	@property
	def has_size(self) -> bool:
		return self.width > 0 and self.height > 0

	@property
	def font_set(self) -> frozenset[str]:
		return frozenset(f for f in self.fonts if f)

	@property
	def size_label(self) -> str:
		"""Page size as ``"{width}x{height}"``, halves rounded up."""
		return f"{int(self.width + 0.5)}x{int(self.height + 0.5)}"

	@property
	def paper_size_name(self) -> str:
		"""Name of the standard paper size, or ``Custom``."""
		for name, (width, height) in PAPER_SIZES.items():
			if (
				abs(self.width - width) <= const.PAPER_NAME_TOLERANCE
				and abs(self.height - height) <= const.PAPER_NAME_TOLERANCE
			):
				return name
		return 'Custom'

	def same_size_as(self, other: 'PageRecord') -> bool:
		"""Check if both pages share one paper size within tolerance."""
		return (
			abs(self.width - other.width) <= const.PAPER_SIZE_TOLERANCE
			and abs(self.height - other.height) <= const.PAPER_SIZE_TOLERANCE
		)

	def to_dict(self) -> dict[str, Any]:
		return {
			'page_number': self.page_number,
			'text': self.text,
			'word_count': self.word_count,
			'char_count': self.char_count,
			'fonts': list(self.fonts),
			'width': self.width,
			'height': self.height,
			'images': [img.to_dict() for img in self.images],
			'rotation': self.rotation,
		}

	@classmethod
	def from_dict(cls, data: dict[str, Any]) -> 'PageRecord':
		"""Create from dictionary, treating missing or null fields as empty."""
		text = data.get('text') or ''
		word_count = data.get('word_count')
		if word_count is None:
			word_count = len(text.split())
		char_count = data.get('char_count')
		if char_count is None:
			char_count = len(text)
		return cls(
			page_number=int(data['page_number']),
			text=text,
			word_count=int(word_count),
			char_count=int(char_count),
			fonts=tuple(data.get('fonts') or ()),
			width=float(data.get('width') or 0.0),
			height=float(data.get('height') or 0.0),
			images=tuple(ImageInfo.from_dict(img) for img in data.get('images') or ()),
			rotation=int(data.get('rotation') or 0),
		)


# Names of the per-signal toggles, in scoring order
SIGNAL_TOGGLES = (
	'enable_pattern_detection',
	'enable_signature_detection',
	'enable_density_detection',
	'enable_font_change_detection',
	'enable_page_size_detection',
	'enable_image_signature_detection',
	'enable_neighborhood_detection',
	'enable_top_margin_detection',
	'enable_uppercase_header_detection',
)


@dataclass(frozen=True)
class SegmentationConfig:
	"""Immutable settings for one segmentation run.

	Use ``replace()`` to derive a variant; instances are never changed
	in place.
	"""
	# Detection signals
	enable_pattern_detection: bool = True
	enable_signature_detection: bool = True
	enable_density_detection: bool = True
	enable_font_change_detection: bool = True
	enable_page_size_detection: bool = True
	enable_image_signature_detection: bool = True
	enable_neighborhood_detection: bool = True
	enable_top_margin_detection: bool = True
	enable_uppercase_header_detection: bool = True

	# Grouping
	group_adjacent_pages: bool = True
	merge_orphan_pages: bool = True
	require_same_paper_size: bool = True
	require_contiguous_pages: bool = True

	# Thresholds
	min_confidence_score: float = 0.5
	min_document_pages: int = 1
	font_similarity_threshold: float = 0.7
	density_change_threshold: float = 0.6
	top_margin_fraction: float = 0.1
	uppercase_min_length: int = 5
	max_group_distance: int = 3

	# Patterns (regular expressions, matched case-insensitively)
	start_patterns: tuple[str, ...] = DEFAULT_START_PATTERNS
	end_patterns: tuple[str, ...] = DEFAULT_END_PATTERNS

	# Execution
	verbose: bool = False
	parallel_workers: int = 1

	def __post_init__(self):
		"""Validate thresholds and patterns."""
		# Lists passed by callers are frozen into tuples
		object.__setattr__(self, 'start_patterns', tuple(self.start_patterns))
		object.__setattr__(self, 'end_patterns', tuple(self.end_patterns))

		if self.min_confidence_score < 0:
			raise ValueError("min_confidence_score must be >= 0")
		if self.min_document_pages < 1:
			raise ValueError("min_document_pages must be >= 1")
		if not 0.0 <= self.font_similarity_threshold <= 1.0:
			raise ValueError("font_similarity_threshold must be between 0.0 and 1.0")
		if self.density_change_threshold < 0:
			raise ValueError("density_change_threshold must be >= 0")
		if not 0.0 < self.top_margin_fraction <= 1.0:
			raise ValueError("top_margin_fraction must be in (0.0, 1.0]")
		if self.uppercase_min_length < 0:
			raise ValueError("uppercase_min_length must be >= 0")
		if self.max_group_distance < 0:
			raise ValueError("max_group_distance must be >= 0")
		if self.parallel_workers < 1:
			raise ValueError("parallel_workers must be >= 1")

		for pattern in self.start_patterns + self.end_patterns:
			try:
				re.compile(pattern)
			except re.error as e:
				raise ValueError(f"Invalid pattern {pattern!r}: {e}") from e

	@property
	def detection_enabled(self) -> bool:
		"""True when at least one detection signal is switched on."""
		return any(getattr(self, name) for name in SIGNAL_TOGGLES)

	def replace(self, **changes) -> 'SegmentationConfig':
		return replace(self, **changes)

	def with_all_signals(self, enabled: bool) -> 'SegmentationConfig':
		return replace(self, **{name: enabled for name in SIGNAL_TOGGLES})

	def to_dict(self) -> dict[str, Any]:
		data = {f.name: getattr(self, f.name) for f in fields(self)}
		data['start_patterns'] = list(self.start_patterns)
		data['end_patterns'] = list(self.end_patterns)
		return data

	@classmethod
	def from_dict(cls, data: dict[str, Any]) -> 'SegmentationConfig':
		"""Create from dictionary; unknown keys are rejected."""
		known = {f.name for f in fields(cls)}
		unknown = set(data) - known
		if unknown:
			raise ValueError(f"Unknown segmentation options: {', '.join(sorted(unknown))}")
		return cls(**data)


@dataclass(frozen=True)
class BoundaryScore:
	"""Likelihood that a page starts or ends a document."""
	page_number: int
	start_score: float = 0.0
	end_score: float = 0.0
	neighborhood_score: float = 0.0
	features: dict[str, float] = field(default_factory=dict)

	@property
	def is_likely_start(self) -> bool:
		return self.start_score > const.START_THRESHOLD

	@property
	def is_likely_end(self) -> bool:
		return self.end_score > const.END_THRESHOLD

	@property
	def is_likely_boundary(self) -> bool:
		return max(self.start_score, self.end_score) > const.BOUNDARY_THRESHOLD

	@property
	def indicators(self) -> list[str]:
		"""Names of the features that fired strongly on this page."""
		return [
			name for name, value in self.features.items()
			if value > const.INDICATOR_THRESHOLD
		]

	def to_dict(self) -> dict[str, Any]:
		return {
			'page_number': self.page_number,
			'start_score': self.start_score,
			'end_score': self.end_score,
			'neighborhood_score': self.neighborhood_score,
			'features': dict(self.features),
		}


@dataclass
class DocumentSpan:
	"""Contiguous, inclusive page range believed to be one document."""
	start_page: int
	end_page: int
	confidence: float = 0.0
	number: int = 0

	start_indicators: list[str] = field(default_factory=list)
	end_indicators: list[str] = field(default_factory=list)

	# Filled in by the enricher
	detected_type: str = ''
	title: str = ''
	fonts: set[str] = field(default_factory=set)
	page_size: str = ''
	first_page_text: str = ''
	last_page_text: str = ''
	full_text: str = ''
	total_words: int = 0
	has_signature_image: bool = False

	@property
	def page_count(self) -> int:
		return self.end_page - self.start_page + 1

	@property
	def average_words_per_page(self) -> float:
		if self.page_count <= 0:
			return 0.0
		return self.total_words / self.page_count

	def pages(self) -> range:
		return range(self.start_page, self.end_page + 1)

	def to_dict(self) -> dict[str, Any]:
		"""Convert to dictionary for serialization."""
		return {
			'number': self.number,
			'start_page': self.start_page,
			'end_page': self.end_page,
			'page_count': self.page_count,
			'confidence': self.confidence,
			'detected_type': self.detected_type,
			'title': self.title,
			'start_indicators': list(self.start_indicators),
			'end_indicators': list(self.end_indicators),
			'fonts': sorted(self.fonts),
			'page_size': self.page_size,
			'has_signature_image': self.has_signature_image,
			'total_words': self.total_words,
			'average_words_per_page': self.average_words_per_page,
			'first_page_text': self.first_page_text,
			'last_page_text': self.last_page_text,
			'full_text': self.full_text,
		}


@dataclass
class SegmentationResult:
	"""Result of segmenting one multi-document PDF."""
	documents: list[DocumentSpan] = field(default_factory=list)
	total_pages: int = 0
	scores: list[BoundaryScore] = field(default_factory=list)
	processing_time_ms: float = 0.0

	@property
	def document_count(self) -> int:
		return len(self.documents)

	@property
	def uncovered_pages(self) -> list[int]:
		"""Pages not claimed by any document."""
		covered = _covered_pages(self.documents)
		return [p for p in range(1, self.total_pages + 1) if p not in covered]

	@property
	def coverage(self) -> float:
		"""Fraction of pages that belong to some document."""
		if not self.total_pages:
			return 0.0
		return len(_covered_pages(self.documents)) / self.total_pages

	def to_dict(self, include_scores: bool = False) -> dict[str, Any]:
		data = {
			'documents': [d.to_dict() for d in self.documents],
			'document_count': self.document_count,
			'total_pages': self.total_pages,
			'coverage': self.coverage,
			'uncovered_pages': self.uncovered_pages,
			'processing_time_ms': self.processing_time_ms,
		}
		if include_scores:
			data['scores'] = [s.to_dict() for s in self.scores]
		return data


def _covered_pages(documents: Iterable[DocumentSpan]) -> set[int]:
	covered: set[int] = set()
	for doc in documents:
		covered.update(doc.pages())
	return covered
