# (c) Copyright Datacraft, 2026
"""Per-page boundary scoring."""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from segworker import constants as const
from . import signals
from .cancellation import CancellationToken, check
from .models import BoundaryScore, PageRecord, SegmentationConfig
from .trace import NULL_TRACER, Tracer

logger = logging.getLogger(__name__)


class PageScorer:
	"""Combine the enabled signals into start/end scores for each page.

	Start and end contributions are weighted and summed without
	normalisation, so a page where many signals agree can score above 1.0.
	Neighborhood blending halves the summed start score with the
	neighborhood score and runs after every additive signal.

	Scoring a page only reads the page and its neighbors, so pages can be
	scored on a thread pool (``config.parallel_workers > 1``) without any
	locking; results are written to their own slot of the output list.
	"""

	def __init__(self, config: SegmentationConfig, tracer: Tracer | None = None):
		self.config = config
		self.tracer = tracer if tracer is not None else NULL_TRACER

	def score_pages(
		self,
		pages: Sequence[PageRecord],
		cancel_token: CancellationToken | None = None,
	) -> list[BoundaryScore]:
		"""Score every page, returning one BoundaryScore per page in order."""
		scores: list[BoundaryScore | None] = [None] * len(pages)

		def _score(index: int) -> None:
			check(cancel_token)
			scores[index] = self.score_page(pages, index)

		workers = min(self.config.parallel_workers, len(pages))
		if workers > 1:
			logger.debug(f"Scoring {len(pages)} pages on {workers} workers")
			with ThreadPoolExecutor(max_workers=workers) as executor:
				# result() re-raises SegmentationCancelled from any worker
				for future in [executor.submit(_score, i) for i in range(len(pages))]:
					future.result()
		else:
			for index in range(len(pages)):
				_score(index)

		for score in scores:
			self.tracer(
				f"Page {score.page_number}: start={score.start_score:.2f} "
				f"end={score.end_score:.2f} neighborhood={score.neighborhood_score:.2f} "
				f"features={_format_features(score.features)}"
			)
		return scores

	def score_page(self, pages: Sequence[PageRecord], index: int) -> BoundaryScore:
		config = self.config
		page = pages[index]
		previous = pages[index - 1] if index > 0 else None

		features: dict[str, float] = {}
		start = 0.0
		end = 0.0
		neighborhood = 0.0

		if config.enable_pattern_detection:
			features['patterns'] = signals.pattern_score(page, config)
			start += features['patterns'] * const.PATTERN_WEIGHT

		if config.enable_signature_detection:
			features['signatures'] = signals.signature_score(page, config)
			end += features['signatures'] * const.SIGNATURE_WEIGHT

		if previous is not None:
			if config.enable_density_detection:
				features['density'] = signals.density_change_score(previous, page, config)
				start += features['density'] * const.DENSITY_WEIGHT

			if config.enable_font_change_detection:
				features['fonts'] = signals.font_change_score(previous, page, config)
				start += features['fonts'] * const.FONT_CHANGE_WEIGHT

			if config.enable_page_size_detection:
				features['pagesize'] = signals.page_size_change_score(previous, page, config)
				start += features['pagesize'] * const.PAGE_SIZE_WEIGHT

		if config.enable_image_signature_detection:
			features['image_signature'] = signals.image_signature_score(page, config)
			end += features['image_signature'] * const.IMAGE_SIGNATURE_WEIGHT

		if config.enable_top_margin_detection:
			features['top_margin'] = signals.top_margin_score(page, config)
			start += features['top_margin'] * const.TOP_MARGIN_WEIGHT

		if config.enable_uppercase_header_detection:
			features['uppercase_headers'] = signals.uppercase_header_score(page, config)
			start += features['uppercase_headers'] * const.UPPERCASE_HEADER_WEIGHT

		if config.enable_neighborhood_detection:
			neighborhood = signals.neighborhood_score(pages, index)
			start = (start + neighborhood) / 2

		return BoundaryScore(
			page_number=page.page_number,
			start_score=start,
			end_score=end,
			neighborhood_score=neighborhood,
			features=features,
		)


def _format_features(features: dict[str, float]) -> str:
	return ', '.join(f"{name}={value:.2f}" for name, value in features.items()) or '-'
