# (c) Copyright Datacraft, 2026
"""Independent boundary signals.

Every calculator is a pure function of one page (or the page and its
predecessor, or a window around it) and the run configuration. Missing
text, fonts, sizes or images never raise; they just score 0.
"""
from typing import Sequence

from segworker import constants as const
from segworker.textutils import (
	first_significant_lines,
	last_significant_lines,
	significant_lines,
	uppercase_letter_ratio,
)
from .models import PageRecord, SegmentationConfig
from .patterns import INSTITUTIONAL_KEYWORDS, matching_patterns


def pattern_score(page: PageRecord, config: SegmentationConfig) -> float:
	"""Start patterns found in the first lines of the page."""
	head = first_significant_lines(page.text, const.PATTERN_LINES)
	matches = len(matching_patterns(head, config.start_patterns))
	if matches >= 2:
		return 0.8
	if matches == 1:
		return 0.4
	return 0.0


def signature_score(page: PageRecord, config: SegmentationConfig) -> float:
	"""End patterns (closing formulas, e-signature footers) in the last lines."""
	tail = last_significant_lines(page.text, const.SIGNATURE_LINES)
	if matching_patterns(tail, config.end_patterns):
		return 0.8
	return 0.0


def density_change_score(
	previous: PageRecord,
	page: PageRecord,
	config: SegmentationConfig,
) -> float:
	"""Relative change in word count against the previous page.

	Not clamped: a page with four times the words of its predecessor
	scores 3.0.
	"""
	prev_words = previous.word_count or 0
	curr_words = page.word_count or 0
	if prev_words <= 0:
		return 0.0

	# Dense page followed by a near-empty one
	if prev_words > 300 and curr_words < 100:
		return 0.8

	change = abs(curr_words - prev_words) / prev_words
	return change if change > config.density_change_threshold else 0.0


def font_similarity(previous: PageRecord, page: PageRecord) -> float | None:
	"""Jaccard similarity of the two font sets, None when both are empty."""
	prev_fonts = previous.font_set
	curr_fonts = page.font_set
	union = prev_fonts | curr_fonts
	if not union:
		return None
	return len(prev_fonts & curr_fonts) / len(union)


def font_change_score(
	previous: PageRecord,
	page: PageRecord,
	config: SegmentationConfig,
) -> float:
	similarity = font_similarity(previous, page)
	if similarity is None:
		return 0.0
	if similarity < config.font_similarity_threshold:
		return 1.0 - similarity
	return 0.0


def page_size_change_score(
	previous: PageRecord,
	page: PageRecord,
	config: SegmentationConfig,
) -> float:
	if not previous.has_size or not page.has_size:
		return 0.0
	if previous.same_size_as(page):
		return 0.0
	return 0.9 if config.require_same_paper_size else 0.8


def image_signature_score(page: PageRecord, config: SegmentationConfig) -> float:
	"""Small embedded images usually are signature stamps."""
	if any(img.is_signature_sized for img in page.images or ()):
		return 0.7
	return 0.0


def neighborhood_score(pages: Sequence[PageRecord], index: int) -> float:
	"""Average word-count contrast against up to three pages on each side."""
	current_words = pages[index].word_count or 0
	score = 0.0
	comparisons = 0

	radius = const.NEIGHBORHOOD_RADIUS
	for offset in range(-radius, radius + 1):
		neighbor_index = index + offset
		if offset == 0 or not 0 <= neighbor_index < len(pages):
			continue

		neighbor_words = pages[neighbor_index].word_count or 0
		if current_words <= 0 or neighbor_words <= 0:
			continue

		ratio = min(current_words, neighbor_words) / max(current_words, neighbor_words)
		if ratio < 0.3:
			score += 0.5
		comparisons += 1

	return score / comparisons if comparisons else 0.0


def top_margin_score(page: PageRecord, config: SegmentationConfig) -> float:
	"""Header-like text at the top of the page.

	Text positions are not available, so the first three significant
	lines stand in for the top margin.
	"""
	if not page.has_size:
		return 0.0

	head = first_significant_lines(page.text, const.TOP_MARGIN_LINES)
	if not head:
		return 0.0

	score = 0.0
	if uppercase_letter_ratio(head) > 0.7:
		score += 0.6
	if matching_patterns(head, config.start_patterns):
		score += 0.4
	return min(score, 1.0)


def uppercase_header_score(page: PageRecord, config: SegmentationConfig) -> float:
	"""Uppercase heading lines, boosted by institutional keywords."""
	score = 0.0
	headers = 0

	for line in significant_lines(page.text)[:const.HEADER_LINES]:
		line = line.strip()
		if len(line) < config.uppercase_min_length:
			continue
		if uppercase_letter_ratio(line) <= 0.8:
			continue

		headers += 1
		score += 0.3
		if any(keyword in line for keyword in INSTITUTIONAL_KEYWORDS):
			score += 0.2

	if headers >= 2:
		score += 0.2
	return min(score, 1.0)
