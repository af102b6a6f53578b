import pytest

from segworker.segmentation import CancellationToken, SegmentationCancelled, SegmentationConfig
from segworker.segmentation.scorer import PageScorer


def _header_pages(make_page, texts, count=3):
	pages = [make_page(1, text=f"{texts['strong_header']}\n{texts['body']}")]
	pages += [make_page(i) for i in range(2, count + 1)]
	return pages


def test_strong_header_start_score(make_page, texts, config):
	pages = _header_pages(make_page, texts)
	score = PageScorer(config).score_page(pages, 0)

	# patterns 0.8 * 0.3 + top margin 1.0 * 0.3 + headers 1.0 * 0.25
	assert score.start_score == pytest.approx(0.79)
	assert score.is_likely_start
	assert score.end_score == 0.0
	assert list(score.features) == [
		"patterns", "signatures", "image_signature", "top_margin", "uppercase_headers",
	]
	assert score.indicators == ["patterns", "top_margin", "uppercase_headers"]


def test_first_page_has_no_pairwise_features(make_page, texts, config):
	pages = _header_pages(make_page, texts)
	first = PageScorer(config).score_page(pages, 0)
	second = PageScorer(config).score_page(pages, 1)
	assert "density" not in first.features
	assert {"density", "fonts", "pagesize"} <= set(second.features)


def test_neighborhood_blends_after_additive_signals(make_page, texts):
	pages = _header_pages(make_page, texts)
	score = PageScorer(SegmentationConfig()).score_page(pages, 0)
	# uniform word counts: neighborhood is 0 and halves the additive sum
	assert score.neighborhood_score == 0.0
	assert score.start_score == pytest.approx(0.79 / 2)
	assert not score.is_likely_start


def test_neighborhood_score_lifts_contrasting_page(make_page, texts):
	pages = [
		make_page(1, text=f"{texts['strong_header']}\n{texts['body']}", words=20),
		make_page(2, words=200),
		make_page(3, words=200),
	]
	score = PageScorer(SegmentationConfig()).score_page(pages, 0)
	assert score.neighborhood_score == pytest.approx(0.5)
	assert score.start_score == pytest.approx((0.79 + 0.5) / 2)


def test_end_score_needs_text_and_image(make_page, texts, config):
	closing = f"{texts['body']}\n{texts['closing']}"
	pages = [
		make_page(1, text=closing),
		make_page(2, text=closing, images=[texts["signature_image"]]),
	]
	scorer = PageScorer(config)
	text_only = scorer.score_page(pages, 0)
	signed = scorer.score_page(pages, 1)

	assert text_only.end_score == pytest.approx(0.32)
	assert not text_only.is_likely_end
	assert signed.end_score == pytest.approx(0.53)
	assert signed.is_likely_end


def test_font_and_size_change_add_to_start(make_page, texts):
	config = SegmentationConfig(
		enable_neighborhood_detection=False, require_same_paper_size=False
	)
	pages = [
		make_page(1),
		make_page(2, text=f"{texts['weak_header']}\n{texts['body']}",
			fonts=("Times",), width=612, height=792),
	]
	score = PageScorer(config).score_page(pages, 1)
	assert score.features["fonts"] == pytest.approx(1.0)
	assert score.features["pagesize"] == pytest.approx(0.8)
	# 0.12 + 0.12 + 0.125 from the header, 0.2 + 0.08 from the changes
	assert score.start_score == pytest.approx(0.645)


def test_all_signals_disabled_scores_zero(make_page, texts):
	config = SegmentationConfig().with_all_signals(False)
	pages = _header_pages(make_page, texts)
	scores = PageScorer(config).score_pages(pages)
	assert [s.start_score for s in scores] == [0.0, 0.0, 0.0]
	assert [s.end_score for s in scores] == [0.0, 0.0, 0.0]
	assert all(s.features == {} for s in scores)


def test_parallel_scoring_matches_sequential(make_page, texts):
	pages = _header_pages(make_page, texts, count=12)
	pages[6] = make_page(7, text=texts["strong_header"], fonts=("Times",), words=30)
	sequential = PageScorer(SegmentationConfig()).score_pages(pages)
	parallel = PageScorer(SegmentationConfig(parallel_workers=4)).score_pages(pages)
	assert parallel == sequential
	assert [s.page_number for s in parallel] == list(range(1, 13))


@pytest.mark.parametrize("workers", [1, 4])
def test_scoring_stops_when_cancelled(make_page, texts, workers):
	token = CancellationToken()
	token.cancel()
	scorer = PageScorer(SegmentationConfig(parallel_workers=workers))
	with pytest.raises(SegmentationCancelled):
		scorer.score_pages(_header_pages(make_page, texts, count=5), token)
