from segworker.segmentation_tasks import segment_pages, segment_pdf


def _page_dicts(make_page, texts):
	header = f"{texts['strong_header']}\n{texts['body']}"
	pages = [make_page(i, text=header if i in (1, 4) else texts["body"]) for i in range(1, 7)]
	# out of order on purpose
	return [p.to_dict() for p in reversed(pages)]


def test_segment_pages_completes(make_page, texts):
	result = segment_pages(
		_page_dicts(make_page, texts),
		overrides={"enable_neighborhood_detection": False},
	)
	assert result["status"] == "completed"
	assert result["error"] is None
	assert result["total_pages"] == 6
	assert [(d["start_page"], d["end_page"]) for d in result["documents"]] == [(1, 3), (4, 6)]
	assert "scores" not in result


def test_segment_pages_includes_scores(make_page, texts):
	result = segment_pages(_page_dicts(make_page, texts), include_scores=True)
	assert result["status"] == "completed"
	assert [s["page_number"] for s in result["scores"]] == list(range(1, 7))


def test_segment_pages_reports_bad_options(make_page, texts):
	result = segment_pages(_page_dicts(make_page, texts), overrides={"bogus": 1})
	assert result["status"] == "failed"
	assert "bogus" in result["error"]


def test_segment_pdf_reports_missing_file(tmp_path):
	result = segment_pdf(str(tmp_path / "missing.pdf"))
	assert result["status"] == "failed"
	assert "not found" in result["error"]
