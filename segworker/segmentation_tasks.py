# (c) Copyright Datacraft, 2026
"""Celery tasks for page-level document segmentation."""
import logging
import time

from celery import shared_task
from celery.signals import setup_logging as celery_setup_logging

from segworker import config, logconf
from segworker import constants as const
from segworker.page_loader import load_pages_from_pdf
from segworker.segmentation import DocumentSegmenter, PageRecord, SegmentationResult

logger = logging.getLogger(__name__)
settings = config.get_settings()


@celery_setup_logging.connect
def _setup_logging(**kwargs):
	logconf.setup_logging(settings.segworker__main__logging_cfg)


@shared_task(name=const.SEGMENT_PDF)
def segment_pdf(
	pdf_path: str,
	overrides: dict | None = None,
	include_scores: bool = False,
) -> dict:
	"""
	Split a concatenated PDF into its original documents.

	Args:
		pdf_path: Path of the PDF file
		overrides: SegmentationConfig fields overriding the settings defaults
		include_scores: Whether to include per-page scores in the result

	Returns:
		Dict with the detected documents and a status
	"""
	start_time = time.time()
	logger.info(f"Starting segmentation of {pdf_path}")

	try:
		pages = load_pages_from_pdf(pdf_path)
		result = _run(pages, overrides)
	except Exception as e:
		logger.error(f"Segmentation of {pdf_path} failed: {e}")
		return {
			"pdf_path": pdf_path,
			"status": "failed",
			"error": str(e),
			"processing_time_ms": (time.time() - start_time) * 1000,
		}

	logger.info(
		f"Segmentation of {pdf_path} completed: "
		f"{result.document_count} documents in {result.total_pages} pages"
	)
	return {
		"pdf_path": pdf_path,
		"status": "completed",
		"error": None,
		**result.to_dict(include_scores=include_scores),
	}


@shared_task(name=const.SEGMENT_PAGES)
def segment_pages(
	pages: list[dict],
	overrides: dict | None = None,
	include_scores: bool = False,
) -> dict:
	"""
	Segment pages that were already extracted by another worker.

	Args:
		pages: List of PageRecord dicts
		overrides: SegmentationConfig fields overriding the settings defaults
		include_scores: Whether to include per-page scores in the result

	Returns:
		Dict with the detected documents and a status
	"""
	try:
		records = sorted(
			(PageRecord.from_dict(p) for p in pages),
			key=lambda p: p.page_number,
		)
		result = _run(records, overrides)
	except Exception as e:
		logger.error(f"Segmentation of {len(pages)} pages failed: {e}")
		return {"status": "failed", "error": str(e)}

	return {
		"status": "completed",
		"error": None,
		**result.to_dict(include_scores=include_scores),
	}


def _run(pages: list[PageRecord], overrides: dict | None) -> SegmentationResult:
	seg_config = config.segmentation_config_from_settings(settings, **(overrides or {}))
	segmenter = DocumentSegmenter(seg_config)
	return segmenter.segment(pages)
