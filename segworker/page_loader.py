# (c) Copyright Datacraft, 2026
"""Build PageRecords from PDF files or JSON page dumps."""
import json
import logging
import re
from pathlib import Path

import fitz  # PyMuPDF

from segworker.segmentation.models import ImageInfo, PageRecord

logger = logging.getLogger(__name__)

# Subset fonts are named like "ABCDEF+Arial"
SUBSET_PREFIX = re.compile(r'^[A-Z]{6}\+')


def load_pages_from_pdf(path: str | Path) -> list[PageRecord]:
	"""Extract one PageRecord per page of the PDF at path."""
	path = Path(path)
	if not path.exists():
		raise FileNotFoundError(f"PDF not found: {path}")

	doc = fitz.open(str(path))
	try:
		pages = [_page_record(page) for page in doc]
	finally:
		doc.close()

	logger.info(f"Loaded {len(pages)} pages from {path}")
	return pages


def _page_record(page: fitz.Page) -> PageRecord:
	page_number = page.number + 1

	try:
		text = page.get_text("text") or ""
		word_count = len(page.get_text("words"))
	except Exception as e:
		logger.warning(f"Could not read text of page {page_number}: {e}")
		text, word_count = "", 0

	return PageRecord(
		page_number=page_number,
		text=text,
		word_count=word_count,
		char_count=len(text),
		fonts=_font_names(page),
		width=float(page.rect.width),
		height=float(page.rect.height),
		images=_images(page),
		rotation=page.rotation,
	)


def _font_names(page: fitz.Page) -> tuple[str, ...]:
	try:
		fonts = page.get_fonts()
	except Exception as e:
		logger.warning(f"Could not read fonts of page {page.number + 1}: {e}")
		return ()

	names: list[str] = []
	for font in fonts:
		# (xref, ext, type, basefont, name, encoding, ...)
		name = SUBSET_PREFIX.sub('', font[3] or font[4] or '')
		if name and name not in names:
			names.append(name)
	return tuple(names)


def _images(page: fitz.Page) -> tuple[ImageInfo, ...]:
	try:
		images = page.get_images(full=True)
	except Exception as e:
		logger.warning(f"Could not read images of page {page.number + 1}: {e}")
		return ()

	# (xref, smask, width, height, bpc, colorspace, alt_colorspace, name, ...)
	return tuple(
		ImageInfo(width=int(img[2]), height=int(img[3]), name=img[7] or '')
		for img in images
	)


def load_pages_from_json(path: str | Path) -> list[PageRecord]:
	"""Read pages written by dump_pages_to_json (or any list of page dicts)."""
	with open(path, encoding='utf-8') as f:
		data = json.load(f)
	pages = [PageRecord.from_dict(item) for item in data]
	pages.sort(key=lambda p: p.page_number)
	return pages


def dump_pages_to_json(pages: list[PageRecord], path: str | Path) -> None:
	with open(path, 'w', encoding='utf-8') as f:
		json.dump([p.to_dict() for p in pages], f, ensure_ascii=False, indent=2)
