import pytest

from segworker.segmentation import ImageInfo, PageRecord, SegmentationConfig

STRONG_HEADER = "PODER JUDICIÁRIO\nTRIBUNAL DE JUSTIÇA\nPROCESSO Nº 123"
WEAK_HEADER = "PODER JUDICIÁRIO"
BODY = (
	"O requerente apresentou manifestação sobre os fatos narrados na inicial.\n"
	"As partes foram intimadas para se manifestar no prazo legal.\n"
	"Segue a análise dos pedidos formulados."
)
CLOSING = "Documento assinado eletronicamente por Fulano de Tal"
SIGNATURE_IMAGE = ImageInfo(width=150, height=80, name="sig")


def _make_page(
	number,
	text=BODY,
	words=120,
	fonts=("Arial",),
	width=595,
	height=842,
	images=(),
):
	return PageRecord(
		page_number=number,
		text=text,
		word_count=words,
		char_count=len(text),
		fonts=tuple(fonts),
		width=width,
		height=height,
		images=tuple(images),
	)


@pytest.fixture
def make_page():
	return _make_page


@pytest.fixture
def texts():
	return {
		"strong_header": STRONG_HEADER,
		"weak_header": WEAK_HEADER,
		"body": BODY,
		"closing": CLOSING,
		"signature_image": SIGNATURE_IMAGE,
	}


@pytest.fixture
def config():
	"""Default configuration without neighborhood blending."""
	return SegmentationConfig(enable_neighborhood_detection=False)
