# (c) Copyright Datacraft, 2026
"""Textual patterns used by the boundary signals."""
import re
from functools import lru_cache
from typing import Iterable

# Headers that open court documents (Portuguese)
DEFAULT_START_PATTERNS = (
	r'PODER JUDICIÁRIO',
	r'TRIBUNAL DE JUSTIÇA',
	r'MINISTÉRIO PÚBLICO',
	r'DEFENSORIA PÚBLICA',
	r'PROCURADORIA',
	r'Processo n[º°]',
	r'Autos n[º°]',
	r'CERTIDÃO',
	r'DESPACHO',
	r'SENTENÇA',
	r'DECISÃO',
	r'OFÍCIO',
	r'ATA DE',
)

# Closing formulas and electronic signature footers
DEFAULT_END_PATTERNS = (
	r'Documento assinado eletronicamente',
	r'assinado digitalmente',
	r'código verificador',
	r'autenticidade.*conferida',
	r'Atenciosamente',
	r'Cordialmente',
	r'dou fé',
	r'nada mais',
)

# Words that make an uppercase header line more likely to open a document
INSTITUTIONAL_KEYWORDS = (
	'TRIBUNAL',
	'PODER',
	'PROCESSO',
	'MINISTÉRIO',
	'DEFENSORIA',
)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern:
	"""Compile a start/end pattern once; all of them ignore case."""
	return re.compile(pattern, re.IGNORECASE)


def matching_patterns(text: str, patterns: Iterable[str]) -> list[str]:
	"""Return the patterns that match somewhere in text, in order."""
	if not text:
		return []
	return [p for p in patterns if compile_pattern(p).search(text)]
