# (c) Copyright Datacraft, 2026
"""Line-level text helpers shared by the signals and the type detector."""


def significant_lines(text: str | None) -> list[str]:
	"""Split text into lines, dropping blank ones."""
	if not text:
		return []
	return [line for line in text.split('\n') if line.strip()]


def first_significant_lines(text: str | None, count: int) -> str:
	return '\n'.join(significant_lines(text)[:count])


def last_significant_lines(text: str | None, count: int) -> str:
	if count <= 0:
		return ''
	return '\n'.join(significant_lines(text)[-count:])


def uppercase_letter_ratio(text: str) -> float:
	"""Uppercase letters over letters."""
	letters = [c for c in text if c.isalpha()]
	if not letters:
		return 0.0
	return sum(1 for c in letters if c.isupper()) / len(letters)
