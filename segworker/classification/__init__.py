from .detector import ClassificationResult, DocumentType, DocumentTypeDetector

__all__ = [
	'DocumentTypeDetector',
	'DocumentType',
	'ClassificationResult',
]
