# (c) Copyright Datacraft, 2026
"""Multi-document segmentation module.

Detects where the documents of a mechanically concatenated PDF begin
and end.
"""
from .segmenter import DocumentSegmenter
from .cancellation import CancellationToken, SegmentationCancelled
from .models import (
	BoundaryScore,
	DocumentSpan,
	ImageInfo,
	PageRecord,
	SegmentationConfig,
	SegmentationResult,
)
from .trace import ListTraceSink, LoggingTraceSink, NullTraceSink, TraceSink

__all__ = [
	'DocumentSegmenter',
	'SegmentationConfig',
	'SegmentationResult',
	'PageRecord',
	'ImageInfo',
	'BoundaryScore',
	'DocumentSpan',
	'CancellationToken',
	'SegmentationCancelled',
	'TraceSink',
	'NullTraceSink',
	'LoggingTraceSink',
	'ListTraceSink',
]
