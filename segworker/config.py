from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

from segworker.segmentation.models import SegmentationConfig


class Settings(BaseSettings):
	segworker__redis__url: str | None = None
	segworker__main__logging_cfg: Path | None = None

	# Detection signals
	segmentation_enable_pattern_detection: bool = True
	segmentation_enable_signature_detection: bool = True
	segmentation_enable_density_detection: bool = True
	segmentation_enable_font_change_detection: bool = True
	segmentation_enable_page_size_detection: bool = True
	segmentation_enable_image_signature_detection: bool = True
	segmentation_enable_neighborhood_detection: bool = True
	segmentation_enable_top_margin_detection: bool = True
	segmentation_enable_uppercase_header_detection: bool = True

	# Grouping
	segmentation_group_adjacent_pages: bool = True
	segmentation_merge_orphan_pages: bool = True
	segmentation_require_same_paper_size: bool = True
	segmentation_require_contiguous_pages: bool = True

	# Thresholds
	segmentation_min_confidence_score: float = 0.5
	segmentation_min_document_pages: int = 1
	segmentation_font_similarity_threshold: float = 0.7
	segmentation_density_change_threshold: float = 0.6
	segmentation_top_margin_fraction: float = 0.1
	segmentation_uppercase_min_length: int = 5
	segmentation_max_group_distance: int = 3

	# Processing Configuration
	segmentation_verbose: bool = False
	segmentation_parallel_workers: int = 1


@lru_cache()
def get_settings():
	return Settings()


def segmentation_config_from_settings(
	settings: Settings | None = None,
	**overrides,
) -> SegmentationConfig:
	"""Build the run configuration from settings, then apply overrides."""
	settings = settings or get_settings()
	prefix = 'segmentation_'
	values = {
		name[len(prefix):]: value
		for name, value in settings.model_dump().items()
		if name.startswith(prefix)
	}
	values.update(overrides)
	return SegmentationConfig.from_dict(values)
