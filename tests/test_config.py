import pytest

from segworker.config import Settings, segmentation_config_from_settings
from segworker.segmentation import SegmentationConfig
from segworker.segmentation.patterns import DEFAULT_END_PATTERNS, DEFAULT_START_PATTERNS


def test_defaults():
	config = SegmentationConfig()
	assert config.min_confidence_score == 0.5
	assert config.max_group_distance == 3
	assert config.start_patterns == DEFAULT_START_PATTERNS
	assert config.end_patterns == DEFAULT_END_PATTERNS
	assert config.detection_enabled
	assert not config.verbose
	assert config.parallel_workers == 1


@pytest.mark.parametrize(
	"changes",
	[
		{"min_confidence_score": -0.1},
		{"min_document_pages": 0},
		{"font_similarity_threshold": 1.5},
		{"density_change_threshold": -1},
		{"top_margin_fraction": 0.0},
		{"uppercase_min_length": -1},
		{"max_group_distance": -1},
		{"parallel_workers": 0},
		{"start_patterns": ["PODER (JUDICIÁRIO"]},
	],
)
def test_invalid_values_are_rejected(changes):
	with pytest.raises(ValueError):
		SegmentationConfig(**changes)


def test_replace_returns_new_config():
	config = SegmentationConfig()
	strict = config.replace(min_confidence_score=0.8)
	assert strict.min_confidence_score == 0.8
	assert config.min_confidence_score == 0.5


def test_pattern_lists_are_frozen():
	config = SegmentationConfig(start_patterns=["DESPACHO"], end_patterns=["dou fé"])
	assert config.start_patterns == ("DESPACHO",)
	assert config.end_patterns == ("dou fé",)
	assert hash(config) == hash(SegmentationConfig(start_patterns=("DESPACHO",), end_patterns=("dou fé",)))


def test_detection_enabled():
	assert not SegmentationConfig().with_all_signals(False).detection_enabled
	only_fonts = SegmentationConfig().with_all_signals(False).replace(enable_font_change_detection=True)
	assert only_fonts.detection_enabled


def test_dict_round_trip():
	config = SegmentationConfig(verbose=True, min_document_pages=2)
	data = config.to_dict()
	assert isinstance(data["start_patterns"], list)
	assert SegmentationConfig.from_dict(data) == config


def test_from_dict_rejects_unknown_options():
	with pytest.raises(ValueError, match="min_pages"):
		SegmentationConfig.from_dict({"min_pages": 2})


def test_settings_read_environment(monkeypatch):
	monkeypatch.setenv("SEGMENTATION_MAX_GROUP_DISTANCE", "5")
	monkeypatch.setenv("SEGMENTATION_ENABLE_NEIGHBORHOOD_DETECTION", "false")
	config = segmentation_config_from_settings(Settings())
	assert config.max_group_distance == 5
	assert not config.enable_neighborhood_detection


def test_overrides_win_over_settings():
	settings = Settings(segmentation_min_confidence_score=0.7)
	config = segmentation_config_from_settings(settings, min_confidence_score=0.2, verbose=True)
	assert config.min_confidence_score == 0.2
	assert config.verbose


def test_unknown_override_is_rejected():
	with pytest.raises(ValueError):
		segmentation_config_from_settings(Settings(), no_such_option=True)
