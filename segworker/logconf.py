# (c) Copyright Datacraft, 2026
"""Logging bootstrap for the worker."""
import logging
import logging.config
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(cfg_path: Path | None = None, level: int = logging.INFO) -> None:
	"""Configure logging from a YAML dictConfig file, or fall back to basicConfig."""
	if cfg_path is None:
		logging.basicConfig(level=level, format=DEFAULT_FORMAT)
		return

	cfg_path = Path(cfg_path)
	if not cfg_path.exists():
		logging.basicConfig(level=level, format=DEFAULT_FORMAT)
		logger.warning(f"Logging config {cfg_path} not found, using defaults")
		return

	with cfg_path.open("r", encoding="utf-8") as f:
		config = yaml.safe_load(f)

	logging.config.dictConfig(config)
