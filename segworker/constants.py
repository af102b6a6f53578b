# (c) Copyright Datacraft, 2026
# Celery task names
SEGMENT_PDF = "segworker.segmentation.segment_pdf"
SEGMENT_PAGES = "segworker.segmentation.segment_pages"

# Score thresholds
START_THRESHOLD = 0.6
END_THRESHOLD = 0.4
BOUNDARY_THRESHOLD = 0.5
INDICATOR_THRESHOLD = 0.5  # features above this are recorded as indicators

# Signal weights
PATTERN_WEIGHT = 0.3
SIGNATURE_WEIGHT = 0.4
DENSITY_WEIGHT = 0.2
FONT_CHANGE_WEIGHT = 0.2
PAGE_SIZE_WEIGHT = 0.1
IMAGE_SIGNATURE_WEIGHT = 0.3
TOP_MARGIN_WEIGHT = 0.3
UPPERCASE_HEADER_WEIGHT = 0.25

# Page geometry (PDF units)
PAPER_SIZE_TOLERANCE = 10
PAPER_NAME_TOLERANCE = 2
SIGNATURE_IMAGE_MAX_WIDTH = 200  # 200x100 or smaller looks like a signature
SIGNATURE_IMAGE_MAX_HEIGHT = 100

# Line windows
PATTERN_LINES = 30
SIGNATURE_LINES = 30
TOP_MARGIN_LINES = 3
HEADER_LINES = 5
TYPE_DETECTION_LINES = 20
NEIGHBORHOOD_RADIUS = 3

# Orphan merging
ORPHAN_LEADING_MAX_START = 3  # first document absorbs pages before it if it starts at or before this page
ORPHAN_MAX_GAP = 2

DEFAULT_DOCUMENT_TYPE = "Documento"
