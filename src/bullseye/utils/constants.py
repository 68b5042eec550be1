"""
Constants used throughout the bullseye system
"""

# Detection
DEFAULT_TARGET_CLASS = "cow"
DEFAULT_CONFIDENCE_THRESHOLD = 0.6  # Detections must score strictly above this

# Capture throttling and history
DEFAULT_CAPTURE_COOLDOWN_MS = 3000
DEFAULT_BUFFER_CAPACITY = 60
DEFAULT_INPUT_SIZE = 224  # Classifier input is a square still of this size

# Sentinel categories (never part of the catalog)
SENTINEL_NO_CLASSIFIER = "unknown (no classifier)"
SENTINEL_UNKNOWN = "unknown"
SENTINEL_PREDICTION_ERROR = "prediction error"

# Label substituted when the top candidate has no label text
UNLABELED_CANDIDATE = "unknown"

# Performance and monitoring
STATUS_REPORT_INTERVAL = 300  # Log status every N ticks
CLASSIFIER_TOP_K = 5  # Candidates returned per classification

# Camera reconnection
MAX_CAMERA_RECONNECT_ATTEMPTS = 2
CAMERA_RECONNECT_DELAY = 2.0  # Seconds between reconnection attempts

# Environment variables
ENV_CAMERA_URL = "CAMERA_URL"

# Default breed catalog. Order defines the index the label hash lands on.
BREED_CATALOG = (
    "Alambadi",
    "Amritmahal",
    "Ayrshire",
    "Banni",
    "Bargur",
    "Bhadawari",
    "Brown_Swiss",
    "Dangi",
    "Deoni",
    "Gir",
    "Guernsey",
    "Hallikar",
    "Hariana",
    "Holstein_Friesian",
    "Jaffrabadi",
    "Jersey",
    "Kangayam",
    "Kankrej",
    "Kasargod",
    "Kenkatha",
    "Kherigarh",
    "Khillari",
    "Krishna_Valley",
    "Malnad_gidda",
    "Mehsana",
    "Murrah",
    "Nagori",
    "Nagpuri",
    "Nili_Ravi",
    "Nimari",
    "Ongole",
    "Pulikulam",
    "Rathi",
    "Red_Dane",
    "Red_Sindhi",
    "Sahiwal",
    "Surti",
    "Tharparkar",
    "Toda",
    "Umblachery",
    "Vechur",
)

# Persisted output
DEFAULT_GALLERY_DIR = "captures"  # Stills of the most recent captures
DEFAULT_SNAPSHOT_DIR = "snapshots"
SNAPSHOT_FILENAME = "latest.jpg"  # Annotated latest frame, overwritten in place
DEFAULT_SNAPSHOT_INTERVAL = 10  # Write the snapshot every N ticks
