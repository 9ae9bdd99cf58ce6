"""
Configuration file for the line-consolidation system.

Contains both REAL and SYNTHETIC parameter sets for the segment producer,
plus the tolerances shared by the consolidation and grouping paths.
Modules should read values using the get_active_params() function.
"""

import math

from line_consolidation.errors import ConfigurationError

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to True when using digitally-created images
SYNTHETIC_MODE = False


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

SELECTED_IMAGE_PATTERN = "selected/*.png"
OUTPUT_FOLDER = "output"
LOG_LEVEL = "INFO"


# ===============================================================
# REAL-MODE PARAMETERS (scanned documents)
# ===============================================================

REAL = {
    "DETECTOR": "hough",
    "CANNY_THRESHOLD": 255,
    "HOUGH_RHO_RATIO": 1 / 384,        # rho = width * ratio
    "HOUGH_THETA": math.pi / 180,
    "HOUGH_LENGTH_RATIO": 1 / 4,       # minimum line length = width * ratio
    "HOUGH_GAP_RATIO": 1 / 192,        # max gap = min length * ratio
    "MIN_DETECTION_WIDTH": 512,
}


# ===============================================================
# SYNTHETIC-MODE PARAMETERS (rendered test images)
# ===============================================================

SYNTH = {
    "DETECTOR": "lsd",
    "CANNY_THRESHOLD": 90,
    "HOUGH_RHO_RATIO": 1 / 512,
    "HOUGH_THETA": math.pi / 180,
    "HOUGH_LENGTH_RATIO": 1 / 16,
    "HOUGH_GAP_RATIO": 1 / 8,
    "MIN_DETECTION_WIDTH": 128,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

ANGLE_TOLERANCE = math.pi / 32      # rtol, radians
DISTANCE_TOLERANCE = 4.0            # dtol, pixels (when no image width is known)
DISTANCE_TOLERANCE_RATIO = 1 / 128  # dtol = image width * ratio
LENGTH_TOLERANCE = 0.1              # dtolp, proportional
ON_INVALID = "skip"                 # "skip" or "raise"

INVALID_POLICIES = ("skip", "raise")


# ---------------------------------------------------------------
# VISUALIZATION COLORS
# ---------------------------------------------------------------

COLOR_RAW = (128, 128, 128)        # raw detections - gray
COLOR_CONSOLIDATED = (0, 0, 255)   # consolidated segments - red
COLOR_TOP = (0, 255, 0)            # highest-ranked segment - green

GROUP_PALETTE = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (255, 0, 255),
    (0, 255, 255),
    (255, 128, 0),
    (128, 0, 255),
]


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the pipeline, detectors and main so they only import one dictionary.
    """

    base = {
        "ANGLE_TOLERANCE": ANGLE_TOLERANCE,
        "DISTANCE_TOLERANCE": DISTANCE_TOLERANCE,
        "DISTANCE_TOLERANCE_RATIO": DISTANCE_TOLERANCE_RATIO,
        "LENGTH_TOLERANCE": LENGTH_TOLERANCE,
        "ON_INVALID": ON_INVALID,
    }

    # Merge in real or synthetic mode values
    if SYNTHETIC_MODE:
        base.update(SYNTH)
    else:
        base.update(REAL)

    # Compute low threshold dynamically
    base["CANNY_THRESHOLD_LOW"] = base["CANNY_THRESHOLD"] / 3

    return base


def distance_tolerance_for_width(width, params=None):
    """
    Absolute distance tolerance scaled to an image width.
    Falls back to DISTANCE_TOLERANCE when the width is unknown.
    """
    if params is None:
        params = get_active_params()

    if not width:
        return params["DISTANCE_TOLERANCE"]
    return width * params["DISTANCE_TOLERANCE_RATIO"]


# ---------------------------------------------------------------
# VALIDATION
# ---------------------------------------------------------------

def _require_positive(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be a finite value > 0, got {value!r}")


def validate_tolerances(rtol=None, dtol=None, dtolp=None):
    """
    Fails fast on non-positive or non-finite tolerances.
    Arguments left as None are not checked.
    """
    if rtol is not None:
        _require_positive("rtol", rtol)
    if dtol is not None:
        _require_positive("dtol", dtol)
    if dtolp is not None:
        _require_positive("dtolp", dtolp)


def validate_policy(on_invalid):
    if on_invalid not in INVALID_POLICIES:
        raise ConfigurationError(
            f"on_invalid must be one of {INVALID_POLICIES}, got {on_invalid!r}"
        )


def validate_params(params):
    """
    Checks a full parameter dictionary (as returned by get_active_params()).
    """
    validate_tolerances(
        rtol=params["ANGLE_TOLERANCE"],
        dtol=params["DISTANCE_TOLERANCE"],
        dtolp=params["LENGTH_TOLERANCE"],
    )
    _require_positive("DISTANCE_TOLERANCE_RATIO", params["DISTANCE_TOLERANCE_RATIO"])
    validate_policy(params["ON_INVALID"])

    if params.get("DETECTOR", "hough") not in ("hough", "lsd"):
        raise ConfigurationError(f"Unknown DETECTOR {params.get('DETECTOR')!r}")
