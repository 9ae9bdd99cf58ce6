import cv2
import numpy as np
from loguru import logger

from line_consolidation.config import get_active_params
from line_consolidation.consolidation.pipeline import consolidate_with_params


def _to_gray(image):
    if image.ndim == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    return image


def _hough_segments(image_gray, params):
    """
    Probabilistic Hough on the Canny edge map. All lengths scale with the
    image width (never below MIN_DETECTION_WIDTH).
    """
    width = max(image_gray.shape[1], params["MIN_DETECTION_WIDTH"])
    min_length = max(1, int(width * params["HOUGH_LENGTH_RATIO"]))
    max_gap = max(1, int(np.ceil(min_length * params["HOUGH_GAP_RATIO"])))
    rho = max(1.0, image_gray.shape[1] * params["HOUGH_RHO_RATIO"])

    edges = cv2.Canny(image_gray, params["CANNY_THRESHOLD_LOW"], params["CANNY_THRESHOLD"])
    detected = cv2.HoughLinesP(
        edges,
        rho,
        params["HOUGH_THETA"],
        min_length,
        minLineLength=min_length,
        maxLineGap=max_gap,
    )
    return detected


def _lsd_segments(image_gray):
    lsd = cv2.createLineSegmentDetector(0)
    return lsd.detect(image_gray)[0]


def detect_segments(image, params=None):
    """
    Detects raw line segments in an image.

    Parameters
    ----------
    image : np.ndarray
        Grayscale or BGR image.
    params : dict, optional
        Parameter dictionary; defaults to get_active_params().
        params["DETECTOR"] selects "hough" or "lsd".

    Returns
    -------
    list[tuple[float, float, float, float]]
        Segments as (x0, y0, x1, y1), in detector order.
    """
    if params is None:
        params = get_active_params()

    gray = _to_gray(image)

    if params["DETECTOR"] == "lsd":
        detected = _lsd_segments(gray)
    else:
        detected = _hough_segments(gray, params)

    if detected is None:
        return []

    # Reshape output to Nx4
    detected = np.asarray(detected, dtype=float).reshape(-1, 4)
    segments = [tuple(float(v) for v in row) for row in detected]

    logger.debug("Detected {} raw segments ({})", len(segments), params["DETECTOR"])
    return segments


def find_dominant_line(image, params=None):
    """
    Consolidates the detected segments and returns the highest-ranked one,
    or None when nothing was detected.
    """
    if params is None:
        params = get_active_params()

    segments = detect_segments(image, params)
    if not segments:
        return None

    lines = consolidate_with_params(segments, params, width=image.shape[1])
    return lines[0] if lines else None
