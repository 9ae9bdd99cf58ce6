"""
Image I/O utilities for the command-line driver.

This module provides:
    • image_id(filename)
    • load_images(path_pattern)
    • ensure_output_dir(path)
    • save_image(path, image)
"""

import glob
import os
import re
from typing import List, Tuple

import cv2
import numpy as np
from loguru import logger


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def image_id(filename: str) -> str:
    """
    First integer found in the file name, or the bare stem when there is
    none.

    Example:
        'scans/page_038.png' → '038'
        'scans/cover.png'    → 'cover'
    """
    stem = os.path.splitext(os.path.basename(filename))[0]
    m = re.search(r'\d+', stem)
    return m.group(0) if m else stem


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_images(path_pattern: str) -> Tuple[List[np.ndarray], List[str]]:
    """
    Loads all images matching the given glob pattern, sorted by path.
    Unreadable files are logged and left out.

    Returns:
        images:  list of np.ndarray (BGR)
        names:   list of identifiers from image_id()
    """
    images = []
    names = []

    for fname in sorted(glob.glob(path_pattern)):
        img = cv2.imread(fname)
        if img is None:
            logger.warning("Could not read {}", fname)
            continue
        images.append(img)
        names.append(image_id(fname))

    return images, names


# -------------------------------------------------------------------------
#  OUTPUT
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def save_image(path: str, image: np.ndarray) -> bool:
    """
    Writes an image, creating its directory first. Returns cv2's status.
    """
    ensure_output_dir(os.path.dirname(path))
    ok = cv2.imwrite(path, image)
    if not ok:
        logger.warning("Failed to write {}", path)
    return ok
