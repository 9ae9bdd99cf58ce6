from __future__ import annotations

import os
import tempfile
import unittest
from unittest import mock

import cv2
import numpy as np
from loguru import logger

from line_consolidation import config
from line_consolidation.consolidation.pipeline import group_lines_by_slope
from line_consolidation.detectors.line_detector import detect_segments, find_dominant_line
from line_consolidation.main import main, process_image
from line_consolidation.utils.image_io import image_id, load_images
from line_consolidation.visualization.draw_lines import draw_groups, draw_segments
from line_consolidation.visualization.save_outputs import save_all_outputs


def _image_with_rule(width: int = 512, height: int = 512) -> np.ndarray:
    img = np.zeros((height, width, 3), dtype=np.uint8)
    cv2.line(img, (50, height // 2), (width - 50, height // 2), (255, 255, 255), 3)
    return img


class TestDetection(unittest.TestCase):
    def test_blank_image_has_no_segments(self) -> None:
        blank = np.zeros((256, 256), dtype=np.uint8)
        self.assertEqual(detect_segments(blank), [])
        self.assertIsNone(find_dominant_line(blank))

    def test_blank_image_lsd(self) -> None:
        params = config.get_active_params()
        params["DETECTOR"] = "lsd"
        self.assertEqual(detect_segments(np.zeros((128, 128), dtype=np.uint8), params), [])

    def test_dominant_line_of_a_ruled_image(self) -> None:
        line = find_dominant_line(_image_with_rule())
        self.assertIsNotNone(line)
        x0, y0, x1, y1 = line
        self.assertLessEqual(abs(y1 - y0), 4)
        self.assertGreater(abs(x1 - x0), 200)

    def test_segments_are_flat_tuples(self) -> None:
        segments = detect_segments(_image_with_rule())
        self.assertTrue(segments)
        for seg in segments:
            self.assertEqual(len(seg), 4)
            self.assertTrue(all(isinstance(v, float) for v in seg))


class TestOutputs(unittest.TestCase):
    def test_image_id(self) -> None:
        self.assertEqual(image_id("scans/page_038.png"), "038")
        self.assertEqual(image_id("scans/cover.png"), "cover")

    def test_draw_segments_marks_pixels(self) -> None:
        img = np.zeros((20, 20, 3), dtype=np.uint8)
        draw_segments(img, [(2, 10, 17, 10)], color=(0, 0, 255), thickness=1)
        self.assertEqual(tuple(img[10, 5]), (0, 0, 255))
        self.assertEqual(tuple(img[0, 0]), (0, 0, 0))

    def test_draw_groups_uses_palette(self) -> None:
        img = np.zeros((40, 40, 3), dtype=np.uint8)
        groups = group_lines_by_slope([(2, 5, 30, 5), (5, 10, 5, 35)], rtol=0.1, dtolp=0.1)
        draw_groups(img, groups, thickness=1)
        self.assertEqual(tuple(img[5, 10]), config.GROUP_PALETTE[0])
        self.assertEqual(tuple(img[20, 5]), config.GROUP_PALETTE[1])

    def test_save_all_outputs(self) -> None:
        gray = np.zeros((64, 64), dtype=np.uint8)
        raw = [(2, 10, 30, 10), (32, 10, 60, 10)]
        groups = group_lines_by_slope(raw, rtol=0.1, dtolp=0.1)
        with tempfile.TemporaryDirectory() as tmp:
            save_all_outputs(tmp, "001", gray, raw, [(2.0, 10.0, 60.0, 10.0)], groups)
            for suffix in ("raw", "consolidated", "groups"):
                self.assertTrue(os.path.exists(os.path.join(tmp, f"001_{suffix}.png")))


class TestProcessImage(unittest.TestCase):
    def test_degenerate_segment_reported_once(self) -> None:
        detected = [(10.0, 20.0, 200.0, 20.0), (5.0, 5.0, 5.0, 5.0), (203.0, 20.0, 400.0, 20.0)]
        messages = []
        handler_id = logger.add(messages.append, level="WARNING")
        try:
            with tempfile.TemporaryDirectory() as tmp, \
                    mock.patch("line_consolidation.main.detect_segments", return_value=detected):
                lines = process_image(np.zeros((64, 512, 3), dtype=np.uint8), "009", tmp)
                self.assertTrue(os.path.exists(os.path.join(tmp, "009_groups.png")))
        finally:
            logger.remove(handler_id)

        self.assertEqual(lines, [(10.0, 20.0, 400.0, 20.0)])
        skipped = [m for m in messages if "Skipping segment 1" in m]
        self.assertEqual(len(skipped), 1)
        self.assertNotIn("[WARN]", skipped[0])


class TestMain(unittest.TestCase):
    def test_main_processes_images(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            src = os.path.join(tmp, "in")
            out = os.path.join(tmp, "out")
            os.makedirs(src)
            cv2.imwrite(os.path.join(src, "page_007.png"), _image_with_rule())

            images, names = load_images(os.path.join(src, "*.png"))
            self.assertEqual(names, ["007"])

            rc = main(["--pattern", os.path.join(src, "*.png"), "--output", out, "--log-level", "ERROR"])
            self.assertEqual(rc, 0)
            self.assertTrue(os.path.exists(os.path.join(out, "007_consolidated.png")))

    def test_main_without_images(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            rc = main(["--pattern", os.path.join(tmp, "*.png"), "--output", tmp, "--log-level", "ERROR"])
            self.assertEqual(rc, 1)


if __name__ == "__main__":
    unittest.main()
