import argparse

from loguru import logger

from line_consolidation import config
from line_consolidation.config import get_active_params, validate_params, distance_tolerance_for_width
from line_consolidation.consolidation.annotator import annotate_segments
from line_consolidation.consolidation.pipeline import consolidate_annotated, group_annotated_by_slope
from line_consolidation.detectors.line_detector import detect_segments
from line_consolidation.errors import ConsolidationError
from line_consolidation.utils.image_io import load_images, ensure_output_dir
from line_consolidation.utils.geometry import segment_to_rectangle
from line_consolidation.utils.logging import setup_logging
from line_consolidation.visualization.save_outputs import save_all_outputs


def process_image(image, image_name: str, output_dir: str, params=None):
    """
    Runs the complete pipeline for one image:
      1. Segment detection (Hough or LSD)
      2. Annotation (invalid segments skipped once)
      3. Consolidation into long segments
      4. Slope/length grouping
      5. Save all outputs (raw, consolidated, groups)

    Returns the consolidated segments, or None when nothing was detected.
    """

    logger.info("=== Processing image with name: {} ===", image_name)
    if params is None:
        params = get_active_params()
    validate_params(params)

    # ------------------------------
    # STEP 1 — SEGMENT DETECTION
    # ------------------------------
    segments = detect_segments(image, params)
    if not segments:
        logger.warning("No segments detected in {}. Skipping.", image_name)
        return None

    # ------------------------------
    # STEP 2 — ANNOTATION
    # ------------------------------
    annotated = annotate_segments(segments, on_invalid=params["ON_INVALID"])

    # ------------------------------
    # STEP 3 — CONSOLIDATION
    # ------------------------------
    width = image.shape[1]
    dtol = distance_tolerance_for_width(width, params)
    lines = consolidate_annotated(
        annotated,
        rtol=params["ANGLE_TOLERANCE"],
        dtol=dtol,
        dtolp=params["LENGTH_TOLERANCE"],
        total=len(segments),
    )

    # ------------------------------
    # STEP 4 — SLOPE / LENGTH GROUPS
    # ------------------------------
    groups = group_annotated_by_slope(
        annotated,
        rtol=params["ANGLE_TOLERANCE"],
        dtolp=params["LENGTH_TOLERANCE"],
    )

    logger.info(
        "{}: {} raw segments -> {} lines, {} slope/length groups (dtol={:.2f})",
        image_name, len(segments), len(lines), len(groups), dtol,
    )
    if lines:
        logger.info("{}: top line {} spans box {}", image_name, lines[0], segment_to_rectangle(lines[0]))

    # ------------------------------
    # STEP 5 — SAVE OUTPUTS
    # ------------------------------
    save_all_outputs(
        output_dir=output_dir,
        image_id=image_name,
        base_image=image,
        raw_segments=segments,
        lines=lines,
        groups=groups,
    )

    logger.info("Finished {}", image_name)
    return lines


def build_parser():
    ap = argparse.ArgumentParser(
        description="Detect line segments in images and consolidate them into long lines."
    )
    ap.add_argument("--pattern", default=config.SELECTED_IMAGE_PATTERN, help="Glob pattern of input images")
    ap.add_argument("--output", default=config.OUTPUT_FOLDER, help="Output folder")
    ap.add_argument("--log-level", default=config.LOG_LEVEL)
    ap.add_argument("--synthetic", action="store_true", help="Use the synthetic-image parameter set")
    return ap


def main(argv=None):
    """
    Main entry point:
      - Loads images
      - Processes each one independently
      - Saves output files
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.synthetic:
        config.SYNTHETIC_MODE = True
    params = get_active_params()

    try:
        validate_params(params)
    except ConsolidationError as e:
        logger.error("Invalid configuration: {}", e)
        return 2

    ensure_output_dir(args.output)

    images, names = load_images(args.pattern)
    if not images:
        logger.error("No images matched pattern: {}", args.pattern)
        return 1

    failed = 0
    for img, name in zip(images, names):
        try:
            process_image(img, name, args.output, params)
        except ConsolidationError as e:
            failed += 1
            logger.error("{}: {}", name, e)

    logger.info("=== All images processed ({} failed) ===", failed)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
