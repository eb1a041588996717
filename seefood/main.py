#!/usr/bin/env python3
"""SeeFood - Main Application

Asks Google Cloud Vision what is in a photo and tells you whether it is
a hot dog.

Usage:
    python -m seefood.main [SOURCE] [--config CONFIG] [--no-gui] [--save PATH]

Arguments:
    SOURCE             Image file or http(s) URL. Opens a file picker if omitted.

Options:
    --config CONFIG    Path to configuration file
    --no-gui           Print the verdict instead of opening a window
    --save PATH        Also write the annotated image to PATH
    --debug            Enable debug logging
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from .exceptions import SeeFoodError
from .services import (
    Classification,
    LabelClient,
    ObjectLabel,
    annotate,
    classify,
    load_image,
    save_annotated,
)
from .utils import Config, setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_FILE = -1


@dataclass
class Analysis:
    """Everything produced for one image."""

    source: str
    labels: list[ObjectLabel]
    classification: Classification
    image: Image.Image


class SeeFood:
    """Runs one image through detection, classification and annotation."""

    def __init__(self, config: Config, client: Optional[LabelClient] = None):
        """Initialize the application.

        Args:
            config: Configuration instance.
            client: Label client. Built from the configuration if omitted.
        """
        self.config = config
        self.client = client or LabelClient(
            credentials_dir=config.credentials_dir,
            credentials_pattern=config.credentials_pattern,
        )

    def analyze(self, source: str) -> Analysis:
        """Detect, classify and annotate an image.

        The image is read once and reused for both detection and display.

        Args:
            source: Image file path or URL.

        Returns:
            Analysis of the image.
        """
        content = self.client.read_image(source)
        labels = self.client.detect_content(content)

        for index, label in enumerate(labels):
            logger.debug(f"Label {index}: {label}")

        classification = classify(labels, self.config.match_text)
        if classification.is_hot_dog:
            logger.info(
                f"Hot dog found in {source} at label {classification.match_index}: "
                f"{labels[classification.match_index]}"
            )
        else:
            logger.info(f"No hot dog found in {source}")

        image = annotate(
            load_image(content),
            classification.verdict,
            font_size=self.config.banner_font_size,
        )
        return Analysis(source, labels, classification, image)


def run_cli(app: SeeFood, source: str, save_path: Optional[Path] = None) -> int:
    """Print the verdict for an image.

    Returns:
        Process exit status.
    """
    try:
        analysis = app.analyze(source)
    except (SeeFoodError, OSError) as e:
        logger.error(f"Detection failed for {source}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    for label in analysis.labels:
        print(f"  {label}")
    print(analysis.classification.verdict.text)

    if save_path:
        save_annotated(analysis.image, save_path)
    return EXIT_OK


def run_gui(app: SeeFood, source: Optional[str] = None, save_path: Optional[Path] = None) -> int:
    """Pick an image if needed and show it with its verdict.

    Returns:
        Process exit status.
    """
    from . import ui

    if not source:
        source = ui.select_file(app.config.initial_dir)
    if not source:
        ui.show_error("No file selected. Exiting.")
        return EXIT_NO_FILE

    try:
        ui.render_verdict(source, app, save_path)
    except (SeeFoodError, OSError) as e:
        logger.error(f"Detection failed for {source}: {e}")
        ui.show_error(f"Could not label {source}:\n{e}")
        return EXIT_FAILURE

    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Hot Dog / Not Hot Dog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Image file or http(s) URL",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--no-gui",
        action="store_true",
        help="Print the verdict instead of opening a window",
    )
    parser.add_argument(
        "--save",
        type=Path,
        help="Also write the annotated image to this path",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.no_gui and not args.source:
        parser.error("SOURCE is required with --no-gui")

    config = Config(args.config)

    log_level = "DEBUG" if args.debug or config.debug else config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    app = SeeFood(config)

    if args.no_gui:
        return run_cli(app, args.source, args.save)
    return run_gui(app, args.source, args.save)


if __name__ == "__main__":
    sys.exit(main())
