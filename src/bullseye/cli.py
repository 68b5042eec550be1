"""
Bullseye CLI
Main entry point for running a live detection session.

Usage:
    python -m bullseye [minutes]
    python -m bullseye --validate
"""

import argparse
import logging
import signal
import sys
from threading import Event

from .config import (
    Config,
    ConfigValidationError,
    load_config,
    print_validation_summary,
)
from .core import ClassificationPipeline, DetectionLoop, SessionState, wall_clock_ms
from .reporting import ConsoleReporter
from .vision import CropRasterizer, FrameAnnotator, GalleryWriter, initialize_camera

logger = logging.getLogger(__name__)

# Module-level shutdown signal for SIGTERM/SIGINT handling
_shutdown_signal = Event()


def _handle_shutdown_signal(signum, _frame):
    """Handle SIGTERM/SIGINT for graceful shutdown."""
    signal_name = "SIGTERM" if signum == signal.SIGTERM else "SIGINT"
    # print is safer than logger in signal handlers
    print(f"\nReceived {signal_name}, initiating graceful shutdown...")
    _shutdown_signal.set()


def _setup_signal_handlers():
    signal.signal(signal.SIGTERM, _handle_shutdown_signal)
    signal.signal(signal.SIGINT, _handle_shutdown_signal)


def setup_logging(quiet: bool = False) -> None:
    """
    Setup logging configuration.

    Args:
        quiet: If True, only show warnings and errors
    """
    level = logging.WARNING if quiet else logging.INFO

    class ShortNameFormatter(logging.Formatter):
        def format(self, record):
            record.name = record.name.replace("bullseye.", "be.")
            return super().format(record)

    handler = logging.StreamHandler()
    handler.setFormatter(
        ShortNameFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s", datefmt="%H:%M:%S"
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(level)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Bullseye - live cattle detection and breed leaderboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m bullseye              # Run for the configured duration
  python -m bullseye 15           # Run for 15 minutes
  python -m bullseye --validate   # Check config and exit

Environment Variables:
  CAMERA_URL - Override camera URL from config
        """,
    )
    parser.add_argument(
        "duration",
        type=float,
        nargs="?",
        help="Duration in minutes (default: from config)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode - only show warnings and errors",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to config file (default: ./config.yaml if present)",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Validate configuration and show derived settings",
    )
    return parser.parse_args(argv)


def parse_duration(duration_arg: float | None, config: Config) -> float:
    """
    Resolve run duration in minutes from the command line or config.

    Raises:
        SystemExit: If duration is not positive
    """
    if duration_arg is None:
        return config.runtime.default_duration_minutes
    if duration_arg <= 0:
        logger.error(f"Invalid duration '{duration_arg}' - must be positive")
        sys.exit(1)
    return duration_arg


def build_session(config: Config, observers=()) -> SessionState:
    """Create session state from configuration."""
    return SessionState(
        catalog=config.catalog.categories,
        cooldown_ms=config.capture.cooldown_ms,
        buffer_capacity=config.capture.buffer_capacity,
        observers=observers,
    )


def build_annotator(config: Config) -> FrameAnnotator | None:
    """Annotate frames only when the annotated snapshot is persisted."""
    if not config.output.snapshot_dir:
        return None
    return FrameAnnotator(
        snapshot_dir=config.output.snapshot_dir,
        snapshot_interval=config.output.snapshot_interval,
    )


def run_session(config: Config, duration_minutes: float) -> ConsoleReporter:
    """
    Run a live session against the configured camera.

    Raises:
        RuntimeError: If the camera cannot be opened
    """
    from .vision.yolo import YoloClassifier, YoloDetector, start_classifier_loader

    reporter = ConsoleReporter()
    observers = [reporter]
    if config.output.gallery_dir:
        observers.append(
            GalleryWriter(config.output.gallery_dir, capacity=config.capture.buffer_capacity)
        )
    session = build_session(config, observers=observers)

    detector = YoloDetector(
        config.detection.model_file,
        confidence_threshold=config.detection.confidence_threshold,
    )
    primary = fallback = None
    if config.classifier.primary_model:
        primary = YoloClassifier(
            config.classifier.primary_model,
            top_k=config.classifier.top_k,
            input_size=config.capture.input_size,
        )
    if config.classifier.fallback_model:
        fallback = YoloClassifier(
            config.classifier.fallback_model,
            top_k=config.classifier.top_k,
            input_size=config.capture.input_size,
        )
    start_classifier_loader(primary, fallback)

    pipeline = ClassificationPipeline(
        session,
        CropRasterizer(),
        primary=primary,
        fallback=fallback,
        clock=wall_clock_ms,
        input_size=config.capture.input_size,
    )
    loop = DetectionLoop(
        detector,
        pipeline,
        annotator=build_annotator(config),
        target_class=config.detection.target_class,
        confidence_threshold=config.detection.confidence_threshold,
        clock=wall_clock_ms,
    )

    cap = initialize_camera(config.camera.url)
    try:
        loop.run(
            cap,
            shutdown_event=_shutdown_signal,
            duration_seconds=duration_minutes * 60,
        )
    finally:
        cap.release()

    return reporter


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(quiet=args.quiet or args.validate)

    try:
        config = load_config(args.config)
    except ConfigValidationError as e:
        logger.error(str(e))
        sys.exit(1)

    if args.validate:
        print_validation_summary(config)
        return

    duration_minutes = parse_duration(args.duration, config)
    _setup_signal_handlers()

    print("\n" + "=" * 70)
    print("BULLSEYE")
    print("=" * 70)
    print(f"\nTarget: {config.detection.target_class}")
    print(f"Duration: {duration_minutes:.0f} minute(s)")
    print(f"Camera: {config.camera.url}")
    if config.output.snapshot_dir:
        print(f"Snapshot: {config.output.snapshot_dir}/latest.jpg")
    if config.output.gallery_dir:
        print(f"Captures: {config.output.gallery_dir}/")
    print("Press Ctrl+C to stop early\n")

    try:
        reporter = run_session(config, duration_minutes)
    except RuntimeError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)

    print()
    print(reporter.render_summary())


if __name__ == "__main__":
    main()
