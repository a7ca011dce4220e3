"""
regionbox CLI - Main entry point.

Builds a rectangle or parallelepiped from numeric bounds and checks whether
points lie inside it, either interactively or from arguments/YAML.
"""

import argparse
import locale
import sys
from typing import List, Optional, Sequence

from regionbox_geometry import (
    InvalidBound,
    Region,
    RegionDetector,
    RegionKind,
    build_region,
    format_number,
)
from regionbox_cli.config import CheckConfig, SessionConfig
from regionbox_cli.logging import LogEvent, StructuredLogger, create_logger
from regionbox_cli.reader import InputExhausted, NumberReader
from regionbox_cli.session import InteractiveSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="regionbox",
        description="regionbox - point containment for rectangles and parallelepipeds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive menu (default)
  regionbox
  regionbox interactive

  # Check points against a rectangle 0 <= x1 <= 10, 0 <= x2 <= 5
  regionbox check --rectangle 0 10 0 5 --point 5 2 --point 11 2

  # Projection query on a parallelepiped (x3 ignored)
  regionbox check --parallelepiped 0 10 0 5 0 2 --point 5 2

  # Region and points from YAML
  regionbox check --config config/check_example.yaml
"""
    )

    parser.add_argument(
        "--session-config",
        help="Path to session settings YAML (log level, locale, sample point)"
    )
    parser.add_argument(
        "--log-level",
        help="Override log level (DEBUG, INFO, WARNING, ERROR)"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('interactive', help='Menu-driven session (default)')

    check = subparsers.add_parser('check', help='Check points without prompting')
    region = check.add_mutually_exclusive_group()
    region.add_argument(
        '--rectangle',
        nargs=4,
        type=float,
        metavar=('B1', 'A1', 'B2', 'A2'),
        help='Rectangle bounds'
    )
    region.add_argument(
        '--parallelepiped',
        nargs=6,
        type=float,
        metavar=('B1', 'A1', 'B2', 'A2', 'B3', 'A3'),
        help='Parallelepiped bounds'
    )
    region.add_argument('--config', help='Path to region/points YAML')
    check.add_argument(
        '--point',
        nargs='+',
        type=float,
        action='append',
        default=[],
        metavar='X',
        help='Point coordinates (2 or 3 values); repeatable'
    )

    return parser


def load_session_config(args: argparse.Namespace) -> SessionConfig:
    if args.session_config:
        config = SessionConfig.from_yaml(args.session_config)
    else:
        config = SessionConfig()
    if args.log_level:
        config = SessionConfig(
            log_level=args.log_level,
            locale=config.locale,
            show_sample_point=config.show_sample_point,
        )
    return config


def apply_locale(config: SessionConfig, logger: StructuredLogger) -> None:
    """
    Switch LC_NUMERIC for the fallback number parser.

    An empty setting follows the environment (LANG / LC_ALL); "C" opts out.
    """
    try:
        locale.setlocale(locale.LC_NUMERIC, config.locale)
    except locale.Error as e:
        logger.warning(
            event=LogEvent.LOCALE_UNAVAILABLE,
            message="Numeric locale not available, keeping process locale",
            metadata={'locale': config.locale},
            exc_info=e,
        )


def format_point(coordinates: Sequence[float]) -> str:
    return "(" + ", ".join(format_number(c) for c in coordinates) + ")"


def resolve_check(args: argparse.Namespace) -> tuple[Region, List[List[float]]]:
    """
    Build the region and point list for ``check``.

    Raises:
        ValueError: No region given, invalid config, or a point with < 2 values
        InvalidBound: Non-finite bound
        FileNotFoundError: Missing YAML file
    """
    points: List[List[float]] = [list(p) for p in args.point]

    if args.config:
        check_config = CheckConfig.from_yaml(args.config)
        region = check_config.region.build()
        points = [list(p) for p in check_config.points] + points
    elif args.rectangle:
        region = build_region(RegionKind.RECTANGLE, args.rectangle)
    elif args.parallelepiped:
        region = build_region(RegionKind.PARALLELEPIPED, args.parallelepiped)
    else:
        raise ValueError("check needs --rectangle, --parallelepiped or --config")

    for point in points:
        if len(point) < 2:
            raise ValueError(f"Each point needs at least 2 coordinates, got {point}")

    return region, points


def run_check(args: argparse.Namespace, logger: StructuredLogger) -> int:
    region, points = resolve_check(args)
    logger.info(
        event=LogEvent.REGION_CREATED,
        message=f"{region.title} created",
        metadata={'bounds': [[a.low, a.high] for a in region.axes]},
    )

    print(f"{region.title} bounds:")
    for line in region.format_report():
        print(f"  {line}")

    inside_count = 0
    for point in points:
        inside = region.contains(point)
        inside_count += inside
        print(f"{format_point(point)}: {'inside' if inside else 'outside'}")

    # Batch path for the log summary; rows are grouped by arity
    for arity in sorted({len(p) for p in points}):
        group = [p for p in points if len(p) == arity]
        logger.info(
            event=LogEvent.BATCH_EVALUATED,
            message="Points checked",
            metadata={
                'arity': arity,
                'points': len(group),
                'inside': RegionDetector.count_inside(region, group),
            },
        )

    print(f"{inside_count} of {len(points)} point(s) inside")
    return 0


def run_interactive(config: SessionConfig, logger: StructuredLogger) -> int:
    reader = NumberReader(logger=create_logger("reader", level=config.logging_level))
    session = InteractiveSession(reader, config=config, logger=logger)
    try:
        session.run()
    except InputExhausted as e:
        logger.error(
            event=LogEvent.INPUT_EXHAUSTED,
            message="Input ended before the session finished",
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_session_config(args)
    except (FileNotFoundError, ValueError) as e:
        create_logger("cli").error(
            event=LogEvent.CONFIG_ERROR,
            message="Session config rejected",
            metadata={'path': args.session_config},
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger = create_logger("cli", level=config.logging_level)
    if args.session_config:
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message="Session config loaded",
            metadata={'path': args.session_config},
        )
    apply_locale(config, logger)

    if args.command == 'check':
        try:
            return run_check(args, logger)
        except (FileNotFoundError, ValueError) as e:
            event = LogEvent.REGION_BOUNDS_REJECTED if isinstance(e, InvalidBound) else LogEvent.CONFIG_ERROR
            logger.error(event=event, message="Check failed", exc_info=e)
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return run_interactive(config, logger)


if __name__ == '__main__':
    sys.exit(main())
