"""countdown-gif DATE TIME: write a countdown animation to the target instant."""

import argparse
import logging
import sys
import time
from datetime import datetime
from typing import List, Optional

from .animation import assemble, save_animation
from .config import load_config
from .errors import CountdownError, InputError
from .fonts import download_font
from .render import FrameRenderer
from .timing import decompose, parse_target, remaining_until, sample_now

log = logging.getLogger("countdown_gif")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a countdown GIF to a UTC date and time")
    parser.add_argument("date", help="Target date, YYYY-MM-DD")
    parser.add_argument("time", help="Target time, HH:MM:SS (UTC)")
    parser.add_argument("-o", "--output", help="Output file (.gif or .mp4)")
    parser.add_argument("-c", "--config", help="YAML file with render settings")
    parser.add_argument("-n", "--frames", type=int, help="Maximum number of frames")
    parser.add_argument("--font", help="TrueType font file")
    parser.add_argument(
        "--download-font",
        metavar="DIR",
        nargs="?",
        const=".",
        help="Download DejaVu Sans into DIR (default: current directory) and use it",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every frame")
    return parser.parse_args(argv)


def _fmt(instant: datetime) -> str:
    return instant.strftime("%Y-%m-%d %H:%M")


def run(args: argparse.Namespace, now: Optional[datetime] = None) -> int:
    start = time.perf_counter()
    try:
        target = parse_target(args.date, args.time)
    except InputError as exc:
        print(exc)
        return 1

    try:
        font_path = args.font
        if args.download_font is not None and not font_path:
            font_path = str(download_font(args.download_font))
        cfg = load_config(args.config).with_overrides(
            output=args.output, frame_count=args.frames, font_path=font_path
        )

        current = sample_now(now)
        remaining = remaining_until(target, current)
        log.info("Start Date: %s", _fmt(current))
        log.info("End Date: %s", _fmt(current + remaining))
        days, hours, minutes, seconds = decompose(remaining)
        log.info("Days: %d, Hours: %d, Minutes: %d, Seconds: %d", days, hours, minutes, seconds)

        sequence = assemble(FrameRenderer(cfg), remaining)
        save_animation(sequence, cfg.output)
    except CountdownError as exc:
        log.error("%s", exc)
        return 1

    log.info("Total execution time: %.3fs", time.perf_counter() - start)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
