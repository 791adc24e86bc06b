"""
main.py - Entry point for batch polyline clipping.

Each input is a JSON file holding a list of polylines (lists of [x, y]
pairs), or an object with a "polylines" key. Every file is clipped against
the same window and written to `<output_dir>/<stem>_clipped.json`, with an
optional PNG preview next to it.

    cutlines-clip lines.json --rect 0 10 0 10 --output-dir out --preview
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Sequence, Tuple

import matplotlib
matplotlib.use("Agg")  # headless rendering for previews

from ..clipping import clip_polyline
from ..formatting import format_polylines
from ..geometry import Polyline, Rect, as_polyline
from ..mpl_utils import save_clip_preview
from ..utils.logging_utils import configure_logging
from .config import RunConfig
from .summary import RunSummary

LOGGER_NAME = "cutlines.runner"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cutlines-clip",
        description="Clip polylines from JSON files against a rectangular window.",
    )
    parser.add_argument("inputs", nargs="+", type=Path,
                        help="JSON files with lists of polylines")
    parser.add_argument("--rect", nargs=4, type=float, required=True,
                        metavar=("XMIN", "XMAX", "YMIN", "YMAX"),
                        help="clip window bounds")
    parser.add_argument("-o", "--output-dir", type=Path, default=Path("./out"),
                        help="directory for clipped JSON and previews (default: ./out)")
    parser.add_argument("--log-dir", type=Path, default=Path("./logs"),
                        help="directory for the run log file (default: ./logs)")
    parser.add_argument("--no-log-file", action="store_true",
                        help="log to the console only")
    parser.add_argument("--preview", action="store_true",
                        help="also render a PNG preview per input file")
    parser.add_argument("--dpi", type=int, default=100,
                        help="preview resolution (default: 100)")
    parser.add_argument("--max-failures", type=int, default=5,
                        help="abort after this many failed files (default: 5)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    return RunConfig(
        logger_level=logging.DEBUG if args.verbose else logging.INFO,
        output_dir=args.output_dir,
        log_dir=None if args.no_log_file else args.log_dir,
        preview=args.preview,
        dpi=args.dpi,
        max_failures=args.max_failures,
    )


def load_polylines(path: Path) -> list[Polyline]:
    """Read polylines from a JSON file.

    Raises:
        ValueError: If the document is not a list of polylines.
    """
    with open(path, "r", encoding="utf-8") as f:
        doc = json.load(f)
    if isinstance(doc, dict):
        doc = doc.get("polylines")
    if not isinstance(doc, list):
        raise ValueError(f"{path}: expected a list of polylines")
    return [as_polyline(line) for line in doc]


def clip_file(path: Path, rect: Rect, config: RunConfig) -> Tuple[Path, int, int]:
    """Clip every polyline in `path` and write the result file.

    Returns:
        (output path, number of input polylines, number of output polylines)
    """
    logger = logging.getLogger(LOGGER_NAME)
    lines = load_polylines(path)
    clipped: list[Polyline] = []
    for i, line in enumerate(lines):
        pieces = clip_polyline(line, rect)
        logger.debug(f"{path.name}[{i}]: {len(line)} points -> {format_polylines(pieces)}")
        clipped.extend(pieces)

    out = config.output_dir / f"{path.stem}_clipped.json"
    doc = {
        "source": str(path),
        "rect": asdict(rect),
        "polylines": [[list(p) for p in line] for line in clipped],
    }
    with open(out, "w", encoding="utf-8") as f:
        json.dump(doc, f, indent=2)

    if config.preview:
        png = save_clip_preview(config.output_dir / f"{path.stem}_clipped.png",
                                lines, rect, clipped,
                                img_size=config.img_size, dpi=config.dpi)
        logger.info(f"Preview written: {png}")

    logger.info(f"{path.name}: {len(lines)} polylines in, {len(clipped)} out -> {out}")
    return out, len(lines), len(clipped)


def run(inputs: Sequence[Path], rect: Rect, config: RunConfig) -> RunSummary:
    """Clip all inputs, tolerating up to `config.max_failures - 1` bad files."""
    logger = logging.getLogger(LOGGER_NAME)
    log_path = configure_logging(level=config.logger_level, log_dir=config.log_dir,
                                 name="cutlines", run_prefix="clip")
    logger.info(f"RunConfig: {asdict(config)}")
    logger.info(f"Clip window: {rect}")

    summary = RunSummary(total_jobs=len(inputs), log_path=log_path)
    fail_count = 0
    try:
        for path in inputs:
            try:
                _, n_in, n_out = clip_file(Path(path), rect, config)
            except (OSError, ValueError, TypeError) as err:
                fail_count += 1
                summary.record_result(success=False)
                logger.error(f"Failed to clip {path}: {err}")
                if fail_count >= config.max_failures:
                    logger.critical(f"Too many failures ({fail_count}). Aborting.")
                    raise SystemExit(1)
            else:
                summary.record_result(success=True, lines_in=n_in, lines_out=n_out)
    finally:
        summary.finalize()
    return summary


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    try:
        rect = Rect(*args.rect)
    except ValueError as err:
        build_parser().error(str(err))
    summary = run(args.inputs, rect, config)
    return 0 if summary.failed_jobs == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
