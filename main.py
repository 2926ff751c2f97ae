#!/usr/bin/env python3
"""
Stick Figure Animator - Main Entry Point

Command line front end for the keyframe animation tool: list the animations
in a catalog, export sprite sheets / frame sequences, or open a live preview.

Usage:
    python main.py list [catalog.json]
    python main.py export-sheet wave out/wave.png --frames 8 --columns 4
    python main.py export-frames wave out/wave_frames --frames 12
    python main.py preview wave --speed 1.5
"""

import argparse
import logging
import sys

from stickanim import AnimationCatalog, StickFigure, SpriteSheetExporter
from stickanim.config.settings import (
    DEFAULT_CATALOG_PATH,
    DEFAULT_FRAME_COUNT,
    DEFAULT_SHEET_COLUMNS,
)


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Stick figure keyframe animator")
    parser.add_argument("--catalog", default=str(DEFAULT_CATALOG_PATH),
                        help="Animation catalog JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List animations in the catalog")

    sheet = subparsers.add_parser("export-sheet", help="Export an animation as a sprite sheet PNG")
    sheet.add_argument("name", help="Animation name")
    sheet.add_argument("output", help="Output PNG path")
    sheet.add_argument("--frames", type=int, default=DEFAULT_FRAME_COUNT, help="Number of frames")
    sheet.add_argument("--columns", type=int, default=DEFAULT_SHEET_COLUMNS, help="Frames per row")

    frames = subparsers.add_parser("export-frames", help="Export an animation as numbered PNG frames")
    frames.add_argument("name", help="Animation name")
    frames.add_argument("output_dir", help="Output directory")
    frames.add_argument("--frames", type=int, default=DEFAULT_FRAME_COUNT, help="Number of frames")

    preview = subparsers.add_parser("preview", help="Play an animation in a window")
    preview.add_argument("name", help="Animation name")
    preview.add_argument("--speed", type=float, default=1.0, help="Playback speed multiplier")

    return parser


def run(args: argparse.Namespace) -> int:
    catalog = AnimationCatalog.load(args.catalog)

    if args.command == "list":
        for animation in catalog:
            loop = "loop" if animation.loop else "once"
            print(f"[Catalog] {animation.name}: {animation.duration:.2f}s, "
                  f"{len(animation.keyframes)} keyframes, {loop}")
        return 0

    animation = catalog.find_by_name(args.name)
    if animation is None:
        raise ValueError(f"Animation '{args.name}' not found (available: {', '.join(catalog.names())})")

    if args.command == "preview":
        # Imported here so that exports work on machines without a display
        from stickanim.rendering.preview_window import launch
        launch(animation, speed=args.speed)
        return 0

    base_pose = StickFigure().get_pose()
    exporter = SpriteSheetExporter()

    if args.command == "export-sheet":
        path = exporter.export_sheet(animation, base_pose, args.output,
                                     frame_count=args.frames, columns=args.columns)
        print(f"[Export] Sprite sheet written to {path}")
    elif args.command == "export-frames":
        paths = exporter.export_frames(animation, base_pose, args.output_dir, frame_count=args.frames)
        print(f"[Export] {len(paths)} frames written to {args.output_dir}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run(args)
    except (ValueError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == '__main__':
    sys.exit(main())
