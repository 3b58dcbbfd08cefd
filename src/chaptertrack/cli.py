#!/usr/bin/env python3
"""
chaptertrack CLI - Extract chapter lists from videos.

Usage:
    chaptertrack extract "https://youtube.com/watch?v=VIDEO_ID"
    chaptertrack parse chapters.txt --duration 600
    chaptertrack video-id "https://youtu.be/VIDEO_ID"
"""

import argparse
import asyncio
import json
import sys

from chaptertrack.models.chapter import Chapter
from chaptertrack.models.video_url import extract_video_id
from chaptertrack.operations.chapters import parse_chapters_from_description
from chaptertrack.operations.extractor import VideoInfoExtractor
from chaptertrack.parsing.timestamps import format_timestamp
from chaptertrack.utils.logging import configure_logging


def _print_chapters(chapters: list[Chapter]) -> None:
    if not chapters:
        print("No chapters found.")
        return
    for ch in chapters:
        end = format_timestamp(ch.end_time_seconds) if ch.end_time_seconds is not None else "?"
        print(f"{ch.chapter_number:>3}. [{format_timestamp(ch.start_time_seconds)} - {end}] {ch.title}")


def _cmd_extract(args) -> int:
    """Handle the extract subcommand."""
    info = asyncio.run(VideoInfoExtractor().extract_info(args.url))

    if args.json:
        print(json.dumps(info.to_dict(), indent=2, ensure_ascii=False))
        return 0

    print(f"Video ID: {info.id}")
    print(f"Title: {info.title}")
    print(f"Duration: {format_timestamp(info.duration_seconds)}")
    _print_chapters(info.chapters)
    return 0


def _cmd_parse(args) -> int:
    """Handle the parse subcommand."""
    if args.file == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.file, encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    chapters = parse_chapters_from_description(text, args.duration)

    if args.json:
        print(json.dumps([ch.to_dict() for ch in chapters], indent=2, ensure_ascii=False))
    else:
        _print_chapters(chapters)
    return 0


def _cmd_video_id(args) -> int:
    """Handle the video-id subcommand."""
    video_id = extract_video_id(args.url)
    if video_id is None:
        print(f"ERROR: not a YouTube video URL: {args.url}", file=sys.stderr)
        return 1
    print(video_id)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chaptertrack",
        description="Extract chapter lists from videos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s extract "https://youtube.com/watch?v=VIDEO_ID"
    %(prog)s extract "https://youtube.com/watch?v=VIDEO_ID" --json
    %(prog)s parse description.txt --duration 600
    pbpaste | %(prog)s parse - --duration 600
    %(prog)s video-id "https://youtu.be/VIDEO_ID"
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    ex_parser = subparsers.add_parser("extract", help="Extract metadata and chapters for a URL")
    ex_parser.add_argument("url", help="Video URL")
    ex_parser.add_argument("--json", action="store_true", help="Print JSON")
    ex_parser.set_defaults(func=_cmd_extract)

    p_parser = subparsers.add_parser("parse", help="Parse chapter lines from text")
    p_parser.add_argument("file", help="Text file with chapter lines, or - for stdin")
    p_parser.add_argument(
        "--duration", type=int, default=0,
        help="Total video length in seconds (end of the last chapter)",
    )
    p_parser.add_argument("--json", action="store_true", help="Print JSON")
    p_parser.set_defaults(func=_cmd_parse)

    id_parser = subparsers.add_parser("video-id", help="Print the YouTube video ID of a URL")
    id_parser.add_argument("url", help="YouTube URL")
    id_parser.set_defaults(func=_cmd_video_id)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
