#!/usr/bin/env python3
"""Chunk a markdown or text document and report chunking quality.

Usage:
    content-chunk report.md                     # Summary and statistics
    content-chunk report.md --show-chunks 3     # Also print the first 3 chunks
    content-chunk report.md --json              # Machine-readable output
    cat report.md | content-chunk -             # Read from stdin
"""

import argparse
import json
import sys
from pathlib import Path

from .chunker import chunk_text
from .config import CHUNK_MAX_SIZE, CHUNK_OVERLAP_SIZE
from .quality import analyze_chunking_quality
from .validation import ValidationError, validate_chunking_params


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Chunk a document for RAG embedding")
    parser.add_argument("path", help="Document to chunk, or '-' for stdin")
    parser.add_argument(
        "--max-chunk-size",
        type=int,
        default=CHUNK_MAX_SIZE,
        help=f"Maximum chunk size in characters (default: {CHUNK_MAX_SIZE})",
    )
    parser.add_argument(
        "--overlap",
        type=int,
        default=CHUNK_OVERLAP_SIZE,
        help=f"Overlap for fixed-length chunks (default: {CHUNK_OVERLAP_SIZE})",
    )
    parser.add_argument("--json", action="store_true", help="Print chunks and stats as JSON")
    parser.add_argument(
        "--show-chunks",
        type=int,
        default=0,
        metavar="N",
        help="Print the first N chunks",
    )
    return parser.parse_args(argv)


def read_document(path: str) -> str:
    """Read document text from a file path or stdin."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def run(args: argparse.Namespace) -> None:
    params = validate_chunking_params(args.max_chunk_size, args.overlap)
    if not params.is_valid:
        raise ValidationError(params.error_message)

    text = read_document(args.path)
    result = chunk_text(text, args.max_chunk_size, args.overlap)
    stats = analyze_chunking_quality(result.chunks, result.method, result.fallback_reasons)

    if args.json:
        print(json.dumps({
            "method": result.method.value,
            "chunks": result.chunks,
            "stats": stats.to_dict(),
        }, indent=2))
        return

    print("=" * 50)
    print("Content-Aware Chunking")
    print("=" * 50)
    print(f"Method: {result.method.value}")
    print(f"Chunks: {stats.total_chunks}")
    print(f"Average chunk size: {stats.average_chunk_size} characters")
    print(f"Min / max chunk size: {stats.min_chunk_size} / {stats.max_chunk_size}")
    print(f"Sentence boundary preservation: {stats.sentence_boundary_preservation}%")
    if stats.fallback_reasons:
        print("Fallback reasons:")
        for reason in stats.fallback_reasons:
            print(f"  - {reason}")

    for index, chunk in enumerate(result.chunks[:args.show_chunks], start=1):
        print()
        print(f"--- Chunk {index} ({len(chunk)} chars) ---")
        print(chunk)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        run(args)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 1
    except (ValidationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
