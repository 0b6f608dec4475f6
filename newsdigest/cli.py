#!/usr/bin/env python3
"""
Command line entry point: build a newsletter digest and print it.

Examples:
    newsdigest fetch_superhuman_newsletters --count 7
    newsdigest the_code --count 3 --output the_code.md
    newsdigest superhuman --count 10 --list-only
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .ingestion.errors import FetchError
from .pipeline import DigestPipeline
from .tools import TOOLS, get_tool, run_tool, validate_count
from .utils.config import load_config, setup_logging
from .utils.print import print_references


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fetch recent newsletter posts as a single markdown digest"
    )

    parser.add_argument(
        'tool',
        type=str,
        help=(f"Tool name or site key ({', '.join(TOOLS)}, "
              "superhuman, the_code)")
    )

    parser.add_argument(
        '--count', '-n',
        type=int,
        default=None,
        help='Number of recent posts to fetch (default: the site default)'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=None,
        help='Write the digest to this file instead of stdout'
    )

    parser.add_argument(
        '--list-only',
        action='store_true',
        help='Only print the discovered post references'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to an alternative config.yaml'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def list_references(site, count, pipeline: DigestPipeline) -> int:
    """Print the references the digest would be built from."""
    try:
        count = validate_count(count, site)
        references = pipeline.collect(count)
    except ValidationError as e:
        sys.stdout.write(f"Error: invalid count {count!r}: {e.errors()[0]['msg']}\n")
        return 1
    except FetchError as e:
        logger.error(f"Listing fetch failed for {site.name}: {e}")
        sys.stdout.write(f"Error: {e}\n")
        return 1

    print_references(references, title=site.name)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the digest command."""
    args = build_parser().parse_args(argv)

    config = load_config(args.config, configure_logging=False)
    setup_logging(args.verbose or bool(config.get("debug")))

    try:
        spec = get_tool(args.tool)
    except ValueError as e:
        logger.error(str(e))
        return 2

    count = args.count if args.count is not None else spec.site.default_count

    with DigestPipeline.from_config(spec.site, config) as pipeline:
        if args.list_only:
            return list_references(spec.site, count, pipeline)
        result = run_tool(spec.site, count, pipeline=pipeline)

    if args.output:
        Path(args.output).write_text(result.text, encoding="utf-8")
        logger.info(f"Digest written to: {args.output}")
    else:
        sys.stdout.write(result.text + "\n")

    if result.is_error:
        logger.error(f"{spec.name} failed")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
