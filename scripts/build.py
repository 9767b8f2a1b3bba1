"""Build the static site from the command line.

Usage:
    python -m scripts.build                # Writes ./public
    python -m scripts.build --out dist     # Custom output directory
    python -m scripts.build --drafts       # Publish draft posts too
"""

import argparse
import logging
import sys
from pathlib import Path

from habari.services.builder import build_site

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build the static site")
    parser.add_argument("--out", type=Path, default=Path("public"))
    parser.add_argument("--drafts", action="store_true", help="include draft posts")
    args = parser.parse_args(argv)

    print(f"Building site into {args.out}...")
    stats = build_site(args.out, include_drafts=True if args.drafts else None)

    print("\nBuild complete:")
    print(f"  Posts:  {stats.posts}")
    print(f"  Pages:  {stats.pages}")
    print(f"  Tags:   {stats.tags}")
    print(f"  Assets: {'copied' if stats.assets_copied else 'none'}")

    if stats.posts == 0:
        print("WARNING: no posts were published")

    return 0


if __name__ == "__main__":
    sys.exit(main())
