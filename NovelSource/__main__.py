import argparse
import json
import logging
import sys
from dataclasses import asdict

from .config import load_config
from .manager import NovelManager
from .models import ListFilters
from .source import FreeWebNovelSource

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="NovelSource", description="Browse and download novels from freewebnovel.com.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    popular = subparsers.add_parser("popular", help="List popular novels as JSON.")
    popular.add_argument("-p", "--page", type=int, default=1, help="Listing page number.")
    popular.add_argument("--sort", help="Sort key, e.g. 'most-popular' or 'latest-release-novels'.")
    popular.add_argument("--genre", help="List a genre instead of a sort order.")

    search = subparsers.add_parser("search", help="Search novels and print them as JSON.")
    search.add_argument("query", help="Search terms.")
    search.add_argument("-p", "--page", type=int, default=1, help="Results page number.")

    details = subparsers.add_parser("details", help="Print a novel's metadata as JSON.")
    details.add_argument("novel_id", help="Novel id, e.g. 'martial-god-asura'.")

    chapters = subparsers.add_parser("chapters", help="Print a novel's chapter list as JSON.")
    chapters.add_argument("novel_id", help="Novel id.")

    chapter = subparsers.add_parser("chapter", help="Print a chapter's HTML body.")
    chapter.add_argument("chapter_id", help="Chapter id in the form 'novelId/chapter-X'.")

    export = subparsers.add_parser("export", help="Download chapters and build an EPUB.")
    export.add_argument("novel_id", help="Novel id.")
    export.add_argument("-s", "--start", type=int, default=1, help="The starting chapter number.")
    export.add_argument("-e", "--end", type=int, help="The ending chapter number.")
    export.add_argument("-o", "--output", default="novels", help="Directory the EPUB is written to.")
    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    source = FreeWebNovelSource(load_config())

    if args.command == "popular":
        result = [asdict(n) for n in source.list_popular(args.page, ListFilters(sort=args.sort, genre=args.genre))]
    elif args.command == "search":
        result = [asdict(n) for n in source.search(args.query, args.page)]
    elif args.command == "details":
        detail = source.get_details(args.novel_id)
        result = asdict(detail) if detail else None
    elif args.command == "chapters":
        result = [asdict(c) for c in source.list_chapters(args.novel_id)]
    elif args.command == "chapter":
        content = source.get_chapter_content(args.chapter_id)
        print(content.html)
        return 0 if content.ok else 1
    else:
        epub_path = NovelManager(source, output_dir=args.output).process_novel(args.novel_id, args.start, args.end)
        if not epub_path:
            print("Failed to create the EPUB.", file=sys.stderr)
            return 1
        print(f"EPUB_PATH:{epub_path}")
        return 0

    if not result:
        print(f"'{args.command}' returned nothing.", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0

if __name__ == "__main__":
    sys.exit(main())
