"""Command-line interface for projectgallery."""

import argparse
import sys
from pathlib import Path

from .controller import GalleryController
from .filtering import DEFAULT_TAG_ORDER
from .gallery import generate_gallery
from .loader import load_records
from .models import FilterState
from .utils import parse_tags


def parse_tag_order(value: str) -> tuple[str, ...]:
    """Parse a comma-separated tag priority list for argparse."""
    tags = parse_tags(value)
    if not tags:
        raise argparse.ArgumentTypeError("tag order must name at least one tag")
    return tuple(tags)


def require_data(path: Path) -> None:
    if not path.exists():
        print(f"Error: Data file not found: {path}", file=sys.stderr)
        sys.exit(1)


def selected_filters(args) -> FilterState:
    filters = FilterState()
    for tag in args.tag or []:
        filters.add(tag)
    return filters


def load_controller(args) -> GalleryController:
    """Load records for the list/tags commands, exiting on a fallback message."""
    require_data(args.data)
    result = load_records(args.data, log=lambda msg: None)
    if not result.ok:
        print(result.message)
        sys.exit(1)
    return GalleryController(result.records, args.tag_order, selected_filters(args))


def cmd_gallery(args):
    """Generate gallery.html from the project document."""
    require_data(args.data)
    generate_gallery(
        args.data,
        args.output_dir,
        tag_order=args.tag_order,
        filters=selected_filters(args),
        title=args.title,
    )
    print("Done!")


def cmd_list(args):
    """Print visible projects in display order with the counter line."""
    controller = load_controller(args)
    for card in controller.cards:
        details = [card.year] if card.year else []
        if card.tags:
            details.append(", ".join(card.tags))
        suffix = f"  ({'; '.join(details)})" if details else ""
        print(f"  {card.name}{suffix}")
    print(controller.counter_text)


def cmd_tags(args):
    """Print the tag vocabulary offered by the filter dropdown."""
    controller = load_controller(args)
    for tag in controller.open_dropdown():
        marker = " *" if controller.dropdown.is_selected(tag) else ""
        print(f"  {tag}{marker}")


def cmd_serve(args):
    """Start web server for previewing the gallery."""
    from .server import run_server

    require_data(args.data)
    if not args.output_dir.exists():
        print(f"Error: Output directory not found: {args.output_dir}", file=sys.stderr)
        sys.exit(1)
    run_server(
        args.output_dir,
        args.data,
        host=args.host,
        port=args.port,
        regenerate=args.regenerate,
        tag_order=args.tag_order,
    )


def add_common_arguments(parser: argparse.ArgumentParser, filters: bool = True) -> None:
    parser.add_argument(
        "--data", type=Path, default=Path("data.json"), help="Project document (default: data.json)"
    )
    parser.add_argument(
        "--tag-order",
        type=parse_tag_order,
        default=DEFAULT_TAG_ORDER,
        help=f"Comma-separated tags offered for filtering, in order (default: {','.join(DEFAULT_TAG_ORDER)})",
    )
    if filters:
        parser.add_argument(
            "--tag", action="append", help="Preselect a tag filter (repeatable)"
        )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Project gallery: sort, filter and render project records as HTML"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # gallery subcommand
    p_gallery = subparsers.add_parser("gallery", help="Generate gallery.html")
    add_common_arguments(p_gallery)
    p_gallery.add_argument(
        "--output-dir", type=Path, default=Path("."), help="Output directory (default: .)"
    )
    p_gallery.add_argument("--title", default="Projects", help="Page title (default: Projects)")
    p_gallery.set_defaults(func=cmd_gallery)

    # list subcommand
    p_list = subparsers.add_parser("list", help="List visible projects in display order")
    add_common_arguments(p_list)
    p_list.set_defaults(func=cmd_list)

    # tags subcommand
    p_tags = subparsers.add_parser("tags", help="List tags available for filtering")
    add_common_arguments(p_tags)
    p_tags.set_defaults(func=cmd_tags)

    # serve subcommand
    p_serve = subparsers.add_parser("serve", help="Start web server for previewing the gallery")
    add_common_arguments(p_serve, filters=False)
    p_serve.add_argument(
        "--output-dir", type=Path, default=Path("."), help="Site directory (default: .)"
    )
    p_serve.add_argument("--host", default="127.0.0.1", help="Host (default: 127.0.0.1)")
    p_serve.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    p_serve.add_argument(
        "--regenerate", action="store_true", help="Regenerate gallery HTML on each page load"
    )
    p_serve.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
