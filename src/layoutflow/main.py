"""Main entry point for layoutflow."""

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_VIEWPORT, VIEWPORTS, get_viewport, parse_size
from .core.element import Element
from .core.rect import Viewport
from .layout import LayoutLoader, calculate_runtime_positions
from .render import render_preview
from .samples import SAMPLES


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="LayoutFlow - resolve anchored layouts to absolute geometry",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="Layout YAML file (default: the sample selected with --sample)",
    )
    parser.add_argument(
        "--sample",
        choices=list(SAMPLES.keys()),
        default="starter",
        help="Sample layout used when no file is given (default: starter)",
    )
    parser.add_argument(
        "--viewport",
        choices=list(VIEWPORTS.keys()),
        help="Viewport preset (default: the file's viewport, else desktop)",
    )
    parser.add_argument(
        "--size",
        metavar="WxH",
        help="Custom viewport size, overrides --viewport",
    )
    parser.add_argument(
        "-r", "--render",
        metavar="PATH",
        help="Render a flat preview of the resolved layout to an image file",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help="Scale factor for --render (default: 1.0)",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the normalized YAML of the layout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    if args.size:
        try:
            args.size = parse_size(args.size)
        except ValueError as e:
            parser.error(str(e))
    if args.scale <= 0:
        parser.error("--scale must be positive")
    return args


def _select_viewport(args: argparse.Namespace, saved: Viewport | None) -> Viewport:
    if args.size:
        return args.size
    if args.viewport:
        return get_viewport(args.viewport)
    return saved or DEFAULT_VIEWPORT


def format_tree(elements: Sequence[Element]) -> list[str]:
    """Indented outline of the derived hierarchy, children under parents."""
    children: dict[str | None, list[Element]] = {}
    ids = {element.id for element in elements}
    for element in elements:
        parent_id = element.parent_id if element.parent_id in ids else None
        children.setdefault(parent_id, []).append(element)

    lines = []
    visited: set[str] = set()
    # Roots first; elements caught in a parent cycle are listed at top level
    for top in [*children.get(None, []), *elements]:
        stack = [(top, 0)]
        while stack:
            element, depth = stack.pop()
            if element.id in visited:
                continue
            visited.add(element.id)
            rt = element.runtime
            geometry = f"({rt.x:g}, {rt.y:g}, {rt.width:g}x{rt.height:g})" if rt else "(unresolved)"
            lines.append(f"{'  ' * depth}- {element.name or element.id} [{element.id}] {geometry}")
            for child in reversed(children.get(element.id, [])):
                stack.append((child, depth + 1))
    return lines


def main(argv: Sequence[str] | None = None) -> None:
    """Run the layoutflow command line tool."""
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    loader = LayoutLoader()
    saved_viewport = None
    if args.file:
        document = loader.load_document(Path(args.file))
        elements = document.elements
        saved_viewport = document.viewport
    else:
        elements = SAMPLES[args.sample]()

    viewport = _select_viewport(args, saved_viewport)
    resolved = calculate_runtime_positions(elements, viewport)

    print("LayoutFlow")
    print("=" * 40)
    print(f"Viewport: {viewport.name} ({viewport.width:g}x{viewport.height:g})")
    print(f"Layout contains {len(resolved)} elements:")
    for line in format_tree(resolved):
        print(line)

    if args.dump:
        print()
        print(loader.dump(resolved, viewport), end="")

    if args.render:
        output_path = Path(args.render)
        image = render_preview(resolved, viewport, output_path, scale=args.scale)
        print(f"\nSaved preview to {output_path} ({image.width}x{image.height})")


if __name__ == "__main__":
    main()
