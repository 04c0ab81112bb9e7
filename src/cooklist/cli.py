"""Command-line interface for cooklist.

Subcommands:

    cook recipe read FILE            print one recipe
    cook shopping-list FILES|DIR     print the combined shopping list
    cook server                      serve recipes over HTTP
    cook version
"""

import argparse
import sys
from collections.abc import Sequence
from typing import BinaryIO

from cooklist import __version__
from cooklist.config import get_settings
from cooklist.errors import CookError
from cooklist.logging_config import LoggingContext, configure_logging, get_logger
from cooklist.recipe.adapter import load_recipe
from cooklist.render import (
    OUTPUT_FORMATS,
    format_for_path,
    render,
    write_output,
    write_output_file,
)
from cooklist.shopping.shopping_list import ShoppingListGenerator

logger = get_logger(__name__)


# ------------------------------------------------------------------
# Handlers
# ------------------------------------------------------------------


def _output_format(args: argparse.Namespace) -> str:
    """--output-format wins; otherwise the --output extension decides."""
    if args.output_format:
        return args.output_format
    if args.output:
        return format_for_path(args.output)
    return "text"


def _emit(payload: bytes, args: argparse.Namespace, stdout: BinaryIO) -> None:
    if args.output:
        write_output_file(payload, args.output)
    else:
        write_output(payload, stdout)


def _handle_recipe_read(args: argparse.Namespace, stdout: BinaryIO) -> int:
    recipe = load_recipe(args.file)
    payload = render(
        recipe,
        _output_format(args),
        args.only_ingredients,
        width=get_settings().line_width,
        pretty=args.pretty,
    )
    _emit(payload, args, stdout)
    return 0


def _handle_shopping_list(args: argparse.Namespace, stdout: BinaryIO) -> int:
    settings = get_settings()
    generator = ShoppingListGenerator.from_config_files(
        args.aisle,
        args.inflection,
        suffix=settings.recipe_suffix,
        workers=settings.load_workers,
    )
    shopping_list = generator.generate(args.files_or_directory)
    payload = render(
        shopping_list,
        _output_format(args),
        args.only_ingredients,
        width=settings.line_width,
        pretty=args.pretty,
        plain=args.plain,
    )
    _emit(payload, args, stdout)
    return 0


def _handle_server(args: argparse.Namespace, stdout: BinaryIO) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cooklist.main:app",
        host=args.host or settings.server_host,
        port=args.port or settings.server_port,
    )
    return 0


def _handle_version(args: argparse.Namespace, stdout: BinaryIO) -> int:
    write_output(f"cooklist {__version__}\n".encode(), stdout)
    return 0


# ------------------------------------------------------------------
# Parser
# ------------------------------------------------------------------


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output-format",
        choices=OUTPUT_FORMATS,
        help="Set the output format (default: from --output, else text)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write to this file instead of stdout; .json, .yaml and .txt set the format",
    )
    parser.add_argument(
        "--only-ingredients",
        action="store_true",
        help="Print only the ingredients section of the output",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cook",
        description="Read Cooklang recipes and build shopping lists",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    recipe = subparsers.add_parser("recipe", help="Manage recipes and recipe files")
    recipe_sub = recipe.add_subparsers(dest="recipe_command", required=True)
    read = recipe_sub.add_parser("read", help="Parse and print a recipe file")
    read.add_argument("file", help="A .cook file")
    _add_output_options(read)
    read.set_defaults(handler=_handle_recipe_read)

    shopping = subparsers.add_parser("shopping-list", help="Create a shopping list")
    shopping.add_argument(
        "files_or_directory",
        nargs="+",
        help="Recipe files, or a single directory of .cook files",
    )
    shopping.add_argument("--aisle", help="Aisle config file (default: config/aisle.conf)")
    shopping.add_argument(
        "--inflection", help="Inflection config file (default: config/inflection.conf)"
    )
    shopping.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="List ingredients without grouping them into aisles",
    )
    _add_output_options(shopping)
    shopping.set_defaults(handler=_handle_shopping_list)

    server = subparsers.add_parser("server", help="Serve recipes over HTTP")
    server.add_argument("--host", help="Address to bind to")
    server.add_argument("-p", "--port", type=int, help="Port to listen on")
    server.set_defaults(handler=_handle_server)

    version = subparsers.add_parser("version", help="Print the version")
    version.set_defaults(handler=_handle_version)

    return parser


def main(argv: Sequence[str] | None = None, stdout: BinaryIO | None = None) -> int:
    """
    Run the CLI.

    Returns:
        0 on success, otherwise the exit code of the error that stopped the
        command (see cooklist.errors).
    """
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(
        settings.log_level,
        json_format=settings.log_format == "json",
        log_file=settings.log_file,
    )

    out = stdout if stdout is not None else sys.stdout.buffer
    with LoggingContext(command=args.command):
        try:
            return args.handler(args, out)
        except CookError as e:
            logger.debug(f"Command failed: {e!r}")
            print(f"error: {e}", file=sys.stderr)
            return e.exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
