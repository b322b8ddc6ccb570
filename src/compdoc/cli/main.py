# Copyright 2026 compdoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the compdoc command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from compdoc.linker.build import DocOptions, build_registry, generate_doc, link
from compdoc.project.config import (
    CONFIG_FILE_NAME,
    ProjectConfig,
    ProjectConfigError,
    dump_project_config,
    load_project_config,
)
from compdoc.registry.diagnostics import Diagnostics
from compdoc.registry.loader import DescriptorError
from compdoc.render.html import RenderError

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the compdoc CLI."""
    parser = argparse.ArgumentParser(
        prog="compdoc",
        description="compdoc: cross-referenced documentation from component.yaml descriptors",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new compdoc project",
        description=f"Create a default {CONFIG_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the project in (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the component descriptors",
        description="Load and link all component descriptors and report problems.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the compdoc project (default: current directory)",
    )
    check_parser.add_argument("--verbose", "-v", action="store_true", help="Report every loaded descriptor")

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the component documentation",
        description="Render the cross-referenced component documentation as HTML and optionally PDF.",
    )
    generate_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the compdoc project (default: current directory)",
    )
    generate_parser.add_argument("--output", "-o", help="Output folder (overrides the project config)")
    generate_parser.add_argument("--name", "-n", help="Output file name without extension")
    generate_parser.add_argument("--template", "-t", help="Custom Jinja2 template file")
    generate_parser.add_argument("--pdf", action="store_true", help="Also build a PDF with prince")
    generate_parser.add_argument("--verbose", "-v", action="store_true", help="Report every loaded descriptor")

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the interactive component viewer",
        description="Launch a web-based UI for browsing the linked components.",
    )
    serve_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the compdoc project (default: current directory)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _existing_directory(raw: str) -> Path | None:
    """Resolve *raw*, printing an error and returning None if it does not exist."""
    directory = Path(raw).resolve()
    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None
    return directory


def _load_config(directory: Path) -> ProjectConfig:
    """Load the project config of *directory*, or the defaults if there is none.

    Raises:
        ProjectConfigError: If the config file exists but is invalid.
    """
    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        return ProjectConfig()
    return load_project_config(config_file)


def _discover_sources(directory: Path, config: ProjectConfig) -> list[Path]:
    """Return the descriptor files selected by the config, sorted, outside the output folder."""
    output_dir = (directory / config.output_folder).resolve()
    found: set[Path] = set()
    for pattern in config.sources:
        for path in directory.glob(pattern):
            if path.is_file() and output_dir not in path.resolve().parents:
                found.add(path)
    return sorted(found)


def _make_diagnostics(verbose: bool) -> Diagnostics:
    """Create diagnostics that print to the terminal."""

    def on_log(message: str) -> None:
        print(message)

    def on_verbose(filename: str, action: str, message: str) -> None:
        if verbose:
            print(chalk.blue(f"  {action}: {message} ({filename})"))

    def on_error(filename: str, action: str, message: str, fix: str) -> None:
        print(chalk.red(f"Error: {filename}: {action} {message}"), file=sys.stderr)
        print(f"  hint: {fix}", file=sys.stderr)

    return Diagnostics(on_log=on_log, on_verbose=on_verbose, on_error=on_error)


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = _existing_directory(args.directory)
    if directory is None:
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: project already exists at '{config_file}'.", file=sys.stderr)
        return 1

    content = "# compdoc project configuration\n" + dump_project_config(ProjectConfig())
    config_file.write_text(content, encoding="utf-8")
    print(f"Initialized compdoc project at '{config_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    from compdoc.validation.checks import validate

    directory = _existing_directory(args.directory)
    if directory is None:
        return 1

    try:
        config = _load_config(directory)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    sources = _discover_sources(directory, config)
    if not sources:
        print("No component descriptors found.")
        return 0

    print(f"Checking {len(sources)} component descriptor(s)...")
    diagnostics = _make_diagnostics(args.verbose)
    try:
        registry = build_registry(sources, diagnostics)
    except DescriptorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    link(registry)

    result = validate(registry)
    for warning in result.warnings:
        print(chalk.yellow(f"Warning: {warning.message}"))

    if diagnostics.has_errors:
        return 1

    if not result.has_warnings:
        print("No issues found.")
    return 0


def _cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    directory = _existing_directory(args.directory)
    if directory is None:
        return 1

    try:
        config = _load_config(directory)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        config.output_folder = args.output
    if args.name:
        config.output_name = args.name
    if args.template:
        config.template = args.template
    if args.pdf:
        config.build_pdf = True

    sources = _discover_sources(directory, config)
    if not sources:
        print("No component descriptors found.")
        return 0

    options = DocOptions(
        output_folder=directory / config.output_folder,
        output_name=config.output_name,
        template=(directory / config.template) if config.template else None,
        build_pdf=config.build_pdf,
    )
    try:
        generate_doc(sources, options, _make_diagnostics(args.verbose))
    except (DescriptorError, RenderError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    directory = _existing_directory(args.directory)
    if directory is None:
        return 1

    try:
        config = _load_config(directory)
    except ProjectConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        registry = build_registry(_discover_sources(directory, config), _make_diagnostics(False))
    except DescriptorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    from compdoc.webui.app import create_app

    print(f"Serving component view at http://{args.host}:{args.port}/")
    app = create_app(link(registry))
    app.run(host=args.host, port=args.port, debug=False)
    return 0
