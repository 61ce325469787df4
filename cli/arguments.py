import argparse
import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = ('.ts', '.tsx')

def validate_source_name(name: str) -> str:
    """
    Validate the path of the class under test.

    Args:
        name: Path to the TypeScript file

    Returns:
        Validated path

    Raises:
        ValueError: If the path does not name a TypeScript file
    """
    if not name or not name.lower().endswith(SOURCE_EXTENSIONS):
        raise ValueError(f"--name must point to a .ts or .tsx file, got: {name}")
    if name.lower().endswith('.spec.ts'):
        raise ValueError(f"--name must point to the class under test, not to a spec: {name}")
    return name

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate a spec file for an Angular class from its source and template',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    # Required arguments
    parser.add_argument(
        '--name',
        type=str,
        required=True,
        help='Path to the class under test (e.g. ./example/example.component.ts)'
    )

    # Analysis arguments
    parser.add_argument(
        '--import-resolution',
        type=str,
        choices=['text', 'tree'],
        default='text',
        help='How dependency import paths are found: text matches import lines, tree matches import bindings'
    )
    parser.add_argument(
        '--spy-import',
        type=str,
        default='autoSpy',
        help='Module the autoSpy helper is imported from in the generated spec'
    )

    # Output arguments
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        '--dry-run',
        action='store_true',
        default=False,
        help='Print the generated spec instead of writing it'
    )
    output_group.add_argument(
        '--json',
        action='store_true',
        default=False,
        help='Print the extracted class and widget facts as JSON instead of generating a spec'
    )
    parser.add_argument(
        '--force',
        action='store_true',
        default=False,
        help='Overwrite the spec file if it already exists'
    )

    # Logging arguments
    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='INFO',
        help='Set the logging level'
    )
    parser.add_argument(
        '--log-dir',
        type=str,
        default=None,
        help='Directory for dated log files (console only when omitted)'
    )
    return parser

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Arguments to parse, sys.argv[1:] when None

    Returns:
        Parsed arguments namespace
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.name = validate_source_name(args.name)
    except ValueError as e:
        parser.error(str(e))

    if args.log_dir:
        args.log_dir = Path(args.log_dir)

    return args
