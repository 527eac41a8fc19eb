"""
Command-line argument parsing module.

This module handles parsing of CLI arguments.
"""

import argparse
from typing import List, Optional


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments for the checker.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog='meetcheck',
        description='Check CONFIG.toml files of a meet archive',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  meetcheck meet-data/uspa/CONFIG.toml   # Check a single file
  meetcheck meet-data                    # Check every CONFIG.toml below a directory
        """
    )

    parser.add_argument(
        'paths',
        nargs='+',
        metavar='PATH',
        help='CONFIG.toml file, or directory searched recursively for CONFIG.toml files'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)
