"""
Command-line interface.

Run: meetcheck PATH [PATH ...]
"""

import logging
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from meetcheck.cli.output import ConsoleOutput
from meetcheck.cli.parser import parse_arguments
from meetcheck.config import ConfigError, check_config

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'CONFIG.toml'

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_NO_FILES = 2


def find_config_files(paths: List[str]) -> List[Path]:
    """
    Expand the given paths into CONFIG.toml files.

    Files are taken as given; directories are searched recursively.

    Args:
        paths: Files or directories

    Returns:
        Sorted, de-duplicated list of files
    """
    found = set()
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found.update(path.rglob(CONFIG_FILENAME))
        else:
            found.add(path)
    return sorted(found)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the checker.

    Returns:
        Process exit status
    """
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s:%(name)s:%(message)s'
    )

    files = find_config_files(args.paths)
    if not files:
        print(f"No {CONFIG_FILENAME} files found")
        return EXIT_NO_FILES

    use_tqdm = len(files) > 1
    output = ConsoleOutput(use_tqdm=use_tqdm)

    total_errors = 0
    total_warnings = 0
    for path in tqdm(files, desc='Checking', unit='file', disable=not use_tqdm):
        try:
            result = check_config(path)
        except ConfigError as e:
            logger.debug(f"Could not check {path}: {e}")
            output.fatal_message(path, e)
            total_errors += 1
            continue

        output.print_report(result.report)
        errors, warnings = result.report.count_messages()
        total_errors += errors
        total_warnings += warnings

    output.print_summary(len(files), total_errors, total_warnings)
    return EXIT_ERRORS if total_errors else EXIT_OK
