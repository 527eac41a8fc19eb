"""
Configuration checker module.

Main entry point to CONFIG.toml checking.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from meetcheck.config.core.accessor import Config
from meetcheck.config.core.loader import ConfigLoader
from meetcheck.config.core.validator import ConfigValidator
from meetcheck.report import Report

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    """Outcome of checking one CONFIG.toml."""
    report: Report
    config: Optional[Config]  # None if no rules can be safely applied


def check_config(path: Union[str, Path], loader: Optional[ConfigLoader] = None) -> CheckResult:
    """
    Check a CONFIG.toml file.

    Problems with the contents are recorded in the returned report; only a
    file that cannot be read or parsed at all raises.

    Args:
        path: Path to the CONFIG.toml
        loader: Optional loader, defaults to a UTF-8 ConfigLoader

    Returns:
        CheckResult with the report and the config, if one could be built

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML
    """
    report = Report(path)
    loader = loader or ConfigLoader()

    root = loader.load(report.path)
    config = ConfigValidator().validate(root, report)

    errors, warnings = report.count_messages()
    logger.debug(f"Checked {report.path}: {errors} errors, {warnings} warnings")
    return CheckResult(report=report, config=config)
