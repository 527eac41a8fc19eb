"""
Configuration loader module.

Responsible for reading a CONFIG.toml file and parsing it into a generic tree
of tables, arrays and scalar values.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from meetcheck.config.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Loads CONFIG.toml files.

    Only I/O failures and TOML syntax errors are reported here; everything
    about the meaning of the file is left to the validator.
    """

    def __init__(self, encoding: str = 'utf-8'):
        """
        Initialize the configuration loader.

        Args:
            encoding: Text encoding of configuration files
        """
        self.encoding = encoding

    def load(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load and parse a TOML file.

        Args:
            file_path: Path to the TOML file

        Returns:
            Parsed TOML content as a dictionary

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        file_path = Path(file_path)
        try:
            with open(file_path, 'r', encoding=self.encoding) as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Error reading configuration file {file_path}: {e}") from e

        root = self.loads(text, source=str(file_path))
        logger.debug(f"Loaded {file_path} with {len(root)} top-level keys")
        return root

    def loads(self, text: str, source: str = '<string>') -> Dict[str, Any]:
        """
        Parse TOML text.

        Args:
            text: TOML document
            source: Name used in error messages

        Returns:
            Parsed TOML content as a dictionary

        Raises:
            ConfigError: If the text is not valid TOML
        """
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Error parsing TOML file {source}: {e}") from e
