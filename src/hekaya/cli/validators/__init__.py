"""Input validators for CLI commands."""

from hekaya.cli.validators.base import Validator
from hekaya.cli.validators.file_validator import ConfigFileValidator, FileValidator

__all__ = ["ConfigFileValidator", "FileValidator", "Validator"]
