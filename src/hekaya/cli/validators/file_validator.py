"""File path validators for CLI input."""

from __future__ import annotations

from pathlib import Path

from hekaya.cli.validators.base import Validator
from hekaya.exceptions import HekayaFileNotFoundError, ValidationError


class FileValidator(Validator[Path]):
    """Validator for script and config file paths."""

    def __init__(
        self,
        must_exist: bool = True,
        must_be_file: bool = True,
        extensions: list[str] | None = None,
    ) -> None:
        """Initialize file validator.

        Args:
            must_exist: Whether file must exist
            must_be_file: Whether path must be a file (not directory)
            extensions: Allowed file extensions (e.g., [".hekaya", ".fountain"])
        """
        self.must_exist = must_exist
        self.must_be_file = must_be_file
        self.extensions = extensions

    def validate(self, value: str | Path) -> Path:
        """Validate file path.

        Args:
            value: File path to validate

        Returns:
            Validated Path object

        Raises:
            HekayaFileNotFoundError: If the file must exist and does not
            ValidationError: If the path is not a file or has a wrong suffix
        """
        path = Path(value).expanduser()

        if self.must_exist and not path.exists():
            raise HekayaFileNotFoundError(
                message=f"File does not exist: {path}",
                hint="Check the path and try again",
                details={"path": str(path)},
            )

        if self.must_be_file and path.exists() and not path.is_file():
            raise ValidationError(
                message=f"Path is not a file: {path}",
                details={"path": str(path)},
            )

        if self.extensions and path.suffix.lower() not in self.extensions:
            raise ValidationError(
                message=f"Invalid file extension: {path.suffix}",
                hint=f"Expected one of: {', '.join(self.extensions)}",
                details={"path": str(path)},
            )

        return path


class ConfigFileValidator(FileValidator):
    """Validator specifically for configuration files."""

    def __init__(self) -> None:
        """Initialize config file validator."""
        super().__init__(
            must_exist=True,
            must_be_file=True,
            extensions=[".yaml", ".yml", ".json", ".toml"],
        )
