"""Project file loader with error reporting.

Loads JSON project files and validates them against the
LedWallConfiguration schema. File system errors, JSON syntax errors and
schema violations are all raised as ConfigError with a category and
per-field details.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ledwall.application.config.schemas import LedWallConfiguration


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the configuration file (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("rigging", "motor_count"))
        'rigging.motor_count'
        >>> _format_json_path(("catalog", "modules", 0, "brand"))
        'catalog.modules[0].brand'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, dict):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_config(path: Path) -> LedWallConfiguration:
    """Load and validate a project configuration from a JSON file.

    Args:
        path: Path to the JSON project file

    Returns:
        A validated LedWallConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "permission_denied": File cannot be read
            - "file_read_error": Other OS error while reading
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in config file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[
                {
                    "line": e.lineno,
                    "column": e.colno,
                    "message": e.msg,
                }
            ],
        )

    try:
        return LedWallConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config_from_dict(data: dict[str, Any]) -> LedWallConfiguration:
    """Load and validate a project configuration from a dictionary.

    Used for API requests and programmatic configuration.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return LedWallConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )
