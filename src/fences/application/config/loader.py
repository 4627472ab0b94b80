"""Loading fence configuration from JSON files and dictionaries.

File system problems, malformed JSON and schema violations are all reported
as ``ConfigError`` with an ``error_type`` naming the category, so callers
(CLI and REST API) can map them to exit codes or status codes.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fences.application.config.schema import FenceConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded or validated.

    Attributes:
        message: The primary error message.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: Configuration file path, when loaded from a file.
        details: Per-problem details (JSON path, message, offending value).
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
    """Format a pydantic location tuple as a JSON path.

    Examples:
        >>> _format_json_path(("shape", "gate", "position"))
        'shape.gate.position'
        >>> _format_json_path(("output", "formats", 1))
        'output.formats[1]'
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


def _drop_union_tags(loc: tuple[str | int, ...]) -> tuple[str | int, ...]:
    # Discriminated unions insert the tag value ("inline", ...) into the location
    tags = {"inline", "l-shape", "rectangle"}
    return tuple(
        segment
        for i, segment in enumerate(loc)
        if not (i > 0 and loc[i - 1] == "shape" and segment in tags)
    )


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(_drop_union_tags(err["loc"])),
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


def _validate(data: Any, path: Path | None = None) -> FenceConfiguration:
    try:
        return FenceConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> FenceConfiguration:
    """Load and validate a fence configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        A validated FenceConfiguration.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    config = _validate(data, path)
    logger.debug(f"Loaded {config.shape.shape} configuration from {path}")
    return config


def load_config_from_dict(data: dict[str, Any]) -> FenceConfiguration:
    """Validate a configuration supplied as a dictionary (e.g. an API body).

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)


__all__ = ["ConfigError", "load_config", "load_config_from_dict"]
