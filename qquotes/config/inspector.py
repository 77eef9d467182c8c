"""Utilities for inspecting and validating the user configuration file."""

from __future__ import annotations

from pathlib import Path
from types import UnionType
from typing import Any, Iterable, Union, get_args, get_origin

from pydantic import ValidationError
from pydantic.fields import FieldInfo

from .app import QuotesFileConfig
from .base import read_toml


class ConfigInspectionError(RuntimeError):
    """Raised when configuration inspection fails unexpectedly."""


def check_config(path: Path) -> tuple[dict[str, Any], int, QuotesFileConfig | None]:
    """Validate the configuration file and collect warnings.

    Returns a tuple of ``(result_dict, exit_code, config_instance_or_None)``.
    """

    try:
        raw = read_toml(path)
        config = QuotesFileConfig.model_validate(raw)
    except FileNotFoundError as exc:
        return _error_result(path, "missing_file", str(exc)), 2, None
    except ValidationError as exc:
        result = _error_result(path, "validation_error", "Configuration validation failed")
        result["error"]["details"] = [
            {
                "loc": _format_error_location(err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        return result, 3, None
    except PermissionError as exc:
        return _error_result(path, "permission_error", str(exc)), 2, None
    except OSError as exc:
        return _error_result(path, "read_error", str(exc)), 2, None
    except ValueError as exc:
        return _error_result(path, "invalid_format", str(exc)), 1, None
    except Exception as exc:  # pragma: no cover - unexpected failures
        raise ConfigInspectionError("Unexpected configuration inspection error") from exc

    result = {
        "status": "ok",
        "config_path": str(path),
        "warnings": _collect_warnings(raw),
    }
    return result, 0, config


def explain_config() -> list[dict[str, Any]]:
    """Describe recognised configuration keys for documentation purposes."""

    return [
        {
            "name": field_name,
            "type": _format_annotation(field.annotation),
            "required": field.is_required(),
            "default": _format_default(field),
            "description": field.description or "",
        }
        for field_name, field in QuotesFileConfig.model_fields.items()
    ]


def _error_result(path: Path, error_type: str, message: str) -> dict[str, Any]:
    return {
        "status": "error",
        "config_path": str(path),
        "error": {"type": error_type, "message": message},
    }


def _format_error_location(location: Iterable[Union[int, str]]) -> str:
    return ".".join(str(part) for part in location)


def _collect_warnings(raw: dict[str, Any]) -> list[str]:
    known = set(QuotesFileConfig.model_fields)
    return [f"Unrecognised key '{key}' is ignored" for key in raw if key not in known]


def _format_annotation(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is None:
        if isinstance(annotation, type):
            return annotation.__name__
        return repr(annotation).replace("typing.", "")

    args = get_args(annotation)
    if origin in {Union, UnionType}:
        non_none = [arg for arg in args if arg is not type(None)]  # noqa: E721
        if len(non_none) == 1 and len(args) == 2:
            return f"Optional[{_format_annotation(non_none[0])}]"
        joined = ", ".join(_format_annotation(arg) for arg in args)
        return f"Union[{joined}]"

    origin_name = getattr(origin, "__name__", repr(origin).replace("typing.", ""))
    if args:
        joined_args = ", ".join(_format_annotation(arg) for arg in args)
        return f"{origin_name}[{joined_args}]"
    return origin_name


def _format_default(field: FieldInfo) -> Any:
    if field.is_required():
        return None
    if isinstance(field.default, Path):
        return str(field.default)
    return field.default


__all__ = ["check_config", "explain_config", "ConfigInspectionError"]
