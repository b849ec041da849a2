"""Actionable error catalog for Renovator."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "missing_path": {
        "what": "No {label} was passed.",
        "next": "Provide a path with `{option}` or in the settings file.",
    },
    "path_is_directory": {
        "what": "{label} path is a directory: {path}",
        "next": "Point `{option}` at a file, or remove the directory.",
    },
    "path_not_writable": {
        "what": "Could not create {label} at {path}: {reason}",
        "next": "Check permissions on the parent directory or choose another path.",
    },
    "engine_not_found": {
        "what": "Container engine not found: {engine}",
        "next": "Install it, or select another engine with `--engine` (e.g. `podman`).",
    },
    "engine_failed": {
        "what": "Could not start container engine {engine}: {reason}",
        "next": "Check that `{engine}` is executable and working.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
