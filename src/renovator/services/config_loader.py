"""Settings loader for Renovator."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from renovator.errors import RenovatorError


class ConfigLoader:
    """Loads YAML settings files for CLI defaults."""

    SUPPORTED_KEYS = {
        "configfile",
        "envfile",
        "image",
        "engine",
        "verbose",
        "log_file",
    }

    def load(self, settings_path: Optional[str]) -> Dict[str, Any]:
        if not settings_path:
            return {}

        path = Path(settings_path)
        if not path.exists():
            raise RenovatorError(f"Settings file not found: {settings_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise RenovatorError(f"Invalid settings file '{settings_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise RenovatorError("Settings file must contain a YAML mapping at the root.")

        unknown = sorted(str(key) for key in set(parsed.keys()) - self.SUPPORTED_KEYS)
        if unknown:
            unknown_list = ", ".join(unknown)
            raise RenovatorError(f"Unknown settings keys: {unknown_list}")

        return parsed
