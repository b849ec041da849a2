"""Filesystem helpers for Renovator."""

import logging
import os

from rich.console import Console

from renovator.constants import CONFIG_TEMPLATE, ENV_TEMPLATE
from renovator.errors import RenovatorError
from renovator.errors_catalog import actionable_error


class FileSystemService:
    """Creates the config and env files a run needs, when they are missing."""

    def __init__(self, logger: logging.Logger, console: Console):
        self.logger = logger
        self.console = console

    def ensure_config_file(self, path: str) -> str:
        """Return the real path of the Renovate config file, creating it from a template.

        Renovate reads either JSON or JavaScript configuration; the generated
        file is a minimal JSON document whose values do not conflict with
        anything supplied through the env file.
        """
        return self._ensure_file(path, CONFIG_TEMPLATE, label="config file", option="--configfile")

    def ensure_env_file(self, path: str) -> str:
        """Return the real path of the env file, creating it from a template.

        Every line of the template is commented out, so a freshly generated
        env file adds nothing to the container environment.
        """
        return self._ensure_file(path, ENV_TEMPLATE, label="env file", option="--envfile")

    def _ensure_file(self, path: str, template: str, label: str, option: str) -> str:
        if not path:
            raise RenovatorError(actionable_error("missing_path", label=label, option=option))

        path = os.path.expanduser(path)
        if os.path.isdir(path):
            raise RenovatorError(
                actionable_error("path_is_directory", label=label.capitalize(), path=path, option=option)
            )

        try:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)

            if not os.path.exists(path):
                with open(path, "w", encoding="utf-8", newline="\n") as file_obj:
                    file_obj.write(template)
                self.console.print(f"[yellow]Created {label} from template: {path}[/yellow]")
                self.logger.info("Created %s from template: %s", label, path)
        except OSError as exc:
            raise RenovatorError(
                actionable_error("path_not_writable", label=label, path=path, reason=str(exc))
            ) from exc

        resolved = os.path.realpath(path)
        self.logger.debug("Using %s: %s", label, resolved)
        return resolved
