"""Container engine services for Renovator."""

import os
from typing import Callable, List

from renovator.constants import (
    CONFIG_FILE_ENV_VAR,
    FALLBACK_CONFIG_EXTENSION,
    INTERNAL_CONFIG_DIR,
    INTERNAL_CONFIG_STEM,
)
from renovator.models import RunConfig


class ContainerRuntimeService:
    """Builds the container engine invocation for a Renovate run."""

    def __init__(self, logger):
        self.logger = logger

    def config_extension(self, config_path: str) -> str:
        name = os.path.basename(config_path)
        if "." not in name:
            self.logger.warning(
                "Config file %s has no extension; assuming %s.",
                config_path,
                FALLBACK_CONFIG_EXTENSION,
            )
            return FALLBACK_CONFIG_EXTENSION
        return name.rsplit(".", 1)[1]

    def internal_config_path(self, config_path: str) -> str:
        extension = self.config_extension(config_path)
        self.logger.debug("Config file extension: %s", extension)
        return f"{INTERNAL_CONFIG_DIR}/{INTERNAL_CONFIG_STEM}.{extension}"

    def build_run_command(
        self,
        run_config: RunConfig,
        config_path: str,
        env_path: str,
        internal_config_path: str,
        tty: bool = False,
    ) -> List[str]:
        cmd = [run_config.engine, "run", "--rm", "-i"]
        if tty:
            cmd.append("-t")
        cmd += [
            "-v",
            f"{config_path}:{internal_config_path}",
            "-e",
            f"{CONFIG_FILE_ENV_VAR}={internal_config_path}",
            f"--env-file={env_path}",
            run_config.image,
        ]
        cmd.extend(run_config.extra_args)
        return cmd

    def path_rewriter(self, internal_config_path: str, config_path: str) -> Callable[[str], str]:
        """Map the in-container config path back to the host path in output lines."""

        def rewrite(line: str) -> str:
            return line.replace(internal_config_path, config_path)

        return rewrite
