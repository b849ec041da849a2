import logging
import sys

from rich.console import Console

from .errors import RenovatorError
from .models import RunConfig
from .services.command_runner import CommandRunner
from .services.container_runtime import ContainerRuntimeService
from .services.filesystem import FileSystemService

console = Console(stderr=True)
logger = logging.getLogger("renovator")


class Renovator:
    def __init__(self, run_config: RunConfig):
        self.run_config = run_config

        self.filesystem_service = FileSystemService(logger=logger, console=console)
        self.container_runtime_service = ContainerRuntimeService(logger=logger)
        self.command_runner = CommandRunner(logger=logger)

    def _stdin_is_tty(self) -> bool:
        stdin = sys.stdin
        if stdin is None:
            return False
        try:
            return stdin.isatty()
        except ValueError:
            return False

    def run(self) -> int:
        try:
            logger.debug("Starting Renovator with %s", self.run_config)

            config_path = self.filesystem_service.ensure_config_file(self.run_config.config_file)
            env_path = self.filesystem_service.ensure_env_file(self.run_config.env_file)

            internal_config_path = self.container_runtime_service.internal_config_path(config_path)
            cmd = self.container_runtime_service.build_run_command(
                self.run_config,
                config_path=config_path,
                env_path=env_path,
                internal_config_path=internal_config_path,
                tty=self._stdin_is_tty(),
            )
            rewrite = self.container_runtime_service.path_rewriter(internal_config_path, config_path)

            returncode = self.command_runner.stream(cmd, line_filter=rewrite)
            if returncode != 0:
                console.print(
                    f"[bold red]Error:[/bold red] Container run failed with exit status {returncode}"
                )
                logger.error("Container run failed with exit status %s", returncode)
            return returncode

        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return 1
        except RenovatorError as exc:
            console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error(str(exc))
            return 1
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {exc}")
            logger.exception("Unexpected error")
            return 1
