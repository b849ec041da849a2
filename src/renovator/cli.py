import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler

from .constants import (
    DEFAULT_CONFIGFILE,
    DEFAULT_CONTAINER_ENGINE,
    DEFAULT_ENVFILE,
    DEFAULT_IMAGE,
    DEFAULT_SETTINGS_FILE,
)
from .core import Renovator, RenovatorError
from .models import RunConfig
from .services.config_loader import ConfigLoader


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if config.get(key) is not None:
        return config[key]
    return default


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_level=False,
            show_path=False,
        )
    ],
)


class RenovatorCommand(click.Command):
    """Command whose usage errors exit with status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


@click.command(
    cls=RenovatorCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_interspersed_args": False,
    },
)
@click.option(
    "--configfile",
    "-c",
    required=False,
    type=click.Path(),
    help=f"Renovate config file (.json or .js); created if missing (default: {DEFAULT_CONFIGFILE}).",
)
@click.option(
    "--engine",
    "-E",
    required=False,
    help=f"Container engine binary, e.g. podman (default: {DEFAULT_CONTAINER_ENGINE}).",
)
@click.option(
    "--envfile",
    "-e",
    required=False,
    type=click.Path(),
    help=f"Env file with tokens and credentials; created if missing (default: {DEFAULT_ENVFILE}).",
)
@click.option(
    "--image",
    "-i",
    required=False,
    help=f"Renovate container image (default: {DEFAULT_IMAGE}).",
)
@click.option(
    "--settings",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML settings file. Defaults to {DEFAULT_SETTINGS_FILE} if present.",
)
@click.option("--verbose", "-v", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
@click.argument("renovate_args", nargs=-1, type=click.UNPROCESSED)
def main(configfile, engine, envfile, image, settings, verbose, log_file, renovate_args):
    """Run containerized Renovate with a config file and an env file.

    Missing config or env files are created from minimal templates. Any
    arguments after the options are passed to Renovate unchanged.

    \b
    Examples:
      renovator -c /path/to/myrepos.json -e /path/to/myrepos.env
      renovator -E podman -c org.json myorg/myrepo
    """
    logger = logging.getLogger("renovator")

    try:
        config_loader = ConfigLoader()
        resolved_settings = settings
        if resolved_settings is None:
            default_settings_path = os.path.join(os.getcwd(), DEFAULT_SETTINGS_FILE)
            if os.path.exists(default_settings_path):
                resolved_settings = default_settings_path

        settings_values = config_loader.load(resolved_settings)
    except RenovatorError as exc:
        raise click.ClickException(str(exc)) from exc

    configfile = str(_resolve_option(configfile, settings_values, "configfile", default=DEFAULT_CONFIGFILE))
    envfile = str(_resolve_option(envfile, settings_values, "envfile", default=DEFAULT_ENVFILE))
    image = str(_resolve_option(image, settings_values, "image", default=DEFAULT_IMAGE))
    engine = str(_resolve_option(engine, settings_values, "engine", default=DEFAULT_CONTAINER_ENGINE))
    verbose = bool(_resolve_option(verbose, settings_values, "verbose", default=False))
    log_file = _resolve_option(log_file, settings_values, "log_file")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    run_config = RunConfig(
        config_file=configfile,
        env_file=envfile,
        image=image,
        engine=engine,
        extra_args=tuple(renovate_args),
    )

    renovator = Renovator(run_config=run_config)
    raise SystemExit(renovator.run())


if __name__ == "__main__":
    main()
