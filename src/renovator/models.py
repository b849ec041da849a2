"""Shared domain models for Renovator."""

from dataclasses import dataclass, field
from typing import Tuple

from .constants import (
    DEFAULT_CONFIGFILE,
    DEFAULT_CONTAINER_ENGINE,
    DEFAULT_ENVFILE,
    DEFAULT_IMAGE,
)


@dataclass(frozen=True)
class RunConfig:
    """Resolved options for a single container run."""

    config_file: str = DEFAULT_CONFIGFILE
    env_file: str = DEFAULT_ENVFILE
    image: str = DEFAULT_IMAGE
    engine: str = DEFAULT_CONTAINER_ENGINE
    extra_args: Tuple[str, ...] = field(default_factory=tuple)
