"""
Renovator - run a containerized Renovate with per-project config and env files
"""

__version__ = "0.1.0"

from .core import Renovator, RenovatorError
from .models import RunConfig

__all__ = ["Renovator", "RenovatorError", "RunConfig"]
