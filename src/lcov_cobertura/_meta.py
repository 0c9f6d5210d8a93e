from __future__ import annotations

import logging
from importlib.metadata import version

__version__ = version("lcov-cobertura")

logger = logging.getLogger("lcov_cobertura")

__all__ = ["__version__", "logger"]
