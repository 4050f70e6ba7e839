"""Mini README: Core package initializer for the Finstatements visualizer.

This module exposes convenience imports that allow other parts of the
application to reach the logging helpers and the session controller
without needing to know the exact module structure. Heavier web
dependencies stay behind ``finstatements.interface``.
"""

from .logging_utils import get_logger
from .session import VisualizerSession

__all__ = ["VisualizerSession", "get_logger"]
