"""Mini README: Interactive interfaces for the statements visualizer.

Exports the FastAPI application factory that powers the browser page.
The command line launcher lives in ``main_visualizer.py`` at the
repository root.
"""

from .web_app import build_state_payload, create_application

__all__ = ["build_state_payload", "create_application"]
