"""
Ghostwriter - Writing Assistant Client

Client-side orchestration for the Ghostwriter writing assistant: upload or type a
story, ask the analysis service for continuation directions, and preview any of
them on demand.

Version: 1.0.0
"""

from pathlib import Path

from .core.constants import PROJECT_NAME, VERSION

__version__ = VERSION
__author__ = "Ghostwriter Team"
__project__ = PROJECT_NAME

# Package root directory
PACKAGE_ROOT = Path(__file__).parent

from .core.config import ClientSettings, load_config
from .client.api_client import GhostwriterClient
from .flows.controller import GhostwriterController
from .ui.view_model import ViewModel

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__project__",
    # Paths
    "PACKAGE_ROOT",
    # Public API
    "ClientSettings",
    "load_config",
    "GhostwriterClient",
    "GhostwriterController",
    "ViewModel",
]
