"""
Ghostwriter Client Module

HTTP access to the remote analysis service.
"""

from .api_client import GhostwriterClient

__all__ = ["GhostwriterClient"]
