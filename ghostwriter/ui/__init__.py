"""
Ghostwriter UI Module

Headless view state: view model, preview modal and toast notifications.
"""

from .notification_manager import NotificationManager, Notification, NotificationType
from .preview_modal import PreviewModal
from .view_model import (
    ViewModel,
    BusyScope,
    UploadArea,
    AnalyzeButton,
    ResultsPanel,
)

__all__ = [
    "NotificationManager",
    "Notification",
    "NotificationType",
    "PreviewModal",
    "ViewModel",
    "BusyScope",
    "UploadArea",
    "AnalyzeButton",
    "ResultsPanel",
]
