"""
Ghostwriter Constants

Fixed UI strings, limits and endpoint paths shared by the flows and the renderer.
"""

# =============================================================================
# VERSION INFO
# =============================================================================
VERSION = "1.0.0"
PROJECT_NAME = "Ghostwriter"

# =============================================================================
# REMOTE SERVICE ENDPOINTS
# =============================================================================
UPLOAD_ENDPOINT = "/api/upload"
ANALYZE_ENDPOINT = "/api/analyze"
EXPAND_ENDPOINT = "/api/expand"

UPLOAD_FIELD = "file"

# =============================================================================
# INPUT LIMITS
# =============================================================================
DEFAULT_ALLOWED_EXTENSIONS = ["pdf", "txt"]
DEFAULT_MIN_INPUT_CHARS = 10

# =============================================================================
# UPLOAD AREA
# =============================================================================
UPLOAD_STATUS_DEFAULT = "Drag & drop or click to browse"
UPLOAD_STATUS_UPLOADING = "Uploading {filename}..."
UPLOAD_STATUS_LOADED = "✓ Loaded: {filename}"

# =============================================================================
# ANALYZE BUTTON
# =============================================================================
ANALYZE_LABEL_IDLE = "Summon Ghost"
ANALYZE_LABEL_BUSY = "Analyzing..."

# =============================================================================
# TOAST MESSAGES
# =============================================================================
TOAST_INVALID_FILE_TYPE = "Please upload a .pdf or .txt file"
TOAST_UPLOAD_FAILED = "Upload failed"
TOAST_UPLOAD_LOADED = "Story loaded from {filename}"
TOAST_INSUFFICIENT_INPUT = "Write at least a few sentences first."
TOAST_ANALYSIS_FAILED = "Failed to reach the ghost. Is the server running?"

DEFAULT_TOAST_DURATION = 3.0

# =============================================================================
# PREVIEW MODAL
# =============================================================================
PREVIEW_LOADING = "Generating preview..."
PREVIEW_MISSING = "No preview available."
PREVIEW_FAILED = "Failed to generate preview."

# =============================================================================
# RENDER DEFAULTS
# =============================================================================
GENRE_DEFAULT = "Unknown"
TONE_DEFAULT = "Neutral"
AI_SOURCE = "ai"
ENGINE_LABEL_AI = "✨ Gemini AI"
ENGINE_LABEL_TEMPLATE = "⚙️ Templates"
DIRECTION_NAME_PREFIX = "Path "
DIRECTION_HINT = "Tap to preview this path"

# Animation delays (seconds)
BADGE_DELAY_STEP = 0.1
ENTITY_DELAY_STEP = 0.05
DIRECTION_DELAY_BASE = 0.1
DIRECTION_DELAY_STEP = 0.12
