"""
Animation Tool Configuration Settings

All configuration constants for the figure animation tool.
Modify these values to change playback, rendering and export behavior.
"""

from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
ANIMATIONS_DIR = ASSETS_DIR / "animations"
DEFAULT_CATALOG_PATH = ANIMATIONS_DIR / "sample_animations.json"

# ============================================================================
# Playback Settings
# ============================================================================

MIN_PLAYBACK_SPEED = 0.1       # Slowest allowed speed multiplier
MAX_PLAYBACK_SPEED = 5.0       # Fastest allowed speed multiplier
DEFAULT_PLAYBACK_SPEED = 1.0
SPEED_STEP = 0.25              # Speed change per key press in the preview window

# ============================================================================
# Figure Settings
# ============================================================================

DEFAULT_FIGURE_POSITION = (400.0, 300.0)  # Canvas position of the torso center
HEAD_RADIUS = 15.0                        # Head radius at scale 1.0 (pixels)

# ============================================================================
# Canvas / Export Settings
# ============================================================================

CANVAS_SIZE = (800, 600)                # Width, Height of the full canvas
BACKGROUND_COLOR = (255, 255, 255, 255)  # RGBA
SPRITE_FRAME_SIZE = (200, 200)          # Width, Height of one sprite sheet cell
DEFAULT_FRAME_COUNT = 8                 # Frames sampled per export
DEFAULT_SHEET_COLUMNS = 4               # Sprite sheet grid width (cells)

# ============================================================================
# Preview Window Settings
# ============================================================================

WINDOW_SIZE = CANVAS_SIZE
WINDOW_TITLE = "Stick Figure Animator"
RESIZABLE = False

# OpenGL version (4.1 is max for macOS)
GL_VERSION = (4, 1)
