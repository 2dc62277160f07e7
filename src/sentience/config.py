"""
Configuration & Path Management
===============================
This module serves as the central registry for resource paths and the fixed
constants that tune navigation, input handling and the animations.

Why is this file needed?
------------------------
1. Abstraction: The timings and radii are referenced by the model, the
   controller and the Qt views. Keeping them here avoids magic numbers
   scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the content catalog) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    CONTENT_PATH (str): Absolute path to the section content catalog.
"""
import logging
import math
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/sentience/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# ------------------------------------------------------------------------------
# Sections & navigation
# ------------------------------------------------------------------------------
TOTAL_SECTIONS: int = 6
TRANSITION_DURATION_MS: int = 900

LANDING_SECTION: int = 0
TERMINAL_SECTION: int = 4

# ------------------------------------------------------------------------------
# Input
# ------------------------------------------------------------------------------
WHEEL_THRESHOLD: float = 50.0
WHEEL_QUIET_PERIOD_MS: int = 200
TOUCH_SWIPE_THRESHOLD: float = 50.0

# ------------------------------------------------------------------------------
# Particle field
# ------------------------------------------------------------------------------
PARTICLE_COUNT: int = 60
PARTICLE_COLOR: tuple[int, int, int] = (167, 139, 250)
PARTICLE_MAX_SPEED: float = 0.15
PARTICLE_MIN_RADIUS: float = 0.5
PARTICLE_RADIUS_SPAN: float = 1.5
PARTICLE_MIN_ALPHA: float = 0.05
PARTICLE_ALPHA_SPAN: float = 0.3
PHASE_INCREMENT: float = 0.01
PULSE_FLOOR: float = 0.7
PULSE_AMPLITUDE: float = 0.3

CONNECTION_RADIUS: float = 120.0
CONNECTION_MAX_ALPHA: float = 0.06
CONNECTION_LINE_WIDTH: float = 0.5
# Above this pool size the connection pass switches to a uniform grid.
GRID_PAIRING_THRESHOLD: int = 256

REPULSION_RADIUS: float = 150.0
REPULSION_STRENGTH: float = 0.02
REPULSION_SCALE: float = 0.01
VELOCITY_DAMPING: float = 0.99

# ------------------------------------------------------------------------------
# Cursor
# ------------------------------------------------------------------------------
CURSOR_SMOOTHING: float = 0.08
TRAIL_FRACTIONS: tuple[float, ...] = (0.15, 0.3, 0.5)

# ------------------------------------------------------------------------------
# Reveal animations
# ------------------------------------------------------------------------------
COUNTER_DELAY_MS: int = 2000
COUNTER_DURATION_MS: int = 2000

TERMINAL_LINE_STAGGER_MS: int = 180
TERMINAL_LINE_DURATION_MS: int = 400
TERMINAL_LINE_OFFSET_PX: float = 10.0
# CSS "ease" timing function
TERMINAL_EASE_CURVE: tuple[float, float, float, float] = (0.25, 0.1, 0.25, 1.0)

# ------------------------------------------------------------------------------
# Window
# ------------------------------------------------------------------------------
FRAME_INTERVAL_MS: int = 16
FADE_IN_DURATION_MS: int = 600
WINDOW_SIZE: tuple[int, int] = (1400, 900)
TWO_PI: float = 2.0 * math.pi

# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
CONTENT_PATH: str = os.path.join(ASSETS_PATH, "content.json")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
