"""
Configuration & Path Management
===============================
Central registry for file paths and global constants.

It handles the logic required by PyInstaller (sys._MEIPASS) to find assets
(the default scene JSON) when the app is frozen into an executable.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_SCENE_PATH (str): Absolute path to the default scene file.
"""
import logging
import sys
import os
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

    # Development mode: config.py is in src/cubeview/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_SCENE_PATH: str = os.path.join(ASSETS_PATH, "default_scene.json")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}; built-in scene defaults will be used.")
