"""
Application Initialization
==========================
Builds the scene and the main window and starts the Qt event loop.

It acts as the dependency-injection root:
1. Sets up logging.
2. Loads the initial scene configuration.
3. Instantiates the Scene (World, CameraEye, ScreenSpace).
4. Passes the Scene into the MainWindow and starts the event loop.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from cubeview.config import DEFAULT_SCENE_PATH
from cubeview.logging_config import setup_logging
from cubeview.model.io import SceneIO
from cubeview.model.scene import Scene, SceneConfig

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cubeview", description="Interactive 3D wireframe cube viewer.")
    parser.add_argument("--scene", help="Path to a scene JSON file (default: bundled default scene).")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser.parse_args(argv)


def load_initial_config(path: Optional[str]) -> SceneConfig:
    """
    Load the scene config from `path` (or the bundled default scene).
    Falls back to the built-in defaults if the file is missing or invalid.
    """
    candidate = path or DEFAULT_SCENE_PATH
    if path is None and not os.path.exists(candidate):
        logger.info("No default scene file found; using built-in defaults.")
        return SceneConfig()
    try:
        config = SceneIO.load_scene(candidate)
        Scene.from_config(config)  # validate camera/screen/cube values
        return config
    except (OSError, ValueError) as e:
        logger.error(f"Could not use scene '{candidate}': {e}. Falling back to built-in defaults.")
        return SceneConfig()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    # 2. Initialize the Data Model
    config = load_initial_config(args.scene)
    scene = Scene.from_config(config)

    # 3. Create the Qt Application and the Main Window
    from cubeview.app.application import create_app
    from cubeview.app.ui.main_window import MainWindow

    app = create_app([sys.argv[0]])
    window = MainWindow(scene)
    window.scene_path = args.scene
    window.update_window_title()
    window.show()

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
