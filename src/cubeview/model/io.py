"""
Input/Output Manager (JSON)
Handles saving and loading the SceneConfig to .json files.
"""
import json
import logging
import os
from importlib.metadata import version, PackageNotFoundError

from cubeview.model.scene import SceneConfig

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("cubeview")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


class SceneIO:
    @staticmethod
    def save_scene(config: SceneConfig, filepath: str) -> None:
        logger.info(f"Saving scene to: {filepath}")
        payload = {"version": APP_VERSION, **config.to_dict()}
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            logger.info(f"Scene saved to: {filepath}")
        except OSError as e:
            logger.exception(f"Failed to save scene: {e}")
            raise

    @staticmethod
    def load_scene(filepath: str) -> SceneConfig:
        """
        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is not valid JSON or not a valid scene.
        """
        logger.info(f"Loading scene from: {filepath}")
        if not os.path.exists(filepath):
            msg = f"Scene file not found: {filepath}"
            logger.error(msg)
            raise FileNotFoundError(msg)

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.exception(f"Failed to parse scene file: {e}")
            raise ValueError(f"Scene file '{filepath}' is not valid JSON: {e}") from e

        if isinstance(data, dict):
            file_version = data.pop("version", None)
            if file_version is not None:
                logger.debug(f"Scene file written by version {file_version}.")

        try:
            config = SceneConfig.from_dict(data)
        except ValueError as e:
            logger.exception(f"Failed to load scene: {e}")
            raise

        logger.info(f"Scene loaded from: {filepath} ({len(config.cubes)} cube(s))")
        return config
