"""
Entry Point Script (Bootstrap)
==============================
Development runner located outside the 'src' package.

It prepends 'src' to 'sys.path' so 'from cubeview...' imports resolve
without installing the package.

Usage:
    $ python run.py [--scene assets/default_scene.json] [--log-level DEBUG]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from cubeview.main import main

if __name__ == "__main__":
    sys.exit(main())
