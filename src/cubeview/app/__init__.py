"""
The APP layer: Qt application shell, widgets and input handling.
Run with: python -m cubeview
"""
