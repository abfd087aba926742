"""
The RENDER layer walks the model and issues primitive draw calls on a DrawingSurface.
"""
