"""Interactive 3D wireframe viewer: transform, perspective projection and screen mapping."""
