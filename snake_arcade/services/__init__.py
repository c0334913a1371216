"""
Rendering and host-loop services for Snake Arcade.

The renderer is importable on its own; the window module pulls in pygame and
is only loaded when the interactive game starts.
"""
