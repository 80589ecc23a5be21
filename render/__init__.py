"""
Render module for TicTacToe.
Draws the board in a gnuplot window or as OpenCV images.
"""

from .config import RenderConfig
from .base import RendererError, NullRenderer
from .gnuplot_renderer import GnuplotRenderer, build_commands
from .image_renderer import ImageRenderer


def create_renderer(name: str, output_dir: str = None):
    """Build a renderer by name: 'gnuplot', 'image' or 'none'."""
    if name == "gnuplot":
        return GnuplotRenderer()
    if name == "image":
        return ImageRenderer(output_dir=output_dir)
    if name == "none":
        return NullRenderer()
    raise ValueError(f"Unknown renderer: {name}")
