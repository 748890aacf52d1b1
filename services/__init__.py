"""
Terminal-facing services for Snake: frame rendering.
"""

from .renderer import render_frame, render_title, write_frame, terminal_size

__all__ = [
    'render_frame',
    'render_title',
    'write_frame',
    'terminal_size',
]
