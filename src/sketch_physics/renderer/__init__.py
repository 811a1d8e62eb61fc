# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - BufferedRenderer: Records frames for playback or inspection.
    - describe: Flattens any drawable entity into a plain dict.

The simulation has no rendering dependency; these adapters are optional.

Typical usage:
    from sketch_physics.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_sketch(sketch)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    BufferedRenderer,
    describe,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "BufferedRenderer",
    "describe",
]
