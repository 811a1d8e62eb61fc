# MIT License (see LICENSE)
"""
Renderer adapters for sketch visualization.

This module provides an abstract base class for rendering and two concrete
implementations. The simulation has no rendering dependency: these
adapters only read entity state.

Particle variants are dispatched on their ParticleKind tag rather than by
type, so every variant shares one record.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TextIO
import sys

from ..oscillators import Oscillator, Pendulum
from ..particles import Emitter, Particle, ParticleKind
from ..steering import Vehicle
from ..types import KinematicBody, Mover
from ..world import Ragdoll, RigidShape

if TYPE_CHECKING:
    from ..scene import Sketch


def describe(entity) -> dict[str, Any]:
    """
    Flatten an entity into a plain dict of drawable state.

    Raises:
        TypeError: For entity types with no drawing.
    """
    if isinstance(entity, Particle):
        if entity.kind is ParticleKind.CIRCLE:
            primitive = "circle"
        elif entity.kind is ParticleKind.SQUARE:
            primitive = "rect"
        elif entity.kind is ParticleKind.CONFETTI:
            primitive = "rotated_rect"
        else:
            raise TypeError(f"Unknown particle kind: {entity.kind}")
        return {
            "type": "particle",
            "primitive": primitive,
            "position": entity.position.tolist(),
            "angle": entity.angle,
            "alpha": max(0.0, entity.lifespan),
        }
    if isinstance(entity, Vehicle):
        return {
            "type": "vehicle",
            "primitive": "triangle",
            "position": entity.position.tolist(),
            "angle": entity.body.heading,
        }
    if isinstance(entity, Mover):
        return {
            "type": "mover",
            "primitive": "rect",
            "position": entity.position.tolist(),
            "angle": entity.heading,
            "size": entity.mass * 16,
        }
    if isinstance(entity, KinematicBody):
        return {
            "type": "body",
            "primitive": "circle",
            "position": entity.position.tolist(),
            "size": entity.mass * 16,
        }
    if isinstance(entity, Pendulum):
        return {
            "type": "pendulum",
            "primitive": "line",
            "anchor": entity.anchor.tolist(),
            "position": entity.bob_position.tolist(),
            "angle": entity.angle,
        }
    if isinstance(entity, Oscillator):
        return {
            "type": "oscillator",
            "primitive": "line",
            "position": entity.offset.tolist(),
        }
    if isinstance(entity, RigidShape):
        return {
            "type": "rigid",
            "primitive": "polygon",
            "position": entity.position.tolist(),
            "angle": entity.angle,
            "vertices": [v.tolist() for v in entity.vertices],
        }
    raise TypeError(f"Cannot draw entity of type: {type(entity)}")


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a drawing backend. Usage:
        renderer.begin_frame(sketch.frame)
        for entity in entities:
            renderer.draw(entity)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_sketch(sketch)
    """

    @abstractmethod
    def begin_frame(self, frame: int) -> None:
        ...

    @abstractmethod
    def draw(self, entity) -> None:
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def draw_emitter(self, emitter: Emitter) -> None:
        for p in emitter.particles:
            self.draw(p)

    def draw_ragdoll(self, ragdoll: Ragdoll) -> None:
        for part in ragdoll.parts:
            self.draw(part)

    def render_sketch(self, sketch: "Sketch") -> None:
        """Draw every entity of a sketch as one frame."""
        self.begin_frame(sketch.frame)
        for m in sketch.movers:
            self.draw(m)
        for v in sketch.vehicles:
            self.draw(v)
        for e in sketch.emitters:
            self.draw_emitter(e)
        for p in sketch.pendulums:
            self.draw(p)
        for o in sketch.oscillators:
            self.draw(o)
        for s in sketch.shapes:
            if s.released:
                continue
            if isinstance(s, Ragdoll):
                self.draw_ragdoll(s)
            else:
                self.draw(s)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer, one line per entity.

    Output:
        === Frame 12 ===
        particle circle @ (100.31, 48.77) alpha=231
        pendulum line @ (170.71, 170.71) θ=0.79
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, frame: int) -> None:
        self.output.write(f"=== Frame {frame} ===\n")

    def draw(self, entity) -> None:
        d = describe(entity)
        x, y = d["position"][:2]
        line = f"{d['type']} {d['primitive']} @ ({x:.2f}, {y:.2f})"
        if "angle" in d:
            line += f" θ={d['angle']:.2f}"
        if "alpha" in d:
            line += f" alpha={d['alpha']:.0f}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class BufferedRenderer(RendererAdapter):
    """
    Records frames for later inspection.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sketch.step()
            renderer.render_sketch(sketch)
        print(len(renderer.frames[-1]["entities"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, frame: int) -> None:
        self._current_frame = {"frame": frame, "entities": []}

    def draw(self, entity) -> None:
        if self._current_frame is None:
            return
        self._current_frame["entities"].append(describe(entity))

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
