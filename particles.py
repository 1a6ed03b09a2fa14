"""
Particle field behind the portfolio pages.

The browser draws it (public/js/particles.js); this module owns the tuning the
script fetches from ``/api/particles/config`` and a reference implementation
of the per-frame update, so the motion rules can be checked without a canvas.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

NARROW_VIEWPORT_PX = 768
POINTER_PUSH = 3.0


@dataclass(frozen=True)
class ParticleConfig:
    particle_count: int = 60
    colors: tuple[str, ...] = ("#22d3ee", "#a78bfa", "#f97316", "#06b6d4")
    min_size: float = 1.0
    max_size: float = 4.0
    speed: float = 0.5
    connection_distance: float = 120.0
    mouse_radius: float = 150.0
    enable_connections: bool = True
    enable_mouse_interaction: bool = True

    @classmethod
    def for_viewport(cls, *, narrow: bool = False, **overrides) -> "ParticleConfig":
        if narrow:
            overrides.setdefault("particle_count", 30)
        return cls(**overrides)

    @classmethod
    def for_width(cls, width: float, **overrides) -> "ParticleConfig":
        return cls.for_viewport(narrow=width < NARROW_VIEWPORT_PX, **overrides)


@dataclass
class Particle:
    x: float
    y: float
    speed_x: float
    speed_y: float
    size: float
    color: str
    opacity: float


@dataclass
class ParticleSystem:
    width: float
    height: float
    config: ParticleConfig = field(default_factory=ParticleConfig)
    rng: random.Random = field(default_factory=random.Random)
    particles: list[Particle] = field(default_factory=list)
    pointer: tuple[float, float] | None = None

    def spawn(self) -> None:
        cfg = self.config
        self.particles = [
            Particle(
                x=self.rng.random() * self.width,
                y=self.rng.random() * self.height,
                speed_x=(self.rng.random() - 0.5) * cfg.speed,
                speed_y=(self.rng.random() - 0.5) * cfg.speed,
                size=self.rng.random() * (cfg.max_size - cfg.min_size) + cfg.min_size,
                color=self.rng.choice(cfg.colors),
                opacity=self.rng.random() * 0.5 + 0.3,
            )
            for _ in range(cfg.particle_count)
        ]

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def set_pointer(self, x: float, y: float) -> None:
        self.pointer = (x, y)

    def clear_pointer(self) -> None:
        self.pointer = None

    def step(self) -> None:
        for p in self.particles:
            self._update(p)

    def _update(self, p: Particle) -> None:
        cfg = self.config
        if cfg.enable_mouse_interaction and self.pointer is not None:
            dx = self.pointer[0] - p.x
            dy = self.pointer[1] - p.y
            distance = math.hypot(dx, dy)
            if distance < cfg.mouse_radius:
                force = (cfg.mouse_radius - distance) / cfg.mouse_radius
                angle = math.atan2(dy, dx)
                p.x -= math.cos(angle) * force * POINTER_PUSH
                p.y -= math.sin(angle) * force * POINTER_PUSH

        p.x += p.speed_x
        p.y += p.speed_y

        if p.x < 0 or p.x > self.width:
            p.speed_x *= -1
        if p.y < 0 or p.y > self.height:
            p.speed_y *= -1

        p.x = max(0.0, min(self.width, p.x))
        p.y = max(0.0, min(self.height, p.y))

    def connections(self) -> list[tuple[int, int, float]]:
        """Pairs closer than ``connection_distance`` with their line opacity."""
        if not self.config.enable_connections:
            return []
        limit = self.config.connection_distance
        pairs: list[tuple[int, int, float]] = []
        for i, a in enumerate(self.particles):
            for j in range(i + 1, len(self.particles)):
                b = self.particles[j]
                distance = math.hypot(a.x - b.x, a.y - b.y)
                if distance < limit:
                    pairs.append((i, j, 1 - distance / limit))
        return pairs
