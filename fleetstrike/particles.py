"""Short-lived particle bursts and floating text labels."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .core import SKYBLUE, Color, Point

GRAVITY = 200.0


@dataclass
class Particle:
    position: Point
    velocity: Point
    color: Color
    life: float
    max_life: float
    size: float

    @property
    def alpha(self) -> float:
        return self.life / self.max_life


@dataclass
class Animation:
    position: Point
    text: str
    color: Color
    duration: float = 2.0
    time: float = 0.0

    @property
    def alpha(self) -> float:
        return 1.0 - self.time / self.duration

    @property
    def y_offset(self) -> float:
        return -self.time * 30


class ParticleSystem:
    """Holds particles and text animations and advances them over time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.particles: list[Particle] = []
        self.animations: list[Animation] = []

    def add_explosion(self, pos: Point, color: Color) -> None:
        rnd = self.rng.randrange
        self.particles.extend(
            Particle(
                position=pos,
                velocity=(float(rnd(200) - 100), float(rnd(200) - 100)),
                color=color,
                life=1.0,
                max_life=1.0,
                size=float(rnd(8) + 2),
            )
            for _ in range(15)
        )

    def add_splash(self, pos: Point) -> None:
        rnd = self.rng.randrange
        self.particles.extend(
            Particle(
                position=pos,
                velocity=(float(rnd(100) - 50), float(rnd(80) - 20)),
                color=SKYBLUE,
                life=0.8,
                max_life=0.8,
                size=float(rnd(6) + 2),
            )
            for _ in range(8)
        )

    def add_animation(
        self, pos: Point, text: str, color: Color, duration: float = 2.0
    ) -> None:
        self.animations.append(Animation(pos, text, color, duration))

    def update(self, dt: float) -> None:
        """Move particles under gravity and drop those whose time is up."""
        for p in self.particles:
            x, y = p.position
            vx, vy = p.velocity
            p.position = (x + vx * dt, y + vy * dt)
            p.velocity = (vx, vy + GRAVITY * dt)
            p.life -= dt
        self.particles = [p for p in self.particles if p.life > 0]

        for anim in self.animations:
            anim.time += dt
        self.animations = [a for a in self.animations if a.time < a.duration]