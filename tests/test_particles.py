import random

import pytest

from fleetstrike.core import RED, SKYBLUE
from fleetstrike.particles import Animation, Particle, ParticleSystem


def make_system():
    return ParticleSystem(random.Random(7))


def test_explosion_adds_fifteen_particles():
    ps = make_system()
    ps.add_explosion((10.0, 20.0), RED)
    assert len(ps.particles) == 15
    for p in ps.particles:
        assert p.position == (10.0, 20.0)
        assert p.color == RED
        assert p.life == p.max_life == 1.0
        assert 2 <= p.size <= 9
        assert -100 <= p.velocity[0] < 100
        assert -100 <= p.velocity[1] < 100


def test_splash_adds_eight_particles():
    ps = make_system()
    ps.add_splash((0.0, 0.0))
    assert len(ps.particles) == 8
    for p in ps.particles:
        assert p.color == SKYBLUE
        assert p.life == pytest.approx(0.8)
        assert -50 <= p.velocity[0] < 50
        assert -20 <= p.velocity[1] < 60
        assert 2 <= p.size <= 7


def test_update_moves_and_applies_gravity():
    ps = ParticleSystem()
    ps.particles.append(Particle((0.0, 0.0), (10.0, 0.0), RED, 1.0, 1.0, 3.0))
    ps.update(0.5)
    p = ps.particles[0]
    assert p.position == (5.0, 0.0)
    assert p.velocity[1] > 0
    assert p.life == pytest.approx(0.5)
    assert p.alpha == pytest.approx(0.5)


def test_update_removes_dead_particles():
    ps = make_system()
    ps.add_explosion((0.0, 0.0), RED)
    ps.add_splash((0.0, 0.0))
    ps.update(0.9)
    assert len(ps.particles) == 15
    ps.update(0.1)
    assert ps.particles == []


def test_animation_expires_after_duration():
    ps = make_system()
    ps.add_animation((1.0, 2.0), "HIT!", RED, 1.0)
    ps.update(0.5)
    assert [a.text for a in ps.animations] == ["HIT!"]
    assert ps.animations[0].alpha == pytest.approx(0.5)
    ps.update(0.5)
    assert ps.animations == []


def test_animation_default_duration():
    ps = make_system()
    ps.add_animation((0.0, 0.0), "MISS", RED)
    assert ps.animations[0].duration == 2.0
    anim = Animation((0.0, 0.0), "x", RED, time=1.0)
    assert anim.y_offset == -30