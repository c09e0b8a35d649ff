"""
Particle engine: batch creation, per-tick update, wraparound and effect swaps.
"""
import asyncio
import math
import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

WIDTH, HEIGHT = 200, 100


def _engine(**kwargs):
    from moodpalette.particles import ParticleEngine, Surface

    kwargs.setdefault("animate", False)
    return ParticleEngine(Surface(WIDTH, HEIGHT), rng=random.Random(7), **kwargs)


def _palette():
    from moodpalette.palette import procedural_palette

    return procedural_palette((255, 200, 0))


class TestConfetti(unittest.TestCase):

    def test_batch_of_one_hundred_within_ranges(self):
        """Confetti spawns one hundred particles within the spawn ranges."""
        from moodpalette.particles import Confetti

        engine = _engine()
        palette = _palette()
        engine.activate_effect("confetti", palette)
        self.assertEqual(len(engine.particles), 100)
        for p in engine.particles:
            self.assertIsInstance(p, Confetti)
            self.assertTrue(0 <= p.x < WIDTH)
            self.assertTrue(-HEIGHT <= p.y < 0)
            self.assertTrue(5 <= p.size < 15)
            self.assertIn(p.color, palette.to_list())
            self.assertTrue(2 <= p.speed_y < 5)
            self.assertTrue(-1 <= p.speed_x < 1)
            self.assertTrue(0 <= p.rotation < 360)

    def test_tick_moves_sways_and_rotates(self):
        """A tick moves, sways and rotates each confetti piece."""
        engine = _engine()
        engine.activate_effect("confetti", _palette())
        p = engine.particles[0]
        p.y = 50
        x0, rot0 = p.x, p.rotation
        engine.tick()
        expected_y = 50 + p.speed_y
        self.assertAlmostEqual(p.y, expected_y)
        self.assertAlmostEqual(p.x, x0 + math.sin(expected_y * 0.01) + p.speed_x)
        self.assertAlmostEqual(p.rotation, rot0 + 2)

    def test_wraps_to_just_above_top_keeping_attributes(self):
        """Confetti below the bottom wraps to -20 and keeps its look."""
        engine = _engine()
        engine.activate_effect("confetti", _palette())
        p = engine.particles[0]
        p.y = HEIGHT - 1
        before = (p.size, p.color, p.speed_x, p.speed_y)
        engine.tick()
        self.assertEqual(p.y, -20)
        self.assertEqual((p.size, p.color, p.speed_x, p.speed_y), before)
        self.assertEqual(len(engine.particles), 100)

    def test_at_exact_height_does_not_wrap(self):
        """Confetti exactly at the bottom edge stays."""
        from moodpalette.particles import Confetti

        p = Confetti(x=10, y=HEIGHT - 3, size=5, color="#ffffff", speed_x=0, speed_y=3, rotation=0)
        p.update(HEIGHT)
        self.assertEqual(p.y, HEIGHT)
        p.update(HEIGHT)
        self.assertEqual(p.y, -20)

    def test_tick_draws_particles_in_view(self):
        """Visible particles are drawn to the surface."""
        from moodpalette.color import hex_to_rgb

        engine = _engine()
        palette = _palette()
        engine.activate_effect("confetti", palette)
        p = engine.particles[0]
        p.x, p.y, p.speed_x, p.speed_y = 100.0, 40.0, 0.0, 2.0
        engine.tick()
        self.assertFalse(engine.surface.is_blank())
        px = engine.surface.to_array()[int(p.y), int(p.x)]
        self.assertEqual(tuple(px[:3]), hex_to_rgb(p.color))
        self.assertEqual(px[3], 255)


class TestRain(unittest.TestCase):

    def test_batch_of_two_hundred_within_ranges(self):
        """Rain spawns two hundred drops within the spawn ranges."""
        from moodpalette.particles import Rain

        engine = _engine()
        engine.activate_effect("rain", _palette())
        self.assertEqual(len(engine.particles), 200)
        for p in engine.particles:
            self.assertIsInstance(p, Rain)
            self.assertTrue(0 <= p.x < WIDTH)
            self.assertTrue(0 <= p.y < HEIGHT)
            self.assertTrue(10 <= p.length < 30)
            self.assertTrue(5 <= p.speed < 10)
            self.assertTrue(0.1 <= p.opacity < 0.6)

    def test_wraps_to_minus_length(self):
        """Rain below the bottom wraps to minus its length."""
        engine = _engine()
        engine.activate_effect("rain", _palette())
        p = engine.particles[0]
        p.y = HEIGHT
        length, speed, opacity = p.length, p.speed, p.opacity
        engine.tick()
        self.assertEqual(p.y, -length)
        self.assertEqual((p.length, p.speed, p.opacity), (length, speed, opacity))

    def test_drawn_with_one_constant_stroke(self):
        """Every drop uses the same half-transparent white stroke."""
        import numpy as np
        from moodpalette.particles import RAIN_STROKE

        engine = _engine()
        engine.activate_effect("rain", _palette())
        engine.tick()
        pixels = engine.surface.to_array()
        drawn = pixels[pixels[:, :, 3] > 0]
        self.assertGreater(len(drawn), 0)
        self.assertTrue(np.all(drawn == np.array(RAIN_STROKE, dtype=np.uint8)))


class TestEffectSwaps(unittest.TestCase):

    def test_confetti_then_rain_leaves_only_rain(self):
        """Switching effects replaces the particle batch."""
        from moodpalette.palette import EffectKind
        from moodpalette.particles import Rain

        engine = _engine()
        engine.activate_effect("confetti", _palette())
        engine.activate_effect("rain", _palette())
        self.assertEqual(engine.effect, EffectKind.RAIN)
        self.assertEqual(len(engine.particles), 200)
        self.assertTrue(all(isinstance(p, Rain) for p in engine.particles))

    def test_none_clears_particles_and_surface(self):
        """Effect none clears particles and the surface."""
        engine = _engine()
        engine.activate_effect("confetti", _palette())
        for p in engine.particles:
            p.y = 30
        engine.tick()
        self.assertFalse(engine.surface.is_blank())
        engine.activate_effect("none", _palette())
        self.assertEqual(engine.particles, [])
        self.assertTrue(engine.surface.is_blank())

    def test_labels_without_particles_behave_as_none(self):
        """Pulse and fog behave like none."""
        from moodpalette.palette import EffectKind

        engine = _engine()
        for label in ("pulse", "fog", "sparkle"):
            engine.activate_effect("rain", _palette())
            engine.activate_effect(label, _palette())
            self.assertEqual(engine.effect, EffectKind.NONE)
            self.assertEqual(engine.particles, [])

    def test_tick_with_no_effect_keeps_surface_blank(self):
        """Ticking with no effect draws nothing."""
        engine = _engine()
        engine.tick()
        self.assertTrue(engine.surface.is_blank())

    def test_resize(self):
        """Resize changes the surface dimensions."""
        engine = _engine()
        engine.resize(64, 32)
        self.assertEqual((engine.surface.width, engine.surface.height), (64, 32))
        self.assertEqual(engine.surface.to_array().shape, (32, 64, 4))


def _live_tasks(name: str) -> int:
    return sum(1 for t in asyncio.all_tasks() if t.get_name() == name and not t.done())


class TestAnimationLoop(unittest.IsolatedAsyncioTestCase):

    async def test_loop_runs_until_effect_none(self):
        """The animation loop runs until the effect is cleared."""
        engine = _engine(animate=True, fps=500)
        engine.activate_effect("rain", _palette())
        self.assertTrue(engine.animating)
        p = engine.particles[0]
        y0 = p.y
        await asyncio.sleep(0.05)
        self.assertNotEqual(p.y, y0)
        engine.activate_effect("none", _palette())
        self.assertFalse(engine.animating)
        await asyncio.sleep(0.01)
        self.assertEqual(_live_tasks("animation-loop"), 0)

    async def test_reactivation_keeps_one_loop(self):
        """Reactivating an effect keeps a single animation loop."""
        engine = _engine(animate=True, fps=500)
        engine.activate_effect("confetti", _palette())
        engine.activate_effect("confetti", _palette())
        engine.activate_effect("rain", _palette())
        await asyncio.sleep(0.02)
        self.assertEqual(_live_tasks("animation-loop"), 1)
        self.assertEqual(len(engine.particles), 200)
        engine.stop()
        await asyncio.sleep(0.01)
        self.assertEqual(_live_tasks("animation-loop"), 0)
