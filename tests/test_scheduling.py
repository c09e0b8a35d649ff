"""
RepeatingTask: start/cancel lifecycle, single live run, self-cancel from the callback.
"""
import asyncio
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _live(name: str) -> int:
    return sum(1 for t in asyncio.all_tasks() if t.get_name() == name and not t.done())


class TestRepeatingTask(unittest.IsolatedAsyncioTestCase):

    async def test_ticks_until_cancelled(self):
        """The task ticks repeatedly until cancelled."""
        from moodpalette.scheduling import RepeatingTask

        ticks = []
        task = RepeatingTask(lambda: ticks.append(1), 0.005, name="t-ticks")
        self.assertFalse(task.running)
        task.start()
        self.assertTrue(task.running)
        await asyncio.sleep(0.06)
        task.cancel()
        self.assertFalse(task.running)
        count = len(ticks)
        self.assertGreaterEqual(count, 2)
        await asyncio.sleep(0.03)
        self.assertEqual(len(ticks), count)

    async def test_first_tick_waits_one_interval(self):
        """The first tick comes one interval after start."""
        from moodpalette.scheduling import RepeatingTask

        ticks = []
        task = RepeatingTask(lambda: ticks.append(1), 10, name="t-slow")
        task.start()
        await asyncio.sleep(0.01)
        self.assertEqual(ticks, [])
        task.cancel()

    async def test_restart_replaces_previous_run(self):
        """Starting again replaces the previous run."""
        from moodpalette.scheduling import RepeatingTask

        task = RepeatingTask(lambda: None, 0.005, name="t-restart")
        task.start()
        task.start()
        task.start()
        await asyncio.sleep(0.02)
        self.assertEqual(_live("t-restart"), 1)
        task.cancel()
        await asyncio.sleep(0.01)
        self.assertEqual(_live("t-restart"), 0)

    async def test_cancel_from_inside_callback_lets_it_finish(self):
        """Cancelling from inside a tick lets that tick finish."""
        from moodpalette.scheduling import RepeatingTask

        calls = []
        finished = asyncio.Event()

        async def callback():
            calls.append(1)
            task.cancel()
            await asyncio.sleep(0.005)
            finished.set()

        task = RepeatingTask(callback, 0.001, name="t-self")
        task.start()
        await asyncio.wait_for(finished.wait(), 1)
        await asyncio.sleep(0.02)
        self.assertEqual(calls, [1])
        self.assertFalse(task.running)

    async def test_coroutine_callbacks_do_not_overlap(self):
        """A slow coroutine tick is never overlapped by the next."""
        from moodpalette.scheduling import RepeatingTask

        active = 0
        peak = 0

        async def slow():
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1

        task = RepeatingTask(slow, 0.001, name="t-overlap")
        task.start()
        await asyncio.sleep(0.06)
        task.cancel()
        self.assertEqual(peak, 1)

    async def test_failing_tick_is_logged_and_loop_continues(self):
        """A failing tick is logged and the loop keeps going."""
        from moodpalette.scheduling import RepeatingTask

        ticks = []

        def flaky():
            ticks.append(1)
            if len(ticks) == 1:
                raise RuntimeError("boom")

        task = RepeatingTask(flaky, 0.002, name="t-flaky")
        with self.assertLogs("moodpalette.scheduling", level="ERROR"):
            task.start()
            await asyncio.sleep(0.04)
        task.cancel()
        self.assertGreaterEqual(len(ticks), 2)

    def test_cancel_without_loop_is_noop(self):
        """Cancelling a never-started task does nothing."""
        from moodpalette.scheduling import RepeatingTask

        task = RepeatingTask(lambda: None, 1)
        task.cancel()
        self.assertFalse(task.running)
