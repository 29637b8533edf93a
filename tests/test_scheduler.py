#!/usr/bin/env python3
"""
Unit tests for delayed close actions and animation timing
"""

import unittest
from unittest.mock import Mock, patch

from foresight.scheduler import DelayedAction, close_animation_duration_ms, schedule_after
from foresight.shell import WindowType

from fakes import FakeAnimationSettings, FakeGLib, FakeWindow


class TestDelayedAction(unittest.TestCase):
    """Test timer arming, firing and cancellation"""

    def setUp(self):
        self.glib = FakeGLib()
        patcher = patch('foresight.scheduler.GLib', self.glib)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_fires_after_duration(self):
        callback = Mock()
        action = schedule_after(150).then(callback)

        self.glib.advance(149)
        callback.assert_not_called()
        self.assertTrue(action.active)

        self.glib.advance(1)
        callback.assert_called_once_with()
        self.assertFalse(action.active)

    def test_zero_duration_fires_on_next_iteration(self):
        callback = Mock()
        schedule_after(0).then(callback)
        callback.assert_not_called()

        self.glib.advance(0)
        callback.assert_called_once_with()

    def test_cancel_prevents_continuation(self):
        callback = Mock()
        action = schedule_after(100).then(callback)
        action.cancel()

        self.glib.advance(1000)
        callback.assert_not_called()
        self.assertFalse(action.active)
        self.assertEqual(self.glib.pending, 0)

    def test_cancel_is_idempotent(self):
        action = DelayedAction(100)
        action.cancel()
        action.cancel()
        self.assertEqual(self.glib.pending, 0)

    def test_cancel_after_firing_does_not_remove_source(self):
        action = schedule_after(10).then(Mock())
        self.glib.advance(10)
        # source_remove on a fired source would raise in FakeGLib
        action.cancel()

    def test_single_continuation(self):
        action = schedule_after(10).then(Mock())
        with self.assertRaises(RuntimeError):
            action.then(Mock())

    def test_timeout_callback_does_not_repeat(self):
        action = DelayedAction(10)
        self.assertFalse(action._on_timeout())


class TestCloseAnimationDuration(unittest.TestCase):
    """Test close animation timing per window type"""

    def test_normal_window(self):
        window = FakeWindow(window_type=WindowType.NORMAL)
        self.assertEqual(close_animation_duration_ms(window, FakeAnimationSettings(True)), 150)

    def test_dialogs(self):
        for window_type in (WindowType.DIALOG, WindowType.MODAL_DIALOG):
            window = FakeWindow(window_type=window_type)
            self.assertEqual(close_animation_duration_ms(window, FakeAnimationSettings(True)), 100)

    def test_animations_disabled(self):
        for window_type in (WindowType.NORMAL, WindowType.DIALOG):
            window = FakeWindow(window_type=window_type)
            self.assertEqual(close_animation_duration_ms(window, FakeAnimationSettings(False)), 0)


if __name__ == '__main__':
    unittest.main()
