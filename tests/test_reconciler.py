#!/usr/bin/env python3
"""
Unit tests for overview show/hide decisions
"""

import unittest

from foresight.reconciler import OverviewReconciler
from foresight.shell import WindowType
from foresight.state import ControllerState

from fakes import FakeOverview, FakeSettings, FakeWindow, FakeWorkspace


class TestOverviewReconciler(unittest.TestCase):
    """Test population counting and the ownership flag"""

    def setUp(self):
        self.workspace = FakeWorkspace('one')
        self.state = ControllerState(self.workspace)
        self.overview = FakeOverview()
        self.reconciler = OverviewReconciler(self.state, self.overview, FakeSettings())

    def test_count_skips_uncountable_windows(self):
        self.workspace.windows = [
            FakeWindow(),
            FakeWindow(hidden=True),
            FakeWindow(window_type=WindowType.DOCK),
            FakeWindow(window_type=WindowType.DIALOG),
        ]
        self.assertEqual(self.reconciler.count_windows(), 2)

    def test_count_includes_transient_windows(self):
        self.workspace.windows = [FakeWindow(title='LibreOffice 7.6', wm_class='soffice')]
        self.assertEqual(self.reconciler.count_windows(), 1)

    def test_show_if_empty_shows_and_takes_ownership(self):
        self.reconciler.show_if_empty()
        self.assertEqual(self.overview.show_calls, 1)
        self.assertTrue(self.state.owns_overview_visibility)

    def test_show_if_empty_noop_with_windows(self):
        self.workspace.windows = [FakeWindow()]
        self.reconciler.show_if_empty()
        self.assertEqual(self.overview.show_calls, 0)
        self.assertFalse(self.state.owns_overview_visibility)

    def test_hide_if_owned_noop_without_ownership(self):
        self.overview.user_show()
        self.reconciler.hide_if_owned()
        self.assertEqual(self.overview.hide_calls, 0)

    def test_hide_if_owned_keeps_flag_until_hidden(self):
        self.reconciler.show_if_empty()
        self.reconciler.hide_if_owned()

        self.assertEqual(self.overview.hide_calls, 1)
        self.assertTrue(self.state.owns_overview_visibility)

        self.reconciler.on_overview_hidden(self.overview)
        self.assertFalse(self.state.owns_overview_visibility)

    def test_workspace_changed_populated_hides(self):
        self.reconciler.show_if_empty()
        self.reconciler.on_workspace_changed(2, show_apps_checked=False)
        self.assertEqual(self.overview.hide_calls, 1)

    def test_workspace_changed_show_apps_keeps_overview(self):
        self.reconciler.show_if_empty()
        self.reconciler.on_workspace_changed(2, show_apps_checked=True)
        self.assertEqual(self.overview.hide_calls, 0)
        self.assertEqual(self.overview.show_calls, 1)

    def test_workspace_changed_empty_shows(self):
        self.reconciler.on_workspace_changed(0, show_apps_checked=False)
        self.assertEqual(self.overview.show_calls, 1)

    def test_workspace_changed_empty_already_visible(self):
        self.overview.user_show()
        self.reconciler.on_workspace_changed(0, show_apps_checked=False)
        self.assertEqual(self.overview.show_calls, 0)
        self.assertFalse(self.state.owns_overview_visibility)


if __name__ == '__main__':
    unittest.main()
