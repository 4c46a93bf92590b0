"""
Tests for the debug switches.
"""

import pytest

from debug import COMPONENTS, Debug


class TestDebug:
    """Tests for Debug."""

    def test_component_map_is_shared(self):
        first, second = Debug(), Debug()
        first.enable("rotor")
        try:
            assert second.status()["rotor"] is True
            assert "rotor" in repr(second)
        finally:
            first.disable("rotor")

    def test_unknown_component(self):
        with pytest.raises(ValueError, match="Unknown debug component"):
            Debug().enable("keyboard")

    def test_status_lists_every_component(self):
        assert set(Debug().status()) == set(COMPONENTS)
