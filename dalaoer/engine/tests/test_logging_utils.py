import logging

import pytest

from dalaoer import logging_utils


class TestSetupLogging:
    """Tests for setup_logging level handling"""

    @pytest.mark.parametrize(
        "name,level",
        [
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
            ("nonsense", logging.INFO),
        ],
    )
    def test_level_names(self, monkeypatch, name, level):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        logging_utils.setup_logging(name)
        assert len(calls) == 1
        assert calls[0]["level"] == level
        assert "%(name)s" in calls[0]["format"]
