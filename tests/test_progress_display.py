"""Tests for the live progress panel."""
import pytest

from wordy.progress_display import ProgressDisplay


def test_disabled_display_records_metrics_without_live():
    with ProgressDisplay("Parsing", enabled=False, update_interval=1) as progress:
        progress.update(Lines=10, Records=8)
        progress.update(Lines=20, Records=17)
        assert progress.live is None

    assert progress.calls == 2
    assert progress.metrics == {"Lines": 20, "Records": 17}


def test_enabled_display_redraws_on_interval():
    with ProgressDisplay("Parsing", update_interval=2) as progress:
        progress.update(Records=1)
        assert "Elapsed" not in progress.metrics
        progress.update(Records=2)
        assert "Elapsed" in progress.metrics
        assert progress.live is not None

    assert progress.live is None


@pytest.mark.parametrize("key,value,expected", [
    ("Elapsed", 75.0, "01:15"),
    ("Rate", 1234.56, "1,234.6/s"),
    ("Records", 146347, "146,347"),
    ("Ratio", 0.5, "0.50"),
    ("File", "index.noun", "index.noun"),
])
def test_format_value(key, value, expected):
    assert ProgressDisplay._format_value(key, value) == expected
