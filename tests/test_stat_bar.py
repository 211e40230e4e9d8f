import pytest

from outlaw.stat_bar import StatBar


@pytest.fixture
def recorded():
    calls = []
    bar = StatBar(lambda cur, mx, pct: calls.append((cur, mx, pct)))
    return bar, calls


def test_bind_reports_initial_values(recorded):
    bar, calls = recorded
    bar.bind(50, 100)
    assert calls == [(50.0, 100.0, 0.5)]
    assert bar.current == 50.0
    assert bar.maximum == 100.0


def test_percent_clamped_to_one(recorded):
    bar, calls = recorded
    bar.bind(150, 100)
    assert bar.percent() == 1.0
    assert calls[-1][2] == 1.0


def test_percent_clamped_to_zero():
    bar = StatBar()
    bar.bind(-10, 100)
    assert bar.percent() == 0.0


def test_zero_maximum_gives_zero_percent():
    bar = StatBar()
    bar.bind(25, 0)
    assert bar.percent() == 0.0


def test_updates_report_each_change(recorded):
    bar, calls = recorded
    bar.bind(10, 40)
    bar.update_current(20)
    bar.update_max(80)
    assert [(cur, mx) for cur, mx, _ in calls] == [(10.0, 40.0), (20.0, 40.0), (20.0, 80.0)]
    assert all(0.0 <= pct <= 1.0 for _, _, pct in calls)
    assert calls[-1][2] == bar.percent()


def test_percent_matches_ratio_within_bounds():
    bar = StatBar()
    bar.bind(30, 120)
    assert bar.percent() == pytest.approx(bar.current / bar.maximum)


def test_without_listener_still_tracks():
    bar = StatBar()
    bar.update_current(7)
    assert bar.current == 7.0
    assert bar.percent() == 0.0