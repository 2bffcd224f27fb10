# tests/unit/ui/test_countdown_runner.py
# Unit tests for the live countdown loop

from rich.console import Console

from cork.ui.countdown_runner import run_countdown
from cork.ui.theming.theme_engine import get_cork_theme


def make_console() -> Console:
    return Console(record=True, width=80, theme=get_cork_theme())


# * Verify the loop polls until the countdown clears itself
def test_runs_to_completion(engine, ticker):
    polls = []

    def sleep(seconds):
        polls.append(seconds)
        ticker.advance()

    finished = run_countdown(engine, 1.0, make_console(), refresh_per_second=10, sleep=sleep)

    assert finished is True
    assert engine.countdown_active is False
    assert len(polls) == 10
    assert polls[0] == 0.1


# * Verify Ctrl+C clears the countdown & reports it as not finished
def test_interrupt_clears(engine, ticker):
    def sleep(seconds):
        ticker.advance()
        raise KeyboardInterrupt

    finished = run_countdown(engine, 5.0, make_console(), sleep=sleep)

    assert finished is False
    assert engine.countdown_time == 0.0
    assert engine.countdown_active is False


# * Verify an already-running countdown is left untouched
def test_existing_countdown(engine, ticker):
    engine.start_countdown(30.0)
    assert run_countdown(engine, 5.0, make_console(), sleep=lambda s: None) is False
    assert engine.countdown_time == 30.0
