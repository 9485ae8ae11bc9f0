"""Unit tests for the study/break countdown state machine."""

import pytest

from BackEnd.core.models import TimerSettings, ValidationError
from BackEnd.services.timer_engine import TimerEngine


# ---- Helpers ----

def finish_phase(engine):
    """Put the engine one second from the end of its phase and tick once."""
    engine.minutes, engine.seconds = 0, 1
    engine.start()
    return engine.tick()


# ---- start / pause ----

def test_initial_state_is_idle_study():
    engine = TimerEngine()
    assert (engine.minutes, engine.seconds) == (25, 0)
    assert not engine.running
    assert not engine.is_break
    assert engine.sessions == 0
    assert engine.display() == "25:00"


def test_start_is_noop_when_running():
    engine = TimerEngine()
    engine.start()
    engine.tick()
    engine.start()
    assert engine.running
    assert (engine.minutes, engine.seconds) == (24, 59)


def test_pause_stops_ticking():
    engine = TimerEngine()
    engine.start()
    engine.pause()
    assert engine.tick() is False
    assert (engine.minutes, engine.seconds) == (25, 0)


def test_toggle_flips_running():
    engine = TimerEngine()
    engine.toggle()
    assert engine.running
    engine.toggle()
    assert not engine.running


# ---- tick ----

def test_tick_borrows_a_minute():
    engine = TimerEngine(TimerSettings(study_minutes=2))
    engine.start()
    engine.tick()
    assert (engine.minutes, engine.seconds) == (1, 59)
    engine.seconds = 1
    engine.tick()
    assert (engine.minutes, engine.seconds) == (1, 0)
    engine.tick()
    assert (engine.minutes, engine.seconds) == (0, 59)


def test_single_tick_to_zero_completes_study_session():
    engine = TimerEngine(TimerSettings(study_minutes=25, short_break_minutes=5,
                                       long_break_minutes=15, sessions_until_long_break=4))
    assert finish_phase(engine) is True
    assert engine.sessions == 1
    assert engine.is_break
    assert (engine.minutes, engine.seconds) == (5, 0)
    assert not engine.running


def test_cadence_of_one_gives_long_break_every_time():
    engine = TimerEngine(TimerSettings(sessions_until_long_break=1))
    finish_phase(engine)
    assert engine.minutes == 15


def test_break_completion_returns_to_study():
    engine = TimerEngine()
    finish_phase(engine)
    assert finish_phase(engine) is True
    assert not engine.is_break
    assert (engine.minutes, engine.seconds) == (25, 0)
    assert engine.sessions == 1
    assert not engine.running


def test_long_break_cadence():
    engine = TimerEngine(TimerSettings(sessions_until_long_break=4))
    breaks = []
    for _ in range(4):
        finish_phase(engine)          # study -> break
        breaks.append(engine.minutes)
        finish_phase(engine)          # break -> study
    assert breaks == [5, 5, 5, 15]
    assert engine.sessions == 4


def test_zero_length_phase_completes_on_next_tick():
    engine = TimerEngine(TimerSettings(study_minutes=0))
    assert engine.display() == "00:00"
    engine.start()
    assert engine.tick() is True
    assert engine.is_break


# ---- reset / settings ----

def test_reset_restores_current_phase_duration():
    engine = TimerEngine()
    engine.start()
    for _ in range(10):
        engine.tick()
    engine.reset()
    assert not engine.running
    assert (engine.minutes, engine.seconds) == (25, 0)


def test_reset_during_break_uses_break_length():
    engine = TimerEngine(TimerSettings(sessions_until_long_break=2))
    finish_phase(engine)
    finish_phase(engine)
    finish_phase(engine)  # second session done -> long break
    engine.start()
    engine.tick()
    engine.reset()
    assert engine.is_break
    assert (engine.minutes, engine.seconds) == (15, 0)


def test_reset_is_idempotent():
    engine = TimerEngine()
    engine.start()
    engine.tick()
    engine.reset()
    first = engine.snapshot()
    engine.reset()
    assert engine.snapshot() == first


def test_apply_settings_when_idle_forces_study():
    engine = TimerEngine()
    finish_phase(engine)
    engine.apply_settings(TimerSettings(study_minutes=50))
    assert not engine.is_break
    assert (engine.minutes, engine.seconds) == (50, 0)
    assert engine.sessions == 1


def test_apply_settings_while_running_keeps_countdown():
    engine = TimerEngine()
    engine.start()
    engine.tick()
    engine.apply_settings(TimerSettings(study_minutes=50))
    assert (engine.minutes, engine.seconds) == (24, 59)
    assert engine.settings.study_minutes == 50


# ---- progress ----

def test_progress():
    engine = TimerEngine(TimerSettings(study_minutes=1))
    assert engine.progress() == 0.0
    engine.start()
    for _ in range(30):
        engine.tick()
    assert engine.progress() == pytest.approx(50.0)


def test_progress_zero_length_phase_is_full():
    engine = TimerEngine(TimerSettings(study_minutes=0))
    assert engine.progress() == 100.0


def test_next_break_is_long_follows_session_count():
    engine = TimerEngine(TimerSettings(sessions_until_long_break=2))
    assert engine.next_break_is_long()
    finish_phase(engine)
    assert not engine.next_break_is_long()


def test_settings_validation():
    with pytest.raises(ValidationError):
        TimerSettings(sessions_until_long_break=0)
    with pytest.raises(ValidationError):
        TimerSettings(study_minutes=-1)
