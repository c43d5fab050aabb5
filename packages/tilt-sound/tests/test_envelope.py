"""Tests for the one-shot decay envelope."""

import pytest

from tilt_sound import DecayEnvelope


def test_idle_reads_zero():
    env = DecayEnvelope()
    assert env.active is False
    assert env.advance(0.1) == 0.0


def test_attack_then_decay():
    env = DecayEnvelope(attack_time=0.01, attack_level=0.6, decay_time=0.2, decay_level=0.0)
    env.trigger()
    assert env.active is True
    assert env.advance(0.005) == pytest.approx(0.3)
    assert env.advance(0.055) == pytest.approx(0.45)
    assert env.advance(0.1) == pytest.approx(0.15)


def test_finishes_at_decay_level_and_goes_idle():
    env = DecayEnvelope(decay_level=0.1)
    env.trigger()
    assert env.advance(1.0) == pytest.approx(0.1)
    assert env.active is False
    assert env.advance(0.01) == 0.0


def test_retrigger_restarts():
    env = DecayEnvelope()
    env.trigger()
    env.advance(0.1)
    env.trigger()
    assert env.advance(0.005) == pytest.approx(0.3)


def test_zero_attack_starts_at_peak():
    env = DecayEnvelope(attack_time=0.0, attack_level=1.0, decay_time=1.0)
    env.trigger()
    assert env.level() == pytest.approx(1.0)


def test_rejects_invalid_times():
    with pytest.raises(ValueError):
        DecayEnvelope(attack_time=-0.1)
    with pytest.raises(ValueError):
        DecayEnvelope(decay_time=0.0)
