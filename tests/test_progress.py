"""
Tests for the install progress state machine.
"""

import pytest

from plengi_installer.progress import STEP_ORDER, InvalidTransition, ProgressTracker
from plengi_installer.schemas import InstallStep, StepState


def test_all_steps_start_pending():
    tracker = ProgressTracker()
    assert [event.state for event in tracker.snapshot()] == [StepState.PENDING] * 4
    assert [event.step for event in tracker.snapshot()] == STEP_ORDER


def test_listener_receives_transitions():
    events = []
    tracker = ProgressTracker(events.append)

    tracker.succeed(InstallStep.CREDENTIALS)
    tracker.fail(InstallStep.PROJECT, "Not an Xcode project")

    assert [(e.step, e.state) for e in events] == [
        (InstallStep.CREDENTIALS, StepState.SUCCESS),
        (InstallStep.PROJECT, StepState.FAILED),
    ]
    assert events[1].detail == "Not an Xcode project"
    assert tracker.state(InstallStep.ENTRY_POINT) == StepState.PENDING


def test_finished_step_cannot_change():
    tracker = ProgressTracker()
    tracker.succeed(InstallStep.CREDENTIALS)
    with pytest.raises(InvalidTransition):
        tracker.fail(InstallStep.CREDENTIALS)


def test_steps_finish_in_order():
    tracker = ProgressTracker()
    with pytest.raises(InvalidTransition):
        tracker.succeed(InstallStep.INSERTION)

    tracker.fail(InstallStep.CREDENTIALS)
    with pytest.raises(InvalidTransition):
        tracker.succeed(InstallStep.PROJECT)
