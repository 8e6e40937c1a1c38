"""
Install progress tracking.

Four steps, each pending -> success | failed. The tracker owns the state and
publishes a ProgressEvent for every transition; clients observe events through
a listener callback instead of sharing the tracker.
"""

from typing import Callable, Dict, List, Optional

from plengi_installer.logging_config import logger
from plengi_installer.schemas import InstallStep, ProgressEvent, StepState

ProgressListener = Callable[[ProgressEvent], None]

STEP_ORDER = [
    InstallStep.CREDENTIALS,
    InstallStep.PROJECT,
    InstallStep.ENTRY_POINT,
    InstallStep.INSERTION,
]


class InvalidTransition(RuntimeError):
    """Raised when a step that already finished is moved again."""
    pass


class ProgressTracker:
    def __init__(self, listener: Optional[ProgressListener] = None):
        self._listener = listener
        self._states: Dict[InstallStep, StepState] = {step: StepState.PENDING for step in STEP_ORDER}
        self._details: Dict[InstallStep, Optional[str]] = {step: None for step in STEP_ORDER}

    def state(self, step: InstallStep) -> StepState:
        return self._states[step]

    def succeed(self, step: InstallStep, detail: Optional[str] = None) -> None:
        self._transition(step, StepState.SUCCESS, detail)

    def fail(self, step: InstallStep, detail: Optional[str] = None) -> None:
        self._transition(step, StepState.FAILED, detail)

    def _transition(self, step: InstallStep, state: StepState, detail: Optional[str]) -> None:
        if self._states[step] != StepState.PENDING:
            raise InvalidTransition(f"Step '{step.value}' already {self._states[step].value}")
        index = STEP_ORDER.index(step)
        for earlier in STEP_ORDER[:index]:
            if self._states[earlier] != StepState.SUCCESS:
                raise InvalidTransition(
                    f"Step '{step.value}' cannot finish before '{earlier.value}' succeeded"
                )

        self._states[step] = state
        self._details[step] = detail
        event = ProgressEvent(step=step, state=state, detail=detail)
        logger.debug(f"Step {step.value}: {state.value}" + (f" ({detail})" if detail else ""))
        if self._listener is not None:
            self._listener(event)

    def snapshot(self) -> List[ProgressEvent]:
        """Current state of every step, in order."""
        return [
            ProgressEvent(step=step, state=self._states[step], detail=self._details[step])
            for step in STEP_ORDER
        ]
