"""
Domain: phone evaluation wizard as a finite-state machine.

The wizard asks a fixed sequence of multiple-choice questions:

    WELCOME -> MODEL -> STORAGE -> BATTERY -> SCRATCHES -> DEFECTS -> SIM -> RESULT -> COMPLETED

Two guards end the flow early in the terminal REJECTED state:
- battery health below MIN_BATTERY_PERCENT
- any reported defect, broken function or replaced part

State values are immutable. Transitions are pure functions (state, answer) -> state;
nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple


class InvalidAnswerError(ValueError):
    """The answer is not one of the options offered at the current step."""


class InvalidTransitionError(ValueError):
    """The requested move is not possible from the current step."""


class Step(str, Enum):
    WELCOME = "welcome"
    MODEL = "model"
    STORAGE = "storage"
    BATTERY = "battery"
    SCRATCHES = "scratches"
    DEFECTS = "defects"
    SIM = "sim"
    RESULT = "result"
    COMPLETED = "completed"
    REJECTED = "rejected"


class RejectionReason(str, Enum):
    LOW_BATTERY = "low_battery"
    DEFECTS = "defects"


MIN_BATTERY_PERCENT: int = 85

YES: str = "Да"
NO: str = "Нет"
YES_NO_OPTIONS: Tuple[str, ...] = (YES, NO)

SUPPORTED_MODELS: Tuple[str, ...] = (
    "iPhone 13",
    "iPhone 13 mini",
    "iPhone 13 Pro",
    "iPhone 13 Pro Max",
    "iPhone 14",
    "iPhone 14 Plus",
    "iPhone 14 Pro",
    "iPhone 14 Pro Max",
    "iPhone 15",
    "iPhone 15 Plus",
    "iPhone 15 Pro",
    "iPhone 15 Pro Max",
    "iPhone 16",
    "iPhone 16 Plus",
    "iPhone 16 Pro",
    "iPhone 16 Pro Max",
    "iPhone 17",
    "iPhone 17 Pro",
    "iPhone 17 Pro Max",
)

STORAGE_OPTIONS: Tuple[str, ...] = ("128GB", "256GB", "512GB", "1TB")

BATTERY_BELOW_THRESHOLD: str = f"Ниже {MIN_BATTERY_PERCENT}%"
BATTERY_OPTIONS: Tuple[str, ...] = tuple(
    f"{percent}%" for percent in range(100, MIN_BATTERY_PERCENT - 1, -1)
) + (BATTERY_BELOW_THRESHOLD,)

SIM_OPTIONS: Tuple[str, ...] = ("SIM + eSIM", "2 SIM", "eSIM")

SALE_TIMELINE_OPTIONS: Tuple[str, ...] = ("Сегодня/завтра", "В течение недели", "Позже")

REJECTION_MESSAGES = {
    RejectionReason.LOW_BATTERY: (
        f"Мы выкупаем устройства только с аккумулятором от {MIN_BATTERY_PERCENT}% и выше 🔋\n"
        "Этот iPhone не подходит под условия выкупа, к сожалению."
    ),
    RejectionReason.DEFECTS: (
        "К сожалению, мы не выкупаем телефоны с дефектами, "
        "нерабочими функциями или заменёнными деталями 😔"
    ),
}

_FORWARD = {
    Step.WELCOME: Step.MODEL,
    Step.MODEL: Step.STORAGE,
    Step.STORAGE: Step.BATTERY,
    Step.BATTERY: Step.SCRATCHES,
    Step.SCRATCHES: Step.DEFECTS,
    Step.DEFECTS: Step.SIM,
    Step.SIM: Step.RESULT,
    Step.RESULT: Step.COMPLETED,
}

_BACK = {
    Step.MODEL: Step.WELCOME,
    Step.STORAGE: Step.MODEL,
    Step.BATTERY: Step.STORAGE,
    Step.SCRATCHES: Step.BATTERY,
    Step.DEFECTS: Step.SCRATCHES,
    Step.SIM: Step.DEFECTS,
}

# Answer field recorded at each question step.
_FIELD_FOR_STEP = {
    Step.MODEL: "model",
    Step.STORAGE: "storage",
    Step.BATTERY: "battery",
    Step.SCRATCHES: "scratches",
    Step.DEFECTS: "defects",
    Step.SIM: "sim",
    Step.RESULT: "sale_timeline",
}

_OPTIONS_FOR_STEP = {
    Step.MODEL: SUPPORTED_MODELS,
    Step.STORAGE: STORAGE_OPTIONS,
    Step.BATTERY: BATTERY_OPTIONS,
    Step.SCRATCHES: YES_NO_OPTIONS,
    Step.DEFECTS: YES_NO_OPTIONS,
    Step.SIM: SIM_OPTIONS,
    Step.RESULT: SALE_TIMELINE_OPTIONS,
}

TERMINAL_STEPS = frozenset({Step.COMPLETED, Step.REJECTED})


@dataclass(frozen=True, slots=True)
class EvaluationAnswers:
    """Answers collected so far. Unanswered questions are None."""

    model: Optional[str] = None
    storage: Optional[str] = None
    battery: Optional[str] = None
    scratches: Optional[str] = None
    defects: Optional[str] = None
    sim: Optional[str] = None
    sale_timeline: Optional[str] = None


@dataclass(frozen=True, slots=True)
class WizardState:
    step: Step = Step.WELCOME
    answers: EvaluationAnswers = EvaluationAnswers()
    rejection: Optional[RejectionReason] = None

    def __post_init__(self) -> None:
        if (self.step is Step.REJECTED) != (self.rejection is not None):
            raise ValueError("rejection reason must be set exactly when step is REJECTED")


def start() -> WizardState:
    return WizardState()


def restart() -> WizardState:
    """Discard every answer and go back to the welcome screen."""
    return start()


def is_terminal(state: WizardState) -> bool:
    return state.step in TERMINAL_STEPS


def options_for(step: Step) -> Tuple[str, ...]:
    """Options offered at a step. Steps without a question offer nothing."""
    return _OPTIONS_FOR_STEP.get(step, ())


def rejection_message(reason: RejectionReason) -> str:
    return REJECTION_MESSAGES[reason]


def battery_below_threshold(answer: str) -> bool:
    """
    True for the explicit "below threshold" option or any percentage under it.

    Non-numeric answers other than the explicit option are not below threshold;
    they are rejected earlier as invalid answers.
    """

    if answer == BATTERY_BELOW_THRESHOLD:
        return True
    digits = answer.strip().rstrip("%").strip()
    if not digits.isdigit():
        return False
    return int(digits) < MIN_BATTERY_PERCENT


def _reject(state: WizardState, reason: RejectionReason) -> WizardState:
    return replace(state, step=Step.REJECTED, rejection=reason)


def advance(state: WizardState, answer: Optional[str] = None) -> WizardState:
    """
    Apply an answer to the current step and return the next state.

    Raises:
        InvalidTransitionError: If the state is terminal.
        InvalidAnswerError: If the answer is not offered at this step.
    """

    if is_terminal(state):
        raise InvalidTransitionError(f"Evaluation already finished ({state.step.value})")

    if state.step is Step.WELCOME:
        return replace(state, step=Step.MODEL)

    options = options_for(state.step)
    if answer not in options:
        raise InvalidAnswerError(f"{answer!r} is not a valid answer for step {state.step.value}")

    # Guards run before the answer is recorded: a rejected battery is never stored.
    if state.step is Step.BATTERY and battery_below_threshold(answer):
        return _reject(state, RejectionReason.LOW_BATTERY)
    if state.step is Step.DEFECTS and answer == YES:
        return _reject(state, RejectionReason.DEFECTS)

    answers = replace(state.answers, **{_FIELD_FOR_STEP[state.step]: answer})
    return WizardState(step=_FORWARD[state.step], answers=answers)


def back(state: WizardState) -> WizardState:
    """Return to the previous question, keeping every answer given so far."""

    previous = _BACK.get(state.step)
    if previous is None:
        raise InvalidTransitionError(f"Cannot go back from step {state.step.value}")
    return replace(state, step=previous)


__all__ = [
    "BATTERY_BELOW_THRESHOLD",
    "BATTERY_OPTIONS",
    "EvaluationAnswers",
    "InvalidAnswerError",
    "InvalidTransitionError",
    "MIN_BATTERY_PERCENT",
    "NO",
    "RejectionReason",
    "SALE_TIMELINE_OPTIONS",
    "SIM_OPTIONS",
    "STORAGE_OPTIONS",
    "SUPPORTED_MODELS",
    "Step",
    "WizardState",
    "YES",
    "advance",
    "back",
    "battery_below_threshold",
    "is_terminal",
    "options_for",
    "rejection_message",
    "restart",
    "start",
]
