"""
Evaluation service.

Turns a finished wizard run into a LeadRecord, attaches the estimated price
from the price table and hands it to a lead sink exactly once.

A sink failure does not undo the evaluation: the customer still sees the
result, and the failure is logged and reported back to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from domain.errors import LeadSinkError
from domain.evaluation import EvaluationAnswers, Step, WizardState
from domain.lead import LeadRecord
from domain.price_table import PriceTable, lookup_price

logger = logging.getLogger(__name__)


class LeadSink(Protocol):
    def submit(self, lead: LeadRecord) -> None:
        ...


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    lead: LeadRecord
    submitted: bool
    error: Optional[str] = None


def estimate_price(prices: PriceTable, answers: EvaluationAnswers) -> int:
    """
    Price offered for the evaluated phone.

    Returns 0 when model or storage is unanswered or the sheet has no entry.
    """

    if not answers.model or not answers.storage:
        return 0
    return lookup_price(prices, answers.model, answers.storage)


def lead_from_state(state: WizardState, estimated_price: int = 0) -> LeadRecord:
    """
    Build the lead for a qualifying evaluation.

    Raises:
        ValueError: If the wizard has not reached the result screen.
    """

    if state.step not in (Step.RESULT, Step.COMPLETED):
        raise ValueError(f"Evaluation at step {state.step.value} has not produced a lead")

    answers = state.answers
    return LeadRecord(
        model=answers.model or "",
        storage=answers.storage or "",
        battery=answers.battery,
        scratches=answers.scratches,
        defects=answers.defects,
        sim=answers.sim,
        estimated_price=estimated_price,
        sale_timeline=answers.sale_timeline,
    )


def submit_evaluation(state: WizardState, prices: PriceTable, sink: LeadSink) -> SubmissionResult:
    """
    Submit a completed evaluation to the lead sink.

    Raises:
        ValueError: If the evaluation is not COMPLETED.
    """

    if state.step is not Step.COMPLETED:
        raise ValueError(f"Only completed evaluations are submitted (got {state.step.value})")

    lead = lead_from_state(state, estimate_price(prices, state.answers))

    try:
        sink.submit(lead)
    except LeadSinkError as exc:
        logger.error("Error saving lead: %s", exc)
        return SubmissionResult(lead=lead, submitted=False, error=str(exc))

    return SubmissionResult(lead=lead, submitted=True)


__all__ = [
    "LeadSink",
    "SubmissionResult",
    "estimate_price",
    "lead_from_state",
    "submit_evaluation",
]
