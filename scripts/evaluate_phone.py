#!/usr/bin/env python3
"""
Phone Evaluation Script

Walks through the buy-back questionnaire in a terminal, shows the estimated
price and posts the resulting lead to the lead sink.

Usage:
    python evaluate_phone.py
    python evaluate_phone.py --no-prices --dry-run
    python evaluate_phone.py --lead-sink-url http://localhost:8000/api/v1/leads
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.errors import ConfigurationError, PriceFetchError
from domain.evaluation import (
    InvalidAnswerError,
    Step,
    WizardState,
    advance,
    back,
    is_terminal,
    options_for,
    rejection_message,
    start,
)
from domain.price_table import PriceTable
from repositories.config import get_lead_sink_url
from repositories.lead_sink_client import HttpLeadSink
from services.evaluation_service import LeadSink, estimate_price, submit_evaluation
from services.price_service import fetch_price_table

QUESTIONS = {
    Step.MODEL: "Выбери модель iPhone (мы выкупаем модели начиная с iPhone 13)",
    Step.STORAGE: "Объем памяти",
    Step.BATTERY: "Состояние аккумулятора",
    Step.SCRATCHES: "Есть царапины на корпусе или экране?",
    Step.DEFECTS: "Есть дефекты, нерабочие функции или замены деталей?",
    Step.SIM: "Какая версия SIM-карт?",
    Step.RESULT: "Когда планировал продать?",
}

BACK_CHOICE = "0"


def _format_price(price: int) -> str:
    return f"{price:,}".replace(",", " ") + " ₽"


def ask(state: WizardState, prompt: Callable[[str], str], echo: Callable[[str], None]) -> WizardState:
    """Ask the question for the current step and return the next state."""

    options = options_for(state.step)
    echo("")
    echo(QUESTIONS[state.step])
    for number, option in enumerate(options, start=1):
        echo(f"  {number}. {option}")
    if state.step is not Step.RESULT:
        echo(f"  {BACK_CHOICE}. ← Назад")

    while True:
        choice = prompt("> ").strip()
        if choice == BACK_CHOICE and state.step is not Step.RESULT:
            return back(state)
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return advance(state, options[int(choice) - 1])
        try:
            return advance(state, choice)
        except InvalidAnswerError:
            echo("Выбери номер из списка")


def run_evaluation(
    prices: PriceTable,
    sink: Optional[LeadSink],
    *,
    prompt: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> WizardState:
    """Drive the wizard to a terminal state, submitting the lead when it completes."""

    echo("Привет 👋 Я помогу быстро проверить, подходит ли твой iPhone под условия выкупа.")
    state = advance(start())

    while not is_terminal(state):
        if state.step is Step.WELCOME:
            state = advance(state)
            continue
        if state.step is Step.RESULT:
            price = estimate_price(prices, state.answers)
            echo("")
            echo("Отлично! 🎉")
            if price:
                echo(f"Актуальная оценка на сегодня/завтра: {_format_price(price)}")
            else:
                echo("Оценку для этой конфигурации уточнит менеджер")
        state = ask(state, prompt, echo)

    if state.step is Step.REJECTED:
        echo("")
        echo("К сожалению...")
        echo(rejection_message(state.rejection))
        return state

    if sink is None:
        echo("Заявка не отправлена (dry run)")
        return state

    result = submit_evaluation(state, prices, sink)
    if result.submitted:
        echo("Заявка отправлена ✓")
    else:
        echo("Не удалось сохранить данные. Попробуйте позже.")
    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Evaluate an iPhone for buy-back in the terminal",
    )

    parser.add_argument(
        "--no-prices",
        action="store_true",
        help="Skip fetching the price sheet (estimate will be 0)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Do not post the lead to the lead sink"
    )

    parser.add_argument(
        "--lead-sink-url",
        help="Lead sink endpoint (defaults to LEAD_SINK_URL)"
    )

    args = parser.parse_args(argv)

    prices: PriceTable = {}
    if not args.no_prices:
        try:
            prices = fetch_price_table().prices
        except PriceFetchError as e:
            print(f"WARNING: price table unavailable: {e}", file=sys.stderr)

    sink: Optional[LeadSink] = None
    if not args.dry_run:
        try:
            sink = HttpLeadSink(args.lead_sink_url or get_lead_sink_url())
        except ConfigurationError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    try:
        state = run_evaluation(prices, sink)
    except (KeyboardInterrupt, EOFError):
        print("\n\nEvaluation interrupted by user")
        return 130

    return 0 if state.step is Step.COMPLETED else 2


if __name__ == "__main__":
    sys.exit(main())
