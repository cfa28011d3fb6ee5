import html
import logging
import random
import sqlite3
from datetime import date
from typing import Any, Callable

import database.database as db
import utils.terminal_helpers as th
from handlers.decks import find_deck
from utils.constants import ReviewState, FLIP_KEYS, CORRECT_KEYS, INCORRECT_KEYS, QUIT_KEYS
from utils.srs import schedule, schedule_both, format_interval

KeyReader = Callable[[tuple[str, ...]], str]
Printer = Callable[[str], None]


def quiz(
    name_or_id: str,
    today: date | None = None,
    read_key: KeyReader | None = None,
    show: Printer | None = None,
    discard: Callable[[], None] | None = None,
) -> dict[str, int] | None:
    """Entry point: review every due card of one deck, in random order."""
    today = today or date.today()
    read_key = read_key or th.read_key
    show = show or th.show
    discard = discard or th.discard_pending_input

    try:
        deck = find_deck(name_or_id)
        cards = db.get_due_cards(deck['id'], today) if deck else []
    except sqlite3.Error as e:
        logging.error(f"Error loading deck {name_or_id!r}: {e}")
        print(f"Error loading deck: {e}")
        return None

    if deck is None:
        print(f"Unknown deck: {name_or_id}")
        return None

    if not cards:
        show(f"\u2728 Nothing due in <b>{html.escape(deck['name'])}</b> \u2014 you're all caught up!")
        return {'total': 0, 'reviewed': 0, 'correct': 0}

    random.shuffle(cards)
    logging.info(f"Quiz on deck {deck['id']}: {len(cards)} due")
    return run_review(cards, today, read_key, show, discard)


def run_review(
    cards: list[dict[str, Any]],
    today: date,
    read_key: KeyReader,
    show: Printer,
    discard: Callable[[], None] | None = None,
) -> dict[str, int]:
    """Walk the cards in the given order. Returns session counters."""
    if discard:
        discard()

    total = len(cards)
    reviewed = 0
    correct = 0

    show(f"\U0001f9e0 {total} card{'s' if total != 1 else ''} to review")

    for index, card in enumerate(cards):
        answer = _review_card(card, index, total, today, read_key, show)
        if answer is None:
            show(f"\u23f9 Stopped after {reviewed} card{'s' if reviewed != 1 else ''}")
            break
        reviewed += 1
        if answer:
            correct += 1
    else:
        show(f"\U0001f389 Done! {correct}/{total} recalled")

    return {'total': total, 'reviewed': reviewed, 'correct': correct}


# ============================================================
# Private helpers
# ============================================================

def _review_card(
    card: dict[str, Any],
    index: int,
    total: int,
    today: date,
    read_key: KeyReader,
    show: Printer,
) -> bool | None:
    """Flip then grade one card. None means the user stopped the session."""
    state = ReviewState.AWAITING_FLIP
    _show_front(card, index, total, show)

    while True:
        if state == ReviewState.AWAITING_FLIP:
            key = read_key(FLIP_KEYS + QUIT_KEYS)
            if key in QUIT_KEYS:
                return None
            if key in FLIP_KEYS:
                _show_back(card, today, show)
                state = ReviewState.AWAITING_GRADE

        elif state == ReviewState.AWAITING_GRADE:
            key = read_key(CORRECT_KEYS + INCORRECT_KEYS + QUIT_KEYS)
            if key in QUIT_KEYS:
                return None
            if key in CORRECT_KEYS or key in INCORRECT_KEYS:
                answer = key in CORRECT_KEYS
                _grade(card, answer, today)
                return answer


def _progress_label(index: int, total: int) -> str:
    return f"{index + 1}/{total}"


def _show_front(card: dict[str, Any], index: int, total: int, show: Printer) -> None:
    show(
        f"\n<b>{html.escape(card['front'])}</b>\n\n"
        f"<i>{_progress_label(index, total)}  \u00b7  space: show answer  \u00b7  q: stop</i>"
    )


def _show_back(card: dict[str, Any], today: date, show: Printer) -> None:
    results = schedule_both(card['level'], today)
    show(
        f"\U0001f4a1 {html.escape(card['back'])}\n\n"
        f"<ansigreen>y: got it {format_interval(results[True]['scheduled_days'])}</ansigreen>  \u00b7  "
        f"<ansired>n: missed {format_interval(results[False]['scheduled_days'])}</ansired>"
    )


def _grade(card: dict[str, Any], answer: bool, today: date) -> None:
    result = schedule(card['level'], answer, today)

    try:
        db.update_flashcard_meta(card['id'], result['next'], result['level'])
        db.insert_flashcard_log(card['id'], answer)
    except sqlite3.Error as e:
        logging.error(f"Error saving review of card {card['id']}: {e}")
        print(f"Error saving review: {e}")
        return

    logging.info(
        f"Card {card['id']}: {'correct' if answer else 'incorrect'}, "
        f"next due {result['next'].isoformat()}, level={result['level']}"
    )
