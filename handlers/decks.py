import logging
import sqlite3
from datetime import date

import database.database as db
from utils.constants import DECK_NAME_MAX


def add_deck(deck_name: str) -> int | None:
    deck_name = deck_name.strip()

    if not deck_name:
        print("\u26a0\ufe0f Deck name can't be empty")
        return None

    if len(deck_name) > DECK_NAME_MAX:
        print(f"\u26a0\ufe0f Too long \u2014 {DECK_NAME_MAX} characters max")
        return None

    try:
        if db.get_deck_id(deck_name) is not None:
            print(f"\u26a0\ufe0f \"{deck_name}\" already exists")
            return None
        deck_id = db.create_deck(deck_name)
    except sqlite3.Error as e:
        logging.error(f"Error adding deck {deck_name!r}: {e}")
        print(f"Error adding deck: {e}")
        return None

    print(f"Deck added: {deck_name}")
    return deck_id


def find_deck(name_or_id: str) -> dict | None:
    """An all-digit argument matching an existing id wins over a deck name."""
    name_or_id = name_or_id.strip()

    if name_or_id.isdigit():
        deck = db.get_deck(int(name_or_id))
        if deck:
            return deck

    deck_id = db.get_deck_id(name_or_id)
    if deck_id is None:
        return None
    return db.get_deck(deck_id)


def _deck_lines(decks: list[dict]) -> str:
    lines = []
    for deck in decks:
        count = deck['card_count']
        lines.append(
            f"  [{deck['id']}] {deck['name']}  \u00b7  "
            f"{count} card{'s' if count != 1 else ''}  \u00b7  {deck['due_count']} due"
        )
    return '\n'.join(lines)


def list_decks(today: date | None = None) -> None:
    today = today or date.today()

    try:
        decks = db.get_decks_with_stats(today)
    except sqlite3.Error as e:
        logging.error(f"Error listing decks: {e}")
        print(f"Error listing decks: {e}")
        return

    if not decks:
        print("No decks yet \u2014 create one with: add deck <name>")
        return

    print(f"\U0001f4da Decks\n{_deck_lines(decks)}")
