import logging
import sqlite3
from datetime import date

import database.database as db
import utils.utils as utils


def import_cards(path: str, today: date | None = None) -> int:
    """Bulk-import cards from a text file into the deck named in its header.

    Each card and its scheduling row are inserted separately. A failed insert
    is reported and the import moves on to the next card.

    Returns the number of cards imported with their metadata.
    """
    today = today or date.today()

    try:
        with open(path, encoding='utf-8') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error reading {path}: {e}")
        print(f"Error reading file: {e}")
        return 0

    deck_name, cards = utils.parse_import(content)
    if deck_name is None:
        print("Missing deck header \u2014 first line must be: name: <deck name>")
        return 0

    try:
        deck_id = db.get_deck_id(deck_name)
    except sqlite3.Error as e:
        logging.error(f"Error getting deck id for {deck_name!r}: {e}")
        print(f"Error getting deck id: {e}")
        return 0

    if deck_id is None:
        print(f"Unknown deck: {deck_name}")
        return 0

    logging.info(f"Importing {len(cards)} card(s) into deck {deck_id}")

    imported = 0
    for card in cards:
        try:
            card_id = db.insert_flashcard(deck_id, card['front'], card['back'])
        except sqlite3.Error as e:
            logging.error(f"Error adding flashcard {card['front']!r}: {e}")
            print(f"Error adding flashcard: {e}")
            continue
        print(f"Flashcard added: {card['front']}")

        try:
            db.insert_flashcard_meta(card_id, today, today, 1)
        except sqlite3.Error as e:
            logging.error(f"Error adding flashcard meta for card {card_id}: {e}")
            print(f"Error adding flashcard meta: {e}")
            continue

        imported += 1

    print(f"\u2705 {imported} card{'s' if imported != 1 else ''} added to {deck_name}")
    return imported
