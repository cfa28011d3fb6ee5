import logging
import sqlite3
from contextlib import contextmanager

from database.schema import deck_schema, flashcard_schema, flashcard_meta_schema, flashcard_log_schema
from config import DB_PATH


# DECKS COMMANDS =============================================

def create_deck(name):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('INSERT INTO decks (name) VALUES (?)', (name,))
        logging.info(f"Created deck: {name}")
        return cursor.lastrowid


def get_deck_id(name):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('SELECT id FROM decks WHERE name = ?', (name,))
        row = cursor.fetchone()
        if row:
            return row['id']
        return None


def get_deck(deck_id):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute('SELECT id, name FROM decks WHERE id = ?', (deck_id,))
        row = cursor.fetchone()
        if row:
            return dict(row)
        return None


def get_decks_with_stats(today):
    """Get all decks with card count and due count in a single query."""
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            """SELECT d.id, d.name,
                      COUNT(f.id) AS card_count,
                      COALESCE(SUM(CASE WHEN m.next <= ? THEN 1 ELSE 0 END), 0) AS due_count
               FROM decks d
               LEFT JOIN flashcards f ON f.deck_id = d.id
               LEFT JOIN flashcard_meta m ON m.question_id = f.id
               GROUP BY d.id
               ORDER BY d.name
            """,
            (today.isoformat(),)
        )
        return [dict(row) for row in cursor.fetchall()]


# CARDS COMMANDS =============================================

def insert_flashcard(deck_id, front, back):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            'INSERT INTO flashcards (deck_id, front, back) VALUES (?, ?, ?)',
            (deck_id, front, back)
        )
        return cursor.lastrowid


def insert_flashcard_meta(question_id, added, next_due, level):
    with get_db() as conn:
        conn.execute(
            'INSERT INTO flashcard_meta (question_id, added, next, level) VALUES (?, ?, ?, ?)',
            (question_id, added.isoformat(), next_due.isoformat(), level)
        )


def get_cards_in_deck(deck_id):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            """SELECT f.id, f.deck_id, f.front, f.back, m.added, m.next, m.level
               FROM flashcards f
               LEFT JOIN flashcard_meta m ON m.question_id = f.id
               WHERE f.deck_id = ?
               ORDER BY f.id
            """,
            (deck_id,)
        )
        return [dict(row) for row in cursor.fetchall()]


# REVIEW COMMANDS ============================================

def get_due_cards(deck_id, today):
    """Cards of the deck whose next review date is today or earlier.

    Cards without a metadata row are never due.
    """
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            """SELECT f.id, f.deck_id, f.front, f.back, m.next, m.level
               FROM flashcards f
               JOIN flashcard_meta m ON m.question_id = f.id
               WHERE f.deck_id = ? AND m.next <= ?
               ORDER BY f.id
            """,
            (deck_id, today.isoformat())
        )
        return [dict(row) for row in cursor.fetchall()]


def update_flashcard_meta(question_id, next_due, level):
    with get_db() as conn:
        conn.execute(
            'UPDATE flashcard_meta SET next = ?, level = ? WHERE question_id = ?',
            (next_due.isoformat(), level, question_id)
        )


def insert_flashcard_log(question_id, answer):
    with get_db() as conn:
        conn.execute(
            'INSERT INTO flashcard_log (question_id, answer) VALUES (?, ?)',
            (question_id, bool(answer))
        )


def get_card_log(question_id):
    with get_db() as conn:
        cursor = conn.cursor()
        cursor.execute(
            'SELECT answer FROM flashcard_log WHERE question_id = ? ORDER BY rowid',
            (question_id,)
        )
        return [bool(row['answer']) for row in cursor.fetchall()]


# DB CONNECTION ==============================================

@contextmanager
def get_db():
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row

    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db():
    with get_db() as conn:
        conn.execute(deck_schema)
        conn.execute(flashcard_schema)
        conn.execute(flashcard_meta_schema)
        conn.execute(flashcard_log_schema)
