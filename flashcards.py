import logging
import sqlite3
import sys

import config  # noqa: F401  (loads .env, configures logging)
from database.database import init_db
import handlers.cards as hand_card
import handlers.decks as hand_deck
import handlers.help as hand_help
import handlers.review as hand_review


def add(args: list[str]) -> None:
    if not args:
        print("Missing <subcommand>")
        return

    command = args[0]
    if command == 'deck':
        if len(args) < 2:
            print("Missing <deck_name>")
            return
        hand_deck.add_deck(' '.join(args[1:]))

    elif command == 'cards':
        if len(args) < 2:
            print("Missing <path>")
            return
        hand_card.import_cards(args[1])

    else:
        print(f"Unknown add command: {command}")


def quiz(args: list[str]) -> None:
    if not args:
        print("Missing <deck>")
        return
    hand_review.quiz(' '.join(args))


def init(args: list[str]) -> None:
    try:
        init_db()
    except sqlite3.Error as e:
        logging.error(f"Error creating schema: {e}")
        print(f"Error creating database: {e}")
        return
    print("Database ready")


COMMANDS = {
    'init': init,
    'add': add,
    'quiz': quiz,
    'decks': lambda args: hand_deck.list_decks(),
    'help': lambda args: hand_help.help_command(),
}


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    logging.info(f"Running main: {args}")

    if not args:
        print("Missing <command>")
        return

    command = args[0]
    handler = COMMANDS.get(command)
    if handler is None:
        print(f"Unknown command: {command}")
        return

    handler(args[1:])


if __name__ == '__main__':
    main()
