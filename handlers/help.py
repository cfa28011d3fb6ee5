HELP_TEXT = (
    "\u2753 How it works\n\n"
    "  init                    create the database\n"
    "  add deck <name>         create a deck\n"
    "  add cards <path>        import cards from a file\n"
    "  decks                   list decks and due counts\n"
    "  quiz <deck name or id>  review due cards\n\n"
    "Import file:\n"
    "  name: <deck name>\n"
    "  ----\n"
    "  front <> back\n"
    "  ----\n"
    "  front <> back\n\n"
    "During a quiz: space flips the card, y / n grades it, q stops.\n"
    "I'll schedule each card so you review it "
    "right before you'd forget \U0001f9e0"
)


def help_command() -> None:
    print(HELP_TEXT)
