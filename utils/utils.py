from utils.constants import CARD_SEPARATOR, SIDE_SEPARATOR


def parse_header(header: str) -> str | None:
    """
    'name: French verbs' -> 'French verbs'
    returns None when there is no ':' or the name is blank.
    """
    _, sep, name = header.partition(':')
    if not sep:
        return None

    name = name.strip()
    return name or None


def parse_cards(chunks: list[str]) -> list[dict[str, str]]:
    """
    returns: [{'front': str, 'back': str}, ...]

    A chunk is a card only if it holds exactly one side separator.
    Anything else is dropped without a word.
    """
    cards: list[dict[str, str]] = []
    for chunk in chunks:
        sides = chunk.split(SIDE_SEPARATOR)
        if len(sides) != 2:
            continue
        cards.append({'front': sides[0].strip(), 'back': sides[1].strip()})
    return cards


def parse_import(content: str) -> tuple[str | None, list[dict[str, str]]]:
    chunks = content.split(CARD_SEPARATOR)
    return parse_header(chunks[0]), parse_cards(chunks[1:])
