from enum import auto, IntEnum

DECK_NAME_MAX = 50

CARD_SEPARATOR = '----'
SIDE_SEPARATOR = '<>'


class ReviewState(IntEnum):
    AWAITING_FLIP = auto()
    AWAITING_GRADE = auto()


# prompt_toolkit key names
FLIP_KEYS = (' ', 'enter')
CORRECT_KEYS = ('y',)
INCORRECT_KEYS = ('n',)
QUIT_KEYS = ('q', 'c-c')
