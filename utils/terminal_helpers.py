"""
Terminal wrappers for the review session.

Every handler uses these instead of raw print / input reads.

DISCIPLINE RULE: all callers must
  - Wrap every piece of user-supplied text in html.escape() before embedding it
    in a markup string. User content = card['front'], card['back'], deck names,
    or any field read from the DB or an import file.
  - Never pass raw f-strings with user data directly, they will fail to parse
    or render wrong if the content contains <, > or &.

Safe pattern:
    show(f"Deck: <b>{html.escape(deck_name)}</b>")
"""

import logging
import sys
from xml.parsers.expat import ExpatError

from prompt_toolkit import HTML, print_formatted_text
from prompt_toolkit.application import Application
from prompt_toolkit.input import create_input
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import Layout, Window

logger = logging.getLogger(__name__)


def show(text: str) -> None:
    """Print markup text. Falls back to the raw string if it doesn't parse."""
    try:
        print_formatted_text(HTML(text))
    except (ExpatError, ValueError) as e:
        logger.warning(f"show: bad markup: {e}")
        print(text)


def read_key(keys: tuple[str, ...]) -> str:
    """Block until one of `keys` is pressed and return its name.

    Other keys are swallowed without leaving the prompt.
    """
    bindings = KeyBindings()

    for key in keys:
        def _exit(event, key=key):
            event.app.exit(result=key)
        bindings.add(key)(_exit)

    @bindings.add('<any>')
    def _ignore(event):
        pass

    app: Application[str] = Application(
        layout=Layout(Window(height=0)),
        key_bindings=bindings,
        full_screen=False,
        erase_when_done=True,
    )
    return app.run()


def discard_pending_input() -> None:
    """Drop keypresses typed before the prompt was shown."""
    if not sys.stdin.isatty():
        return

    term_input = create_input()
    with term_input.raw_mode():
        stale = term_input.read_keys()
    stale += term_input.flush_keys()
    if stale:
        logger.info(f"Discarded {len(stale)} buffered key(s)")
