"""Terminal front end for a CommitSession, built on prompt_toolkit.

Key presses are decoded into KeyEvents and fed to the session; the session's
text rendering is redrawn after every event.
"""

from prompt_toolkit import Application
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from gitcz.components import QuitRequested
from gitcz.keys import KeyEvent
from gitcz.session import CommitSession, SessionResult

# prompt_toolkit key sequence -> gitcz key name
NAMED_KEYS = {
    ("up",): "up",
    ("down",): "down",
    ("left",): "left",
    ("right",): "right",
    ("tab",): "tab",
    ("s-tab",): "shift+tab",
    ("enter",): "enter",
    ("escape",): "esc",
    ("c-c",): "ctrl+c",
    ("backspace",): "backspace",
    ("delete",): "delete",
    ("home",): "home",
    ("end",): "end",
    ("escape", "enter"): "alt+enter",
}


def build_key_bindings(session: CommitSession) -> KeyBindings:
    """Create key bindings that forward every key press to the session."""
    kb = KeyBindings()

    def dispatch(event: KeyPressEvent, key_event: KeyEvent) -> None:
        try:
            session.handle_event(key_event)
        except QuitRequested:
            event.app.exit(result=SessionResult.QUIT)
            return
        except Exception as e:
            event.app.exit(exception=e)
            return
        if session.finished:
            event.app.exit(result=session.result)

    for keys, name in NAMED_KEYS.items():
        key_event = KeyEvent(name)

        @kb.add(*keys)
        def _(event: KeyPressEvent, key_event: KeyEvent = key_event) -> None:
            dispatch(event, key_event)

    @kb.add(Keys.Any)
    def _(event: KeyPressEvent) -> None:
        if event.data and event.data.isprintable():
            dispatch(event, KeyEvent.rune(event.data))

    return kb


def build_application(session: CommitSession) -> Application:
    control = FormattedTextControl(lambda: session.render(), focusable=True)
    return Application(
        layout=Layout(Window(content=control, wrap_lines=True)),
        key_bindings=build_key_bindings(session),
        full_screen=False,
    )


def run_session(session: CommitSession) -> SessionResult:
    """Run the dialogue until it is committed, declined or quit.

    Raises:
        GitError: If the accepted commit fails.
    """
    return build_application(session).run()
