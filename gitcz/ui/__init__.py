"""Terminal front end for gitcz."""

from gitcz.ui.app import build_application, build_key_bindings, run_session


__all__ = [
    "build_application",
    "build_key_bindings",
    "run_session",
]
