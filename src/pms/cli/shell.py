"""Interactive command loop."""

from __future__ import annotations

from pms.app import Application
from pms.cli.render import Renderer
from pms.commands import Interpreter

QUIT_WORDS = frozenset({"quit", "exit", "q"})


def run_shell(application: Application, interpreter: Interpreter, renderer: Renderer) -> None:
    """Read lines until EOF or a quit word, running each one through the interpreter."""

    renderer.welcome()
    while True:
        try:
            line = renderer.get_user_input()
        except (KeyboardInterrupt, EOFError):
            renderer.info("Goodbye!")
            return

        stripped = line.strip()
        if not stripped:
            continue
        if stripped.lower() in QUIT_WORDS:
            renderer.info("Goodbye!")
            return

        results = interpreter.run(line)
        renderer.results(results)
        if results:
            renderer.songlist(application.active_list, height=application.widget.height)
