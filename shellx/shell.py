"""Interactive shell loop with banner and signal handling."""

from __future__ import annotations

import signal
import sys
from dataclasses import dataclass
from typing import IO, Optional, Sequence

from shellx.pipeline import run_pipeline
from shellx.tokenizer import tokenize

PROMPT = "\001\033[31m\002SHELLX 🔥 > \001\033[0m\002"
INTERRUPTED_STATUS = 130

_BANNER_ART = (
    "    ███████╗██╗  ██╗███████╗██╗     ██╗     ██╗  ██╗",
    "    ██╔════╝██║  ██║██╔════╝██║     ██║     ╚██╗██╔╝",
    "    ███████╗███████║█████╗  ██║     ██║      ╚███╔╝ ",
    "    ╚════██║██╔══██║██╔══╝  ██║     ██║      ██╔██╗ ",
    "    ███████║██║  ██║███████╗███████╗███████╗██╔╝ ██╗",
    "    ╚══════╝╚═╝  ╚═╝╚══════╝╚══════╝╚══════╝╚═╝  ╚═╝",
)


@dataclass
class _ShellState:
    exit_status: int = 0


_state = _ShellState()


def print_banner(out: Optional[IO[str]] = None) -> None:
    """Write the coloured start-up banner."""
    out = sys.stdout if out is None else out
    out.write("\n")
    for row in _BANNER_ART:
        out.write(f"\033[1;34m{row}\n")
    out.write("\033[0m\n")
    out.flush()


def _sigint_handler(signum, frame) -> None:
    sys.stdout.write("\n")
    sys.stdout.flush()
    _state.exit_status = INTERRUPTED_STATUS


def install_signal_handlers() -> None:
    """Handle Ctrl-C by starting a new line and ignore Ctrl-\\."""
    signal.signal(signal.SIGINT, _sigint_handler)
    if hasattr(signal, "SIGQUIT"):
        signal.signal(signal.SIGQUIT, signal.SIG_IGN)


def _enable_line_editing() -> None:
    try:
        import readline  # noqa: F401  (enables editing and history for input())
    except ImportError:
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive shell until ``exit`` or end of input."""
    install_signal_handlers()
    _enable_line_editing()
    run_pipeline("clear")
    print_banner()
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            sys.stderr.write("exit\n")
            sys.stderr.flush()
            break
        if line == "exit":
            break
        for token in tokenize(line):
            print(f"Token: {token.value:<10} | Type: {int(token.type)}")
        run_pipeline(line)
    sys.stdout.flush()
    return 0