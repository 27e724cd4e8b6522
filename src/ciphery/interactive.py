"""Menu-driven front end used when ciphery is started without a subcommand.

Each step asks one question through rich prompts; answers are collected into a
single `CipherRequest` which the caller executes once.
"""

from typing import Optional, TextIO

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.text import Text

from . import __version__
from .models import Algorithm, CipherRequest, FilePath, InlineText, Operation
from .utils import clean_path

EXIT_CHOICE = "exit"
SOURCE_TERMINAL = "terminal"
SOURCE_FILE = "file"


def print_banner(console: Console) -> None:
    title = Text(f"C I P H E R Y  ·  v{__version__}", style="bold cyan")
    subtitle = Text("A lightweight command-line encryption / decryption tool", style="dim")
    hint = Text("Pick your choices below. Choose 'exit' to quit.", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle, "\n\n", hint), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_goodbye(console: Console) -> None:
    console.print("Thanks for using ciphery! Goodbye!", style="dim")


def _select(console: Console, prompt: str, choices, stream: Optional[TextIO]) -> str:
    return Prompt.ask(
        prompt,
        console=console,
        choices=list(choices),
        default=choices[0],
        stream=stream,
    )


def collect_request(console: Console, stream: Optional[TextIO] = None) -> Optional[CipherRequest]:
    """
    Walk the user through operation, algorithm, source and key.

    Returns None when the user picks 'exit' at the first menu.
    """
    operations = [op.value for op in Operation] + [EXIT_CHOICE]
    answer = _select(console, "What would you like to do?", operations, stream)
    if answer == EXIT_CHOICE:
        return None
    operation = Operation(answer)

    for algo in Algorithm:
        console.print(f"  [cyan]{algo.value}[/cyan]  {algo.label}")
    algorithm = Algorithm(_select(console, "Choose an algorithm", [a.value for a in Algorithm], stream))

    source_kind = _select(console, "Where does the text come from?", [SOURCE_TERMINAL, SOURCE_FILE], stream)
    if source_kind == SOURCE_FILE:
        path = Prompt.ask(
            f"Enter the file path of text to {operation.value}", console=console, stream=stream
        )
        source = FilePath(clean_path(path))
    else:
        text = Prompt.ask(f"Enter the text to {operation.value}", console=console, stream=stream)
        source = InlineText(text)

    key = None
    if algorithm.needs_key:
        key = IntPrompt.ask("Enter the key (shift amount)", console=console, stream=stream)

    return CipherRequest(operation=operation, algorithm=algorithm, key=key, source=source)
