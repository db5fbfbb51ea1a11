"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..conversation import (
    ConversationEngine,
    ConversationListener,
    Message,
    Notice,
    Sender,
    Severity,
    classify,
)
from ..languages import SUPPORTED_LANGUAGES
from .providers import get_locator, get_settings

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="ayurakshak",
    help="AYURAKSHAK: multilingual health-information assistant",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

SEVERITY_STYLES = {
    Severity.NORMAL: "cyan",
    Severity.WARNING: "yellow",
    Severity.EMERGENCY: "bold red",
}


class ConsoleListener(ConversationListener):
    """Prints engine events to the terminal."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def on_message(self, message: Message) -> None:
        if message.sender == Sender.USER:
            # The user already sees what they typed; echo only attachments
            if message.content.startswith(("📎", "📍")):
                self.console.print(Text.assemble(("You: ", "bold yellow"), message.content))
            return
        print_reply(self.console, message.content, message.severity)

    def on_typing_changed(self, is_typing: bool) -> None:
        if is_typing:
            self.console.print("[dim italic]AYURAKSHAK is typing...[/dim italic]")

    def on_notice(self, notice: Notice) -> None:
        self.console.print(f"[red]{notice.title}:[/red] {notice.description}")


def print_reply(con: Console, text: str, severity: Severity) -> None:
    """Render an assistant reply as a panel colored by severity."""
    style = SEVERITY_STYLES[severity]
    con.print(Panel(
        Text(text),
        title=f"AYURAKSHAK \\[{severity.value}]",
        title_align="left",
        border_style=style,
    ))


@app.command()
def ask(
    text: str = typer.Argument(..., help="Health question or symptom description"),
):
    """Classify one message and print the canned reply."""
    if not text.strip():
        console.print("[yellow]Nothing to ask[/yellow]")
        raise typer.Exit(code=1)
    reply = classify(text)
    print_reply(console, reply.text, reply.severity)
    console.print(f"[dim]Rule: {reply.rule}[/dim]")


@app.command()
def languages():
    """List the supported languages."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Code", style="dim", width=6)
    table.add_column("Language", style="cyan")
    table.add_column("Native name")

    for lang in SUPPORTED_LANGUAGES:
        table.add_row(lang.code, lang.name, lang.native_name)

    console.print(table)


@app.command()
def chat(
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Display language code (en, hi, te, or)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show engine trace messages"
    ),
):
    """Interactive console chat."""
    settings = get_settings(console)

    async def _chat():
        engine = ConversationEngine(
            language=language or settings.default_language,
            settings=settings,
            listener=ConsoleListener(console),
        )
        if verbose:
            engine.set_debug_callback(
                lambda level, component, message: console.print(
                    f"[dim]{level.upper():<7} \\[{component}] {message}[/dim]"
                )
            )
        locator = get_locator(settings)

        console.print(f"[bold cyan]AYURAKSHAK[/bold cyan] [dim]({engine.language_name})[/dim]")
        console.print("[dim]Commands: /file <path>, /location. Type 'exit', 'quit', or 'q' to leave[/dim]\n")
        for message in engine.transcript:
            print_reply(console, message.content, message.severity)

        try:
            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                command = user_input.strip()
                if command.lower() in ("exit", "quit", "q"):
                    console.print("[dim]Goodbye![/dim]")
                    break

                if command.startswith("/file"):
                    path = command[len("/file"):].strip()
                    if not path:
                        console.print("[yellow]Usage: /file <path>[/yellow]")
                        continue
                    engine.attach_file(path)
                elif command == "/location":
                    await engine.share_location(locator)
                else:
                    engine.submit(user_input)

                await engine.wait_for_pending()
        finally:
            engine.close()

    try:
        asyncio.run(_chat())
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e


@app.command(name="tui")
def tui_command(
    language: str | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Skip the language picker and open a chat in this language"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI."""
    settings = get_settings(console)

    async def _tui():
        from ..ui import run_textual_tui

        await run_textual_tui(settings=settings, language=language, log_level=log_level)

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass
    finally:
        console.print("\n[dim]Goodbye![/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
