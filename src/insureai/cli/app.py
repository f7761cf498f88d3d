"""Main CLI application using Typer."""
import asyncio
import os

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel

from ..conversation import Message
from ..orchestrator import ResponseOrchestrator
from .providers import get_inference_client, require_inference_client

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="insureai",
    help="Conversational insurance assistant backed by a remote inference endpoint",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()

_LEVEL_STYLES = {
    "debug": "dim",
    "info": "cyan",
    "warning": "yellow",
    "error": "red",
}


def _console_debug_callback(level: str, component: str, message: str) -> None:
    """Print debug callback messages to the console."""
    style = _LEVEL_STYLES.get(level, "white")
    console.print(f"[{style}]{level.upper():<7}[/] [dim]\\[{component}][/dim] {message}", highlight=False)


def _print_message(message: Message) -> None:
    if message.is_user:
        return
    console.print(
        Panel(
            message.text,
            title=f"Assistant [{message.timestamp:%H:%M}]",
            title_align="left",
            border_style="blue",
        )
    )


@app.command()
def chat(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print request tracing"
    )
):
    """Interactive chat in the terminal."""
    async def _chat():
        client = require_inference_client(console)
        orchestrator = ResponseOrchestrator(client)
        if verbose:
            orchestrator.set_debug_callback(_console_debug_callback)

        try:
            console.print("[bold blue]InsureAI Assistant[/bold blue]")
            console.print("[dim]Hello! I'm your AI insurance assistant. How can I help you today?[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in ('exit', 'quit', 'q'):
                    console.print("[dim]Goodbye![/dim]")
                    break

                with console.status("[dim]Thinking...[/dim]", spinner="dots"):
                    accepted = await orchestrator.submit(user_input)

                if accepted:
                    _print_message(orchestrator.messages[-1])
        finally:
            await client.close()

    asyncio.run(_chat())


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question to ask the assistant"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print request tracing"
    )
):
    """Ask a single question and print the reply."""
    async def _ask():
        async with require_inference_client(console) as client:
            orchestrator = ResponseOrchestrator(client)
            if verbose:
                orchestrator.set_debug_callback(_console_debug_callback)

            with console.status("[dim]Thinking...[/dim]", spinner="dots"):
                accepted = await orchestrator.submit(question)

            if not accepted:
                console.print("[yellow]Nothing to ask: the question is empty[/yellow]")
                raise typer.Exit(code=1)

            _print_message(orchestrator.messages[-1])
            if orchestrator.last_failure is not None:
                raise typer.Exit(code=2)

    asyncio.run(_ask())


@app.command(name="tui")
def tui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
    dark: bool = typer.Option(
        False,
        "--dark",
        help="Start with the dark theme"
    ),
):
    """Launch interactive TUI chat interface."""
    async def _tui():
        from ..ui import run_textual_tui

        client = require_inference_client(console)
        try:
            await run_textual_tui(
                ResponseOrchestrator(client),
                log_level=log_level,
                theme_name="insure-dark" if dark else "insure-light",
            )
        finally:
            await client.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def health():
    """Check inference configuration."""
    provider = os.getenv("INFERENCE_PROVIDER", "edge").lower()
    console.print(f"[dim]Inference provider: {provider}[/dim]")

    client = get_inference_client(console)
    if client is None:
        console.print("[red]x[/red] Inference client: NOT CONFIGURED")
        raise typer.Exit(code=1)

    console.print(f"[green]+[/green] Inference client: {client.name}")
    asyncio.run(client.close())


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
