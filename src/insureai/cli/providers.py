"""Provider factory functions for CLI.

Centralizes creation of the inference client from environment variables.
Hides configuration details from command implementations.
"""

import os

from rich.console import Console

from ..inference import InferenceClient, create_inference_client

_console = Console()

DEFAULT_PROVIDER = "edge"


def get_inference_client(console: Console | None = None) -> InferenceClient | None:
    """Create an inference client from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Inference client instance, or None if not configured

    Environment variables:
        INFERENCE_PROVIDER: edge, openai, deepseek, anthropic, gemini (default: edge)
        SUPABASE_URL: Supabase project URL (for edge)
        SUPABASE_ANON_KEY: Supabase anon key (for edge)
        INSURANCE_AI_FUNCTION: Edge function name (default: insurance-ai)
        INFERENCE_TIMEOUT: Request timeout in seconds for edge (default: 60)
        OPENAI_API_KEY / OPENAI_CHAT_MODEL (default: gpt-4o-mini)
        DEEPSEEK_API_KEY
        ANTHROPIC_API_KEY / ANTHROPIC_MODEL (default: claude-sonnet-4-20250514)
        GEMINI_API_KEY / GEMINI_MODEL (default: gemini-2.5-flash)
    """
    con = console or _console
    provider = os.getenv("INFERENCE_PROVIDER", DEFAULT_PROVIDER).lower()

    if provider in ("edge", "supabase"):
        url = os.getenv("SUPABASE_URL")
        anon_key = os.getenv("SUPABASE_ANON_KEY")
        if not url or not anon_key:
            con.print("[yellow]Warning: SUPABASE_URL or SUPABASE_ANON_KEY not set[/yellow]")
            return None
        try:
            timeout = float(os.getenv("INFERENCE_TIMEOUT", "60"))
        except ValueError:
            con.print("[yellow]Warning: INFERENCE_TIMEOUT is not a number, using 60s[/yellow]")
            timeout = 60.0
        return create_inference_client(
            "edge",
            url=url,
            anon_key=anon_key,
            function_name=os.getenv("INSURANCE_AI_FUNCTION", "insurance-ai"),
            timeout=timeout,
        )

    elif provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: OPENAI_API_KEY not set[/yellow]")
            return None
        model = os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
        return create_inference_client("openai", api_key=api_key, model=model)

    elif provider == "deepseek":
        api_key = os.getenv("DEEPSEEK_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: DEEPSEEK_API_KEY not set[/yellow]")
            return None
        return create_inference_client("deepseek", api_key=api_key)

    elif provider in ("anthropic", "claude"):
        api_key = os.getenv("ANTHROPIC_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: ANTHROPIC_API_KEY not set[/yellow]")
            return None
        model = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
        return create_inference_client("anthropic", api_key=api_key, model=model)

    elif provider == "gemini":
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: GEMINI_API_KEY not set[/yellow]")
            return None
        model = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        return create_inference_client("gemini", api_key=api_key, model=model)

    con.print(f"[red]Error: Unknown inference provider: {provider}[/red]")
    return None


def require_inference_client(console: Console | None = None) -> InferenceClient:
    """Get the inference client, exiting if it is not configured.

    Args:
        console: Optional Rich console for output

    Returns:
        Inference client instance

    Raises:
        SystemExit: If no client could be configured
    """
    import typer

    con = console or _console
    client = get_inference_client(con)
    if not client:
        con.print("[red]Error: inference provider not configured[/red]")
        raise typer.Exit(code=1)
    return client
