"""b2fs CLI - Main commands."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

app = typer.Typer(
    name="b2fs",
    help="Backblaze B2 filesystem agent",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)

CacheDirOption = typer.Option(
    None, "--cache-dir", envvar="B2FS_CACHE_DIR",
    help="Directory holding the session cache (defaults to the temp dir)"
)


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def configure_logging(verbose: bool) -> None:
    """Route b2fs logs to stderr; diagnostics only under --verbose."""
    from b2fs import setup_logging
    
    level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(level=level, format="B2FS: %(message)s")
    setup_logging(level)


@app.command()
def auth(
    config: Path = typer.Option(Path("b2fs.yml"), "--config", "-c", help="Account config file"),
    cache_dir: Optional[Path] = CacheDirOption,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug diagnostics"),
):
    """Resolve a B2 session from the cache or by authorizing the account."""
    from b2fs import Bootstrap, CredentialCache, B2AuthError, describe_failure
    
    configure_logging(verbose)
    bootstrap = Bootstrap(config, storage=CredentialCache(cache_dir))
    
    try:
        session = run_async(bootstrap.run())
    except B2AuthError as e:
        err_console.print(f"[red]B2FS: {describe_failure(e)}[/red]")
        raise typer.Exit(1)
    
    console.print("[green]Authorized[/green]")
    console.print(f"API URL: {session.api_base_url}")
    console.print(f"Download URL: {session.download_base_url}")


@app.command()
def status(cache_dir: Optional[Path] = CacheDirOption):
    """Show the cached session, if any."""
    from b2fs import CredentialCache
    
    cache = CredentialCache(cache_dir)
    session = cache.load()
    if session is None:
        err_console.print("[red]No valid cached session. Run 'b2fs auth' first.[/red]")
        raise typer.Exit(1)
    
    console.print(f"Cache: {cache.path}")
    console.print(f"Token: {session.authorization_token[:6]}...")
    console.print(f"API URL: {session.api_base_url}")
    console.print(f"Download URL: {session.download_base_url}")


@app.command()
def logout(cache_dir: Optional[Path] = CacheDirOption):
    """Delete the cached session."""
    from b2fs import CredentialCache
    
    cache = CredentialCache(cache_dir)
    if cache.exists():
        cache.delete()
        console.print("[green]Session cache removed[/green]")
    else:
        console.print("[yellow]No cached session[/yellow]")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
