"""CLI: livy config set|show|clear"""

from typing import Optional

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from livy_client.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from livy_client.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """Saved connection settings (~/.livy/config.json)."""


@config.command("set")
@click.option("--url", default=None, help="Livy server URL")
@click.option("--negotiate/--no-negotiate", "negotiate_auth", default=None, help="Use SPNEGO authentication")
@click.option("--username", default=None, help="Basic-auth user")
@click.option("--timeout", default=None, type=click.FloatRange(min=0, min_open=True), help="Request timeout in seconds")
def config_set(url: Optional[str], negotiate_auth: Optional[bool], username: Optional[str], timeout: Optional[float]):
    """Update saved settings; options not given are left unchanged."""
    cfg = _load_config()
    updates = {"url": url, "negotiate_auth": negotiate_auth, "username": username, "timeout": timeout}
    cfg.update({k: v for k, v in updates.items() if v is not None})
    _save_config(cfg)
    console.print("[dim]Settings saved to ~/.livy/config.json[/dim]")


@config.command("show")
def config_show():
    """Show saved settings."""
    cfg = _load_config()
    if not cfg:
        console.print("[yellow]No saved settings. Run `livy config set --url ...`.[/yellow]")
        return
    for key in sorted(cfg):
        console.print(f"{key} = {cfg[key]}", markup=False)


@config.command("clear")
def config_clear():
    """Forget saved settings."""
    _save_config({})
    console.print("[green]Settings cleared.[/green]")
