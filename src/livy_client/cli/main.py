"""
Livy CLI: `livy` command.

Commands:
  livy sessions <cmd>     Interactive session lifecycle and logs
  livy statements <cmd>   Run, inspect and cancel statements
  livy batches <cmd>      Batch job inspection
  livy config <cmd>       Saved connection settings

Exit codes: 0 ok, 1 usage/config, 3 transport failure, 4 unexpected HTTP
status, 5 undecodable response.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Optional

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install livy-client[cli]")

from livy_client import __version__
from livy_client.client import AsyncLivy
from livy_client.errors import DecodeError, LivyError, TransportError, UnexpectedStatus
from livy_client.models.base import LivyModel
from livy_client.transport.http import DEFAULT_TIMEOUT

console = Console()
CONFIG_FILE = Path.home() / ".livy" / "config.json"

EXIT_USAGE = 1
EXIT_CODES = {
    TransportError: 3,
    UnexpectedStatus: 4,
    DecodeError: 5,
}


def exit_code_for(error: LivyError) -> int:
    for kind, code in EXIT_CODES.items():
        if isinstance(error, kind):
            return code
    return EXIT_USAGE


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _get_client() -> AsyncLivy:
    """Options and env vars first, then ~/.livy/config.json."""
    ctx = click.get_current_context()
    opts: dict[str, Any] = ctx.find_root().obj or {}
    cfg = _load_config()
    url = opts.get("url") or cfg.get("url")
    if not url:
        console.print("[red]No Livy URL configured. Pass --url, set LIVY_URL or run `livy config set --url`.[/red]")
        raise SystemExit(EXIT_USAGE)
    negotiate = opts.get("negotiate_auth")
    if negotiate is None:
        negotiate = bool(cfg.get("negotiate_auth", False))
    try:
        return AsyncLivy(
            url,
            negotiate_auth=negotiate,
            username=opts.get("username") or cfg.get("username"),
            timeout=float(cfg.get("timeout", DEFAULT_TIMEOUT)),
        )
    except ImportError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(EXIT_USAGE)


def _run(coro):
    try:
        return asyncio.run(coro)
    except LivyError as e:
        console.print(str(e), style="red", markup=False)
        raise SystemExit(exit_code_for(e))


def _print_json(model: LivyModel) -> None:
    click.echo(model.model_dump_json(by_alias=True, indent=2))


def _show(value: Optional[Any]) -> str:
    if value is None:
        return "-"
    return getattr(value, "value", str(value))


@click.group()
@click.version_option(__version__)
@click.option("--url", envvar="LIVY_URL", default=None, help="Livy server URL, e.g. http://host:8998")
@click.option("--negotiate/--no-negotiate", "negotiate_auth", envvar="LIVY_NEGOTIATE", default=None,
              help="Use SPNEGO (Kerberos) authentication")
@click.option("--username", envvar="LIVY_USERNAME", default=None, help="Basic-auth user (password from ~/.netrc)")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr")
@click.pass_context
def main(ctx, url, negotiate_auth, username, verbose):
    """Livy CLI: inspect and drive Spark sessions on an Apache Livy server."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    ctx.obj = {"url": url, "negotiate_auth": negotiate_auth, "username": username}


# Register subcommands from separate modules
from livy_client.cli.batches import batches
from livy_client.cli.config import config
from livy_client.cli.sessions import sessions
from livy_client.cli.statements import statements

main.add_command(sessions)
main.add_command(statements)
main.add_command(batches)
main.add_command(config)


if __name__ == "__main__":
    main()
