"""CLI: livy sessions list|get|state|delete|log|create"""

import click
from rich.console import Console
from rich.table import Table

from livy_client.models.session import NewSessionRequest, SessionKind

console = Console()


def _get_client():
    from livy_client.cli.main import _get_client
    return _get_client()


def _run(coro):
    from livy_client.cli.main import _run
    return _run(coro)


def _print_json(model):
    from livy_client.cli.main import _print_json
    _print_json(model)


def _show(value):
    from livy_client.cli.main import _show
    return _show(value)


def _print_session(session) -> None:
    table = Table(title=f"Session {_show(session.id)}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Kind", _show(session.kind))
    table.add_row("State", _show(session.state))
    table.add_row("Owner", _show(session.owner))
    table.add_row("Proxy user", _show(session.proxy_user))
    table.add_row("App ID", _show(session.app_id))
    for key, value in (session.app_info or {}).items():
        table.add_row(f"appInfo.{key}", _show(value))
    console.print(table)


@click.group()
def sessions():
    """Interactive session management."""


@sessions.command("list")
@click.option("--from", "from_", default=None, type=click.IntRange(min=0))
@click.option("--size", default=None, type=click.IntRange(min=0))
@click.option("--json-output", "--json", is_flag=True)
def sessions_list(from_, size, json_output):
    """List sessions."""

    async def _list():
        async with _get_client() as client:
            result = await client.list_sessions(from_, size)
        if json_output:
            _print_json(result)
            return
        table = Table(title=f"Sessions ({_show(result.total)} total)")
        table.add_column("ID", style="bold")
        table.add_column("Kind")
        table.add_column("State")
        table.add_column("Owner")
        table.add_column("App ID")
        for s in result.items:
            table.add_row(_show(s.id), _show(s.kind), _show(s.state), _show(s.owner), _show(s.app_id))
        console.print(table)

    _run(_list())


@sessions.command("get")
@click.argument("session_id", type=int)
@click.option("--json-output", "--json", is_flag=True)
def sessions_get(session_id, json_output):
    """Show one session."""

    async def _get():
        async with _get_client() as client:
            session = await client.get_session(session_id)
        if json_output:
            _print_json(session)
        else:
            _print_session(session)

    _run(_get())


@sessions.command("state")
@click.argument("session_id", type=int)
def sessions_state(session_id):
    """Print the bare session state."""

    async def _state():
        async with _get_client() as client:
            result = await client.get_session_state(session_id)
        click.echo(_show(result.state))

    _run(_state())


@sessions.command("delete")
@click.argument("session_id", type=int)
def sessions_delete(session_id):
    """Kill a session."""

    async def _delete():
        async with _get_client() as client:
            with console.status("Deleting..."):
                await client.delete_session(session_id)
        console.print(f"[green]Session {session_id} deleted.[/green]")

    _run(_delete())


@sessions.command("log")
@click.argument("session_id", type=int)
@click.option("--from", "from_", default=None, type=click.IntRange(min=0))
@click.option("--size", default=None, type=click.IntRange(min=0))
def sessions_log(session_id, from_, size):
    """Print driver log lines."""

    async def _log():
        async with _get_client() as client:
            result = await client.get_session_logs(session_id, from_, size)
        for line in result.log or []:
            click.echo(line)

    _run(_log())


@sessions.command("create")
@click.option("--kind", type=click.Choice([k.value for k in SessionKind]), default=None)
@click.option("--name", default=None)
@click.option("--proxy-user", default=None)
@click.option("--conf", multiple=True, help="Spark conf as key=value, repeatable")
@click.option("--json-output", "--json", is_flag=True)
def sessions_create(kind, name, proxy_user, conf, json_output):
    """Start a new interactive session."""
    spark_conf = {}
    for item in conf:
        key, sep, value = item.partition("=")
        if not sep:
            raise click.BadParameter(f"expected key=value, got {item!r}", param_hint="--conf")
        spark_conf[key] = value
    request = NewSessionRequest(
        kind=SessionKind(kind) if kind else None,
        name=name,
        proxy_user=proxy_user,
        conf=spark_conf or None,
    )

    async def _create():
        async with _get_client() as client:
            with console.status("Creating session..."):
                session = await client.create_session(request)
        if json_output:
            _print_json(session)
        else:
            console.print(f"[green]Session created: {_show(session.id)} ({_show(session.state)})[/green]")

    _run(_create())
