"""CLI: livy statements list|get|run|cancel"""

import json

import click
from rich.console import Console
from rich.table import Table

from livy_client.models.session import SessionKind

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


def _print_output(statement) -> None:
    output = statement.output
    if output is None:
        console.print(f"[dim]Statement {_show(statement.id)} is {_show(statement.state)}, no output yet.[/dim]")
        return
    if output.is_error:
        console.print(f"{_show(output.ename)}: {_show(output.evalue)}", style="red", markup=False)
        for line in output.traceback or []:
            click.echo(line.rstrip("\n"))
        return
    data = output.data or {}
    if "text/plain" in data:
        click.echo(data["text/plain"])
    elif data:
        click.echo(json.dumps(data, indent=2))


@click.group()
def statements():
    """Statements inside an interactive session."""


@statements.command("list")
@click.argument("session_id", type=int)
@click.option("--json-output", "--json", is_flag=True)
def statements_list(session_id, json_output):
    """List statements of a session."""

    async def _list():
        async with _get_client() as client:
            result = await client.list_statements(session_id)
        if json_output:
            _print_json(result)
            return
        table = Table(title=f"Statements of session {session_id} ({_show(result.total_statements)} total)")
        table.add_column("ID", style="bold")
        table.add_column("State")
        table.add_column("Status")
        table.add_column("Code")
        for st in result.items:
            status = st.output.status if st.output else None
            code = (st.code or "").splitlines()[0] if st.code else "-"
            table.add_row(_show(st.id), _show(st.state), _show(status), code)
        console.print(table)

    _run(_list())


@statements.command("get")
@click.argument("session_id", type=int)
@click.argument("statement_id", type=int)
@click.option("--json-output", "--json", is_flag=True)
def statements_get(session_id, statement_id, json_output):
    """Show a statement and its output."""

    async def _get():
        async with _get_client() as client:
            statement = await client.get_statement(session_id, statement_id)
        if json_output:
            _print_json(statement)
        else:
            _print_output(statement)

    _run(_get())


@statements.command("run")
@click.argument("session_id", type=int)
@click.argument("code")
@click.option("--kind", type=click.Choice([k.value for k in SessionKind]), default=None,
              help="Statement language (shared sessions only)")
def statements_run(session_id, code, kind):
    """Submit code; prints the new statement id. Poll with `statements get`."""

    async def _submit():
        async with _get_client() as client:
            statement = await client.run_statement(session_id, code, SessionKind(kind) if kind else None)
        console.print(f"[green]Statement {_show(statement.id)} submitted ({_show(statement.state)})[/green]")

    _run(_submit())


@statements.command("cancel")
@click.argument("session_id", type=int)
@click.argument("statement_id", type=int)
def statements_cancel(session_id, statement_id):
    """Cancel a running statement."""

    async def _cancel():
        async with _get_client() as client:
            ack = await client.cancel_statement(session_id, statement_id)
        console.print(f"[green]Statement {statement_id}: {ack.msg or 'cancel requested'}[/green]")

    _run(_cancel())
