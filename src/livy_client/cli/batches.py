"""CLI: livy batches list|get|state|delete|log"""

import click
from rich.console import Console
from rich.table import Table

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


@click.group()
def batches():
    """Batch job inspection."""


@batches.command("list")
@click.option("--from", "from_", default=None, type=click.IntRange(min=0))
@click.option("--size", default=None, type=click.IntRange(min=0))
@click.option("--json-output", "--json", is_flag=True)
def batches_list(from_, size, json_output):
    """List batches."""

    async def _list():
        async with _get_client() as client:
            result = await client.list_batches(from_, size)
        if json_output:
            _print_json(result)
            return
        table = Table(title=f"Batches ({_show(result.total)} total)")
        table.add_column("ID", style="bold")
        table.add_column("State")
        table.add_column("App ID")
        for b in result.items:
            table.add_row(_show(b.id), _show(b.state), _show(b.app_id))
        console.print(table)

    _run(_list())


@batches.command("get")
@click.argument("batch_id", type=int)
def batches_get(batch_id):
    """Print one batch as JSON."""

    async def _get():
        async with _get_client() as client:
            _print_json(await client.get_batch(batch_id))

    _run(_get())


@batches.command("state")
@click.argument("batch_id", type=int)
def batches_state(batch_id):
    async def _state():
        async with _get_client() as client:
            result = await client.get_batch_state(batch_id)
        click.echo(_show(result.state))

    _run(_state())


@batches.command("delete")
@click.argument("batch_id", type=int)
def batches_delete(batch_id):
    """Kill a batch job."""

    async def _delete():
        async with _get_client() as client:
            await client.delete_batch(batch_id)
        console.print(f"[green]Batch {batch_id} deleted.[/green]")

    _run(_delete())


@batches.command("log")
@click.argument("batch_id", type=int)
@click.option("--from", "from_", default=None, type=click.IntRange(min=0))
@click.option("--size", default=None, type=click.IntRange(min=0))
def batches_log(batch_id, from_, size):
    async def _log():
        async with _get_client() as client:
            result = await client.get_batch_logs(batch_id, from_, size)
        for line in result.log or []:
            click.echo(line)

    _run(_log())
