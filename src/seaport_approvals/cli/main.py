# seaport_approvals/cli/main.py
import asyncio
import json
import logging
import sys

import click
from rich.console import Console
from rich.table import Table

from ..approval import approved_item_amount, get_approval_actions
from ..config import ApprovalConfig
from ..constants import MAX_INT, ItemType
from ..models import InsufficientApproval, Item

console = Console()

ITEM_TYPE_NAMES = {
    "native": ItemType.NATIVE,
    "erc20": ItemType.ERC20,
    "erc721": ItemType.ERC721,
    "erc1155": ItemType.ERC1155,
    "erc721-criteria": ItemType.ERC721_WITH_CRITERIA,
    "erc1155-criteria": ItemType.ERC1155_WITH_CRITERIA,
}


def parse_item(spec):
    """Parse ``TYPE:TOKEN[:ID]`` (``native`` needs no token) into an Item."""
    parts = spec.split(":")
    type_name = parts[0].strip().lower()
    if type_name not in ITEM_TYPE_NAMES:
        raise ValueError(f"unknown item type '{parts[0]}'")
    item_type = ITEM_TYPE_NAMES[type_name]

    if item_type == ItemType.NATIVE:
        return Item(item_type=item_type)
    if len(parts) not in (2, 3) or not parts[1]:
        raise ValueError(f"expected TYPE:TOKEN[:ID], got '{spec}'")

    identifier = int(parts[2], 0) if len(parts) == 3 else 0
    return Item(item_type=item_type, token=parts[1], identifier_or_criteria=identifier)


def _item_option(ctx, param, value):
    try:
        if isinstance(value, tuple):
            return [parse_item(v) for v in value]
        return parse_item(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _format_amount(amount):
    return "unlimited" if amount == MAX_INT else str(amount)


@click.group()
@click.version_option(version="0.1.0", prog_name="seaport-approvals")
@click.option('--rpc-url', envvar='SEAPORT_RPC_URL', help='JSON-RPC endpoint')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, rpc_url, verbose):
    """Inspect and fix the token approvals an exchange operator needs"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = ApprovalConfig.from_env(rpc_url=rpc_url)


@cli.command()
@click.option('--owner', required=True, help='Address holding the item')
@click.option('--operator', required=True, help='Address that moves the item')
@click.option('--item', 'item', required=True, callback=_item_option,
              help='TYPE:TOKEN[:ID]')
@click.pass_obj
def allowance(config, owner, operator, item):
    """Show how much of an item an operator may move"""
    try:
        amount = asyncio.run(
            approved_item_amount(owner, item, operator, config.connect())
        )
        console.print(f"[bold green]Approved:[/bold green] {_format_amount(amount)}")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        sys.exit(1)


async def _plan(config, operator, items, send):
    w3 = config.connect()
    signer = config.build_signer(w3)
    approvals = [
        InsufficientApproval(
            token=item.token,
            operator=operator,
            item_type=item.item_type,
            identifier_or_criteria=item.identifier_or_criteria,
        )
        for item in items
    ]
    actions = await get_approval_actions(approvals, signer)

    tx_hashes = []
    if send:
        # Sequential so the local-key nonce increments per transaction
        for action in actions:
            tx_hash = await action.transaction_request.send()
            tx_hashes.append(tx_hash.hex() if hasattr(tx_hash, "hex") else str(tx_hash))
    return actions, tx_hashes


@cli.command()
@click.option('--operator', required=True, help='Address to approve')
@click.option('--item', 'items', multiple=True, required=True,
              callback=_item_option, help='TYPE:TOKEN[:ID], repeatable')
@click.option('--json', 'as_json', is_flag=True, help='Print actions as JSON')
@click.option('--send', is_flag=True, help='Submit the approval transactions')
@click.pass_obj
def plan(config, operator, items, as_json, send):
    """Build the approval transactions for an operator"""
    try:
        actions, tx_hashes = asyncio.run(_plan(config, operator, items, send))
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps([a.to_dict() for a in actions], indent=2))
    else:
        table = Table(title="Approval actions")
        table.add_column("Item type", style="cyan")
        table.add_column("To", style="green")
        table.add_column("From", style="yellow")
        table.add_column("Data")
        for action in actions:
            details = action.transaction_request.details
            table.add_row(action.item_type.name, details.to, details.from_, details.data)
        console.print(table)

    for tx_hash in tx_hashes:
        console.print(f"✅ [bold green]Sent[/bold green] {tx_hash}")


if __name__ == "__main__":
    cli()
