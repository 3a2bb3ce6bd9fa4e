#!/usr/bin/env python3
"""recordgate CLI for inspecting and editing records."""

import argparse
from typing import List

import questionary
from rich.console import Console
from rich.table import Table

from recordgate import db
from recordgate.account import Account, AccountRepository
from recordgate.errors import RecordGateError

console = Console()


def print_accounts(accounts: List[Account], title: str) -> None:
    if not accounts:
        console.print("[red]No accounts found.[/]")
        return
    table = Table(title=title)
    for column in ("id", "name", "industry", "website", "phone"):
        table.add_column(column)
    for account in accounts:
        table.add_row(
            account.id,
            *(value or "" for value in account.fields().values()),
        )
    console.print(table)


def init_db():
    """Apply schema migrations."""
    applied = db.apply_migrations()
    console.print(f"[green]Applied {len(applied)} migration(s).[/]")
    for name in applied:
        console.print(f"  {name}")


def list_accounts(limit: int):
    """Show up to `limit` accounts."""
    print_accounts(AccountRepository().list(limit), title=f"Accounts (limit {limit})")


def search_accounts(term: str):
    """Show accounts whose name contains `term`."""
    print_accounts(AccountRepository().search(term), title=f"Accounts matching '{term}'")


def add_account():
    """Prompt for a new account and create it."""
    name = questionary.text("Name:").ask()
    if not name:
        console.print("[dim]Cancelled.[/]")
        return
    account = Account(
        name=name,
        industry=questionary.text("Industry:").ask() or None,
        website=questionary.text("Website:").ask() or None,
        phone=questionary.text("Phone:").ask() or None,
    )

    console.print(f"[yellow]Will create account [bold]{account.name}[/].[/]")
    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    AccountRepository().create([account])
    console.print(f"[green]Created {account.name} (id={account.id}).[/]")


def delete_account(limit: int):
    """Select an account and delete it."""
    repository = AccountRepository()
    accounts = repository.list(limit)
    if not accounts:
        console.print("[red]No accounts found.[/]")
        return
    account = questionary.select(
        "Select an account:",
        choices=[questionary.Choice(title=f"{a.name} ({a.id})", value=a) for a in accounts],
    ).ask()
    if account is None:
        return

    console.print(f"[yellow]Will delete account [bold]{account.name}[/].[/]")
    if not questionary.confirm("Proceed with these changes?").ask():
        console.print("[dim]Cancelled.[/]")
        return

    repository.delete([account])
    console.print(f"[green]Deleted {account.name}.[/]")


def main(argv=None):
    parser = argparse.ArgumentParser(description="recordgate CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Apply schema migrations")
    list_parser = subparsers.add_parser("list-accounts", help="List accounts")
    list_parser.add_argument("--limit", type=int, default=20)
    search_parser = subparsers.add_parser("search-accounts", help="Search accounts by name")
    search_parser.add_argument("term")
    subparsers.add_parser("add-account", help="Create an account")
    delete_parser = subparsers.add_parser("delete-account", help="Delete an account")
    delete_parser.add_argument("--limit", type=int, default=50)

    args = parser.parse_args(argv)

    try:
        if args.command == "init-db":
            init_db()
        elif args.command == "list-accounts":
            list_accounts(args.limit)
        elif args.command == "search-accounts":
            search_accounts(args.term)
        elif args.command == "add-account":
            add_account()
        elif args.command == "delete-account":
            delete_account(args.limit)
    except RecordGateError as exc:
        console.print(f"[red]{exc}[/]")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
