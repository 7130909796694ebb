"""Command line front end for the finance tracker."""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

from .dao import TransactionDao
from .database import DatabaseError, DatabaseManager, default_database_path
from .model import TransactionModel
from .transaction import Transaction, TransactionType


def _kind_code(text: str) -> int:
    return TransactionType(text).code()


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


def _add_entry_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--type",
        dest="kind",
        choices=[kind.value for kind in TransactionType],
        default=TransactionType.EXPENSE.value,
    )
    parser.add_argument("amount", type=float)
    parser.add_argument("--date", type=datetime.fromisoformat, default=None)
    parser.add_argument("--description", default="")
    parser.add_argument("--category", default="")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="financetracker", description="Track income and expenses."
    )
    parser.add_argument("--db", type=Path, default=None, help="database file")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="show all transactions")

    add = commands.add_parser("add", help="record a transaction")
    _add_entry_arguments(add)

    update = commands.add_parser("update", help="change a transaction")
    update.add_argument("id", type=int)
    _add_entry_arguments(update)

    delete = commands.add_parser("delete", help="remove a transaction")
    delete.add_argument("id", type=int)
    return parser


def _format_row(tx: Transaction) -> str:
    date = tx.date.isoformat(timespec="seconds") if tx.date else ""
    return "\t".join(
        [str(tx.id), tx.kind.value, f"{tx.amount:.2f}", date, tx.description, tx.category]
    )


def _run(model: TransactionModel, args: argparse.Namespace) -> int:
    if args.command == "list":
        for tx in model:
            print(_format_row(tx))
        return 0
    if args.command == "add":
        new_id = model.add_transaction(
            _kind_code(args.kind),
            args.amount,
            args.date or _now(),
            args.description,
            args.category,
        )
        print(new_id)
        return 0
    if args.command == "update":
        found = model.update_transaction(
            args.id,
            _kind_code(args.kind),
            args.amount,
            args.date or _now(),
            args.description,
            args.category,
        )
    else:
        found = model.delete_transaction(args.id)
    if not found:
        print(f"no transaction with id {args.id}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return an exit status."""
    args = _build_parser().parse_args(argv)
    path = args.db if args.db is not None else default_database_path()
    try:
        with DatabaseManager(path) as manager:
            model = TransactionModel(TransactionDao(manager))
            return _run(model, args)
    except DatabaseError as exc:
        print(f"database error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())