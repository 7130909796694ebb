# financetracker

A small personal finance tracker. It records income and expense
transactions in a local SQLite database, with a command line for adding,
changing, removing and listing them, and a list model for use from code.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Command line

    financetracker [--db PATH] COMMAND ...

Without `--db`, the database file `finance.db` in your per-user
application data directory is used. The directory and the
`transactions` table are created when missing.

Commands:

    financetracker list
    financetracker add AMOUNT [--type income|expense] [--date ISODATE]
                              [--description TEXT] [--category TEXT]
    financetracker update ID AMOUNT [--type income|expense] [--date ISODATE]
                                    [--description TEXT] [--category TEXT]
    financetracker delete ID

- `list` prints one tab-separated line per transaction, newest date
  first: id, type (`income` or `expense`), amount with two decimals,
  date, description, category.
- `add` stores a transaction and prints its new id. The type defaults to
  `expense` and the date to the current time.
- `update` replaces every field of the transaction with the given id,
  with the same defaults as `add`.
- `delete` removes the transaction with the given id.

`update` and `delete` print a message and exit with status 1 when no
transaction has that id. A database failure prints
`database error: ...` and exits with status 1.

## Using it as a library

    from datetime import datetime
    from financetracker.database import DatabaseManager
    from financetracker.dao import TransactionDao
    from financetracker.model import TransactionModel, Role
    from financetracker.transaction import TransactionType

    with DatabaseManager("finance.db") as manager:
        model = TransactionModel(TransactionDao(manager))
        expense = TransactionType.EXPENSE.code()
        new_id = model.add_transaction(
            expense, 12.50, datetime(2024, 5, 1, 9, 30), "Lunch", "Food"
        )
        model.update_transaction(
            new_id, expense, 14.00, datetime(2024, 5, 1, 9, 30), "Lunch", "Food"
        )
        for tx in model:
            print(tx.id, tx.kind.name, tx.amount, tx.description)
        print(model.data(0, Role.AMOUNT))
        model.delete_transaction(new_id)

Main pieces:

- `financetracker.transaction`: the `Transaction` dataclass (`id`, `kind`,
  `amount`, `date`, `description`, `category`) and the `TransactionType`
  enum. `TransactionType.code()` gives the stored integer (income is 0,
  expense is 1), and `TransactionType.from_code()` maps 0 to income and
  any other value to expense.
- `financetracker.database`: `DatabaseManager` opens the SQLite file,
  creates its directory and the `transactions` table, and closes the
  connection when used as a context manager. `default_database_path()`
  gives the per-user database file, and `shared_manager()` a single
  manager for it. Failures raise `DatabaseError`.
- `financetracker.dao`: `TransactionDao` with `add` (returns the new id),
  `update`, `delete` and `fetch_all` (newest date first). Dates are stored
  as ISO text to the second. Database failures raise `DatabaseError`.
  Without a manager it uses `shared_manager()`.
- `financetracker.model`: `TransactionModel` loads all transactions on
  creation and keeps them in step with the database. Added transactions
  are appended at the end until `refresh()` reloads the list.
  `update_transaction` and `delete_transaction` return `False` when no
  listed transaction has the id. `data(row, role)` gives one field by
  `Role` (`Role.TYPE` gives the integer code), or `None` for an unknown
  row or role; `role_names()` maps each role to `id`, `type`, `amount`,
  `date`, `description` or `category`.

## What it does not do

There is no graphical window. The list model is meant to be used from
code or through the command line; it does not notify views of changes.
There are no reports, totals, budgets or imports and exports.