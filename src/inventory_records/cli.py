#!/usr/bin/env python3
"""
Command-line interface for Inventory Records
"""
import sys
import argparse
from pathlib import Path
from typing import Callable, List, Optional

from . import __version__
from .prompts import (
    prompt_until_valid,
    parse_description,
    parse_int,
    parse_non_negative_int,
    parse_non_negative_float,
)
from .records import InventoryRecord
from .store import DEFAULT_INVENTORY_FILE, InventoryStore, StoreOpenError


Reader = Callable[[str], str]
Writer = Callable[[str], None]

MENU = """
Inventory Management Menu
1. Add new records
2. Display a record
3. Quit"""

ADD, DISPLAY, QUIT = 1, 2, 3


def add_record(store: InventoryStore, read: Reader = input, write: Writer = print) -> int:
    """Ask for the fields of a new record and append it to the store."""
    description = prompt_until_valid(
        "\nEnter item description (Text): ",
        parse_description,
        "❌ Error: Description must be a single line.",
        read, write,
    )

    quantity = prompt_until_valid(
        "Enter quantity on hand (Int): ",
        parse_non_negative_int,
        "❌ Error: Quantity must be a non-negative integer.",
        read, write,
    )
    wholesale = prompt_until_valid(
        "Enter wholesale cost (Double): ",
        parse_non_negative_float,
        "❌ Error: Wholesale cost must be a non-negative value.",
        read, write,
    )
    retail = prompt_until_valid(
        "Enter retail cost (Double): ",
        parse_non_negative_float,
        "❌ Error: Retail cost must be a non-negative value.",
        read, write,
    )

    record = InventoryRecord(
        description=description,
        quantity_on_hand=quantity,
        wholesale_cost=wholesale,
        retail_cost=retail,
    )
    position = store.append(record)
    write(f"\n✅ Record added successfully (record #{position}).")
    return position


def display_record(store: InventoryStore, read: Reader = input, write: Writer = print) -> Optional[InventoryRecord]:
    """Ask for a record number and print that record."""
    text = read("\nEnter record number to display: ")
    try:
        record_number = parse_int(text)
    except ValueError:
        write("❌ Error: Invalid input. Please enter a valid record number.")
        return None

    record = store.get(record_number)
    if record is None:
        write("\n❌ Error: Record not found.")
        return None

    write("\n" + record.format_details(record_number))
    return record


def run_menu(store: InventoryStore, read: Reader = input, write: Writer = print) -> None:
    """Show the menu until the user quits or input runs out."""
    try:
        while True:
            write(MENU)
            text = read("Enter your choice (1-3): ")
            try:
                choice = parse_int(text)
            except ValueError:
                write("❌ Error: Invalid input. Please enter a number between 1 and 3.")
                continue

            if choice == ADD:
                add_record(store, read, write)
            elif choice == DISPLAY:
                display_record(store, read, write)
            elif choice == QUIT:
                write("👋 Exiting program...")
                return
            else:
                write("❌ Error: Please select a valid option (1-3).")
    except EOFError:
        write("\n👋 Exiting program...")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser_cli = argparse.ArgumentParser(
        prog='inventory-records',
        description="Inventory Records - Keep inventory records in a plain text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use inventory.txt in the current directory
  inventory-records

  # Use another inventory file
  inventory-records ~/shop/inventory.txt
        """
    )
    parser_cli.add_argument('file', type=Path, nargs='?', default=DEFAULT_INVENTORY_FILE,
                            help='Inventory file (default: inventory.txt)')
    parser_cli.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    args = parser_cli.parse_args(argv)

    try:
        store = InventoryStore.open(args.file)
    except StoreOpenError as e:
        print(f"\n❌ Error: File could not be opened. ({e})", file=sys.stderr)
        return 1

    with store:
        run_menu(store, input, print)
    return 0


if __name__ == '__main__':
    sys.exit(main())
