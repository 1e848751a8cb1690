#!/usr/bin/env python3
"""
Append-only inventory file

Records are appended to a flat text file, four lines each, and looked up
by their 1-based position. Nothing is cached: every lookup scans the file
from the start.
"""
import os
from pathlib import Path
from typing import IO, Iterator, Optional, Union

from .records import InventoryRecord


DEFAULT_INVENTORY_FILE = Path('inventory.txt')


class StoreOpenError(Exception):
    """The inventory file could not be opened."""

    def __init__(self, path: Path, reason: OSError):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason.strerror or reason}")


class InventoryStore:
    """Read/append handle on one inventory file."""

    def __init__(self, handle: IO[str], path: Path):
        self._file = handle
        self.path = path

    @classmethod
    def open(cls, path: Union[str, Path] = DEFAULT_INVENTORY_FILE) -> 'InventoryStore':
        """
        Open (or create) the inventory file for reading and appending.

        Raises:
            StoreOpenError: if the file cannot be opened
        """
        path = Path(path)
        try:
            # Undecodable bytes show up as U+FFFD instead of aborting a scan
            handle = open(path, 'a+', encoding='utf-8', errors='replace')
        except OSError as e:
            raise StoreOpenError(path, e) from e
        return cls(handle, path)

    def __enter__(self) -> 'InventoryStore':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def append(self, record: InventoryRecord) -> int:
        """
        Append a record to the end of the file.

        Returns:
            The ordinal position of the new record
        """
        # 'a+' mode appends regardless; seeking keeps the read position in step
        self._file.seek(0, os.SEEK_END)
        # A hand-edited file may lack the final line feed
        if not self._ends_with_newline():
            self._file.write('\n')
        for line in record.to_lines():
            self._file.write(line + '\n')
        self._file.flush()
        return self.count()

    def _ends_with_newline(self) -> bool:
        """True for an empty file or one whose last byte is a line feed."""
        self._file.flush()
        with open(self.path, 'rb') as f:
            f.seek(0, os.SEEK_END)
            if f.tell() == 0:
                return True
            f.seek(-1, os.SEEK_END)
            return f.read(1) == b'\n'

    def iter_records(self) -> Iterator[InventoryRecord]:
        """
        Yield records from the start of the file.

        Stops at end of file or at the first record that does not parse,
        so a truncated or malformed tail simply ends the sequence.
        """
        self._file.seek(0)
        while True:
            description = self._file.readline()
            if not description:
                return
            try:
                quantity = int(self._read_field())
                wholesale = float(self._read_field())
                retail = float(self._read_field())
            except ValueError:
                return
            # Values were validated when the record was added
            yield InventoryRecord.model_construct(
                description=description.rstrip('\r\n'),
                quantity_on_hand=quantity,
                wholesale_cost=wholesale,
                retail_cost=retail,
            )

    def _read_field(self) -> str:
        line = self._file.readline()
        if not line:
            raise ValueError('unexpected end of file')
        return line.strip()

    def get(self, record_number: int) -> Optional[InventoryRecord]:
        """Return the record at a 1-based position, or None if there is no such record."""
        for position, record in enumerate(self.iter_records(), start=1):
            if position == record_number:
                return record
            if position > record_number:
                break
        return None

    def count(self) -> int:
        return sum(1 for _ in self.iter_records())
