"""Shared fixtures for inventory_records tests."""
import tempfile
from pathlib import Path

import pytest

from inventory_records.store import InventoryStore


class ScriptedConsole:
    """Feeds canned answers to prompts and records everything written."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.output = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return '\n'.join(self.output)


@pytest.fixture
def temp_inventory():
    """Path to an inventory file in a fresh temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "inventory.txt"


@pytest.fixture
def store(temp_inventory):
    with InventoryStore.open(temp_inventory) as s:
        yield s


@pytest.fixture
def console():
    def make(*answers):
        return ScriptedConsole(answers)
    return make
