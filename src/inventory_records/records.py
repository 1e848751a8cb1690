#!/usr/bin/env python3
"""
Inventory record model

One record per inventory item, stored as four plain-text lines:
description, quantity on hand, wholesale cost, retail cost.
"""
from typing import List

from pydantic import BaseModel, Field, field_validator


class InventoryRecord(BaseModel):
    """A single inventory entry."""
    description: str
    quantity_on_hand: int = Field(ge=0)
    wholesale_cost: float = Field(ge=0, allow_inf_nan=False)
    retail_cost: float = Field(ge=0, allow_inf_nan=False)

    @field_validator('description')
    @classmethod
    def single_line(cls, value: str) -> str:
        if '\n' in value or '\r' in value:
            raise ValueError('description must be a single line')
        return value

    def to_lines(self) -> List[str]:
        """Return the four file lines for this record, without line terminators."""
        return [
            self.description,
            str(self.quantity_on_hand),
            str(float(self.wholesale_cost)),
            str(float(self.retail_cost)),
        ]

    def format_details(self, record_number: int) -> str:
        """
        Format the record for display.

        Args:
            record_number: Ordinal position shown in the header line

        Returns:
            Multi-line string with costs rounded to two decimals
        """
        return '\n'.join([
            f"Record #{record_number}:",
            f"Item Description: {self.description}",
            f"Quantity on hand: {self.quantity_on_hand}",
            f"Wholesale cost  : ${self.wholesale_cost:.2f}",
            f"Retail cost     : ${self.retail_cost:.2f}",
        ])
