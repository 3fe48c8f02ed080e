"""Domain type definitions for tally.

These NewTypes provide semantic clarity and help with type checking:
- TransactionId: Unique transaction identifier (uuid4 string)
- IsoDate: Calendar date in YYYY-MM-DD format
- Month: Month in YYYY-MM format
- CategoryName: Name of a category
- Payee: Counterparty of a transaction
"""

from typing import Literal, NewType

# Identifier assigned when a transaction is created, never changed afterwards
TransactionId = NewType("TransactionId", str)

# Dates are always stored as YYYY-MM-DD strings (e.g., "2025-01-31")
IsoDate = NewType("IsoDate", str)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

# Category label, free text
CategoryName = NewType("CategoryName", str)

# Person or organisation money was paid to or received from
Payee = NewType("Payee", str)

# Direction of a transaction; amounts themselves are always positive
TransactionType = Literal["expense", "income"]

TRANSACTION_TYPES: tuple[TransactionType, ...] = ("expense", "income")
