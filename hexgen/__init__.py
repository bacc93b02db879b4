"""hexgen -- deterministic scaffolding for ports-and-adapters projects.

Turns one name into a consistent bundle of TypeScript files for the
``nest-hex`` runtime: port tokens and interfaces, adapters implementing
them, and standalone services consuming them.
"""

__version__ = "0.1.0"
