"""Investment management: validated domain values, accounts, portfolios and
orders kept in SQLite, and interactive console menus."""

__version__ = "0.1.0"