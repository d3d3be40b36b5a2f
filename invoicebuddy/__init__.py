"""InvoiceBuddy: invoicing API for small businesses."""

__version__ = "1.0.0"
