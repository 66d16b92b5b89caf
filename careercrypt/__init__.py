"""CareerCrypt - career portfolio registry over a key-value ledger."""
