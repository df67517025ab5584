"""Service integrations: the account store and upload storage."""
