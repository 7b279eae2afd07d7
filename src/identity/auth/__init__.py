"""Credential verification, token issuing and request guards."""
