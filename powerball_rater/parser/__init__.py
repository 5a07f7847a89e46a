"""Drawing text parsing."""
