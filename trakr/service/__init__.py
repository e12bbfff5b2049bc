"""Pure computation over domain entities."""
