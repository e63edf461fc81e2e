"""Pure domain entities and rules. No I/O."""
