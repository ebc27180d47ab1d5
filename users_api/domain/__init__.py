"""Pure domain rules (identifiers, record shape) with no I/O."""
