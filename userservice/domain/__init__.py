"""Pure domain rules (no framework or storage imports)."""
