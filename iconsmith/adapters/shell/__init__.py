"""Shell-level adapters."""
