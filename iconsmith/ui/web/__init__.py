"""Web UI — the static icon browser page and its preview server."""
