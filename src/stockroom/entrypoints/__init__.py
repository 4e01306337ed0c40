"""Entrypoints (inbound adapters) for STOCKROOM.

Expose the application to the outside world: currently the CLI and its
interactive shell. Parse and validate inputs, call the catalog, and present
results.

Dependency rule: obtain the catalog from `stockroom.bootstrap`; avoid
constructing adapters directly.
"""
