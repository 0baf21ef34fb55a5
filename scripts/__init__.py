"""Command-line entry points and their helpers (config, logging, rendering)."""
