"""CLI command modules for kt-cli."""
