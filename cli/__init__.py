"""Command-line interface packages for kt-cli."""
