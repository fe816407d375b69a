"""Project-aware command runner."""
