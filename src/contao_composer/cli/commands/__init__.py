"""Top-level contao-composer commands."""
