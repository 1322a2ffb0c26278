"""jotbook - a tagged personal journal kept in a flat text file."""
