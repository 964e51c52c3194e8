"""Domain helpers for series records."""
