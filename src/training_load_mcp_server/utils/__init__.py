"""Record parsing, date, validation and formatting helpers."""
