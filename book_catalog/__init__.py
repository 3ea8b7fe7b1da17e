"""Book catalog line parser."""
