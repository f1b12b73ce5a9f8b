"""Actions package - Read-only operations built on the parser."""

from adstxt.actions.check import CheckAction, CheckReport, Duplicate, find_duplicates

__all__ = ["CheckAction", "CheckReport", "Duplicate", "find_duplicates"]
