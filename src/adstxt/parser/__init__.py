"""Parser package - Converts raw ads.txt text into structured models.

Parsers do NOT fetch anything - they structure text handed to them.
Every entry keeps the line number it came from for diagnostics.
"""

from adstxt.parser.ads_txt import AdsTxtParser, parse, parse_lines, parse_strict

__all__ = ["AdsTxtParser", "parse", "parse_lines", "parse_strict"]
