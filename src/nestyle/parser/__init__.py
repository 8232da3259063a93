from nestyle.errors import ParseError
from nestyle.parser.transformer import parse_line, scan_lines

__all__ = ["ParseError", "parse_line", "scan_lines"]
