from pairdist.distance import InconsistentDataError, calculate_total_distance
from pairdist.parse import ParseResult, parse_lines, parse_text, read_pairs

__all__ = [
    "InconsistentDataError",
    "ParseResult",
    "calculate_total_distance",
    "parse_lines",
    "parse_text",
    "read_pairs",
]
