from .query_log_parser import QueryLogParser, parse_query_line

__all__ = ["QueryLogParser", "parse_query_line"]
