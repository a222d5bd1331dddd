"""
Query Log Line Parser Module

Parses the pipe-delimited lines the ORM writes for each executed statement:

    DebugPDOStatement::execute|Time: 0.0123 sec|Memory: 1.50 KB|SELECT ...

Malformed lines never raise, missing values default to zero.
"""
import re
from typing import List

from query_collector.models.statement_record import ParsedQuery

MEMORY_UNIT_FACTORS = {
    'KB': 1024,
    'MB': 1024 * 1024,
}


class QueryLogParser:
    """Parser for marker|duration|memory|sql log lines"""

    # Matches: 0.0123 (first decimal number)
    DURATION_PATTERN = re.compile(r'(\d+\.\d+)')
    # Matches: 1.50 KB, 2 MB, 512
    MEMORY_PATTERN = re.compile(r'(\d+(?:\.\d+)?)\s*([A-Z]{1,2})?')
    SEGMENT_COUNT = 4

    def split_segments(self, line: str) -> List[str]:
        """Split into exactly four segments, padding missing ones with ''."""
        parts = line.split('|', self.SEGMENT_COUNT - 1)
        return parts + [''] * (self.SEGMENT_COUNT - len(parts))

    def parse_duration(self, text: str) -> float:
        """
        Parse a duration in seconds.

        Args:
            text: Duration segment, e.g. 'Time: 0.0123 sec'

        Returns:
            Duration in seconds or 0.0 if no decimal number is found
        """
        match = self.DURATION_PATTERN.search(text)
        if match:
            return float(match.group(1))
        return 0.0

    def parse_memory(self, text: str) -> float:
        """
        Parse a memory amount and normalize it to bytes.

        Args:
            text: Memory segment, e.g. 'Memory: 1.50 KB'

        Returns:
            Memory in bytes or 0.0 if no number is found. Units other
            than KB and MB are left unscaled.
        """
        match = self.MEMORY_PATTERN.search(text)
        if not match:
            return 0.0
        memory = float(match.group(1))
        return memory * MEMORY_UNIT_FACTORS.get(match.group(2), 1)

    def parse(self, line: str) -> ParsedQuery:
        _, duration_part, memory_part, sql_part = self.split_segments(line)
        return ParsedQuery(
            sql=sql_part.strip(),
            duration=self.parse_duration(duration_part),
            memory=self.parse_memory(memory_part),
        )


def parse_query_line(line: str) -> ParsedQuery:
    """
    Convenience function to parse one query log line.

    Args:
        line: Raw log message

    Returns:
        ParsedQuery with sql, duration (seconds) and memory (bytes)
    """
    return QueryLogParser().parse(line)
