"""
loader.py — Edge-List Reader
============================
Turns line-oriented text into (start, end) label pairs.

Format (one edge per line):
    A B
    B C

Exactly two labels separated by a single space.  No header, no comments,
no quoting.  Blank lines are ignored.

Malformed lines are skipped and collected in the LoadReport by default.
Pass strict=True to stop at the first one instead.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from graph.errors import MalformedLineError, SourceNotFoundError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# LoadReport — what a bulk load did
# ---------------------------------------------------------------------------
@dataclass
class LoadReport:
    source:      str
    edges_added: int                             = 0
    skipped:     List[MalformedLineError]        = field(default_factory=list)
    error:       Optional[SourceNotFoundError]   = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def to_dict(self) -> dict:
        return {
            "source":      self.source,
            "ok":          self.ok,
            "edges_added": self.edges_added,
            "skipped":     [{"line_number": e.line_number, "line": e.line} for e in self.skipped],
            "error":       str(self.error) if self.error else None,
        }


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
def parse_edge_line(line: str, line_number: int) -> Tuple[str, str]:
    """Split one non-blank line into (start, end) or raise MalformedLineError."""
    tokens = line.split(" ")
    if len(tokens) != 2 or not tokens[0] or not tokens[1]:
        raise MalformedLineError(line_number, line)
    return tokens[0], tokens[1]


def iter_edges(
    lines: Iterable[str],
    report: LoadReport,
    strict: bool = False,
) -> Iterator[Tuple[str, str]]:
    """
    Yield (start, end) for every well-formed line.

    Skipped lines are appended to `report.skipped`; in strict mode the
    first malformed line is raised instead.
    """
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            yield parse_edge_line(line, line_number)
        except MalformedLineError as e:
            if strict:
                raise
            logger.warning(f"{report.source}: skipping malformed line {line_number}: {line!r}")
            report.skipped.append(e)


# ---------------------------------------------------------------------------
# File source
# ---------------------------------------------------------------------------
def iter_edge_lines(path: str, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of an edge-list file, translating I/O and decoding failures."""
    try:
        with open(path, encoding=encoding) as f:
            yield from f
    except OSError as e:
        raise SourceNotFoundError(str(path), e.strerror) from e
    except UnicodeDecodeError as e:
        raise SourceNotFoundError(str(path), f"not valid {encoding}") from e
