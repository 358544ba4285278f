"""
Find candidate gpEID tokens in free text.

This is a coarse shape match, not validation: anything that starts with '='
and contains '+', '_' and ':' in that order is handed to the grammar, which
decides whether it is actually valid. Tokens are delimited by whitespace,
commas and semicolons.
"""

import re

from pydantic import BaseModel, ConfigDict

# A run of characters that cannot delimit a token
_BODY = r"[^\s,;]+"

CANDIDATE_PATTERN = re.compile(
    rf"(?:^|(?<=[\s,;]))(={_BODY}\+{_BODY}_{_BODY}:{_BODY}(?:[-$|]{_BODY})*)"
)


class Candidate(BaseModel):
    """A gpEID-shaped token found in text, with 0-based coordinates."""

    token: str
    line: int
    column: int

    model_config = ConfigDict(frozen=True)

    @property
    def end_column(self) -> int:
        """Column just past the token."""
        return self.column + len(self.token)


def find_candidates(text: str) -> list[Candidate]:
    """
    Find every gpEID-shaped token in text.

    Args:
        text: Document contents

    Returns:
        Candidates in document order

    Example:
        >>> [c.token for c in find_candidates("see =A+HLK_B.001:C.D, done")]
        ['=A+HLK_B.001:C.D']
    """
    candidates = []
    # Line numbers count "\n" only, as editors do.
    for line_number, line in enumerate(text.split("\n")):
        for match in CANDIDATE_PATTERN.finditer(line):
            candidates.append(
                Candidate(token=match.group(1), line=line_number, column=match.start(1))
            )
    return candidates
