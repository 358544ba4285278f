"""
Candidate token scanning for free text.

Public API:
    - Candidate: A gpEID-shaped token with line/column coordinates
    - find_candidates: Find every candidate in a document
    - CANDIDATE_PATTERN: The compiled shape pattern
"""

from gpeid.core.scan.scanner import CANDIDATE_PATTERN, Candidate, find_candidates

__all__ = ["CANDIDATE_PATTERN", "Candidate", "find_candidates"]
