from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    # Index is the number of rows cleared by a single merge.
    line_clear_scores: tuple[int, int, int, int, int] = (0, 40, 100, 300, 1200)

    def score_for_lines(self, lines: int) -> int:
        if not 0 <= lines < len(self.line_clear_scores):
            raise ValueError(f"no score defined for {lines} cleared rows")
        return self.line_clear_scores[lines]
