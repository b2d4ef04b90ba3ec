from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int, int] = (0, 40, 100, 300, 1200)
    lines_per_level: int = 10
    max_level: int = 15
    base_drop_interval_ms: int = 800
    drop_interval_step_ms: int = 40
    min_drop_interval_ms: int = 120

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        index = min(lines, len(self.line_clear_scores) - 1)
        return self.line_clear_scores[index] * level

    def level_for_lines(self, total_lines: int) -> int:
        return min(self.max_level, 1 + total_lines // self.lines_per_level)

    def drop_interval_for_level(self, level: int) -> int:
        interval = self.base_drop_interval_ms - (level - 1) * self.drop_interval_step_ms
        return max(self.min_drop_interval_ms, interval)
