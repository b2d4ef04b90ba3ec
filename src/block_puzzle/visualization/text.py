from __future__ import annotations

import numpy as np


def format_grid(state: np.ndarray) -> str:
    """Render a state array as text, one line per row."""
    return "\n".join("".join("█" if cell else "·" for cell in row) for row in state)


def print_grid(state: np.ndarray) -> None:
    print(format_grid(state))
