# rubik_sim/core/__init__.py
from rubik_sim.core.errors import InvalidStateError, RubikSimError, SolutionUnavailableError
from rubik_sim.core.facelets import (
    FACES,
    SOLVED_COLORS,
    Color,
    Face,
    FaceletState,
    rotate_face_clockwise,
    rotate_face_counterclockwise,
    solved_state,
)
from rubik_sim.core.validator import color_counts, ensure_valid_state, is_valid_state

__all__ = [
    "FACES",
    "SOLVED_COLORS",
    "Color",
    "Face",
    "FaceletState",
    "InvalidStateError",
    "RubikSimError",
    "SolutionUnavailableError",
    "color_counts",
    "ensure_valid_state",
    "is_valid_state",
    "rotate_face_clockwise",
    "rotate_face_counterclockwise",
    "solved_state",
]
