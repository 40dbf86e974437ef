"""The first museum quiz room."""

from __future__ import annotations

from xjtuer.quiz import QuizRoom


def quiz_room_1() -> QuizRoom:
    """The first quiz, answered by the middle warp."""
    bx, by = -2 * 800.0, -2 * 608.0
    return QuizRoom(
        number=1,
        base=(bx, by),
        save_id=4,
        portrait="sjtu",
        portrait_scale=0.15,
        targets=(None, (bx + 800.0, by + 608.0), None),
        scene_layers=(-0.3, -0.5),
    )