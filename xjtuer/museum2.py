"""The second museum quiz room."""

from __future__ import annotations

from xjtuer.quiz import QuizRoom


def quiz_room_2() -> QuizRoom:
    """The second quiz, answered by the right-hand warp."""
    bx, by = -800.0, -608.0
    return QuizRoom(
        number=2,
        base=(bx, by),
        save_id=5,
        portrait="sjtu",
        portrait_scale=0.15,
        targets=(None, None, (bx + 800.0, by - 608.0)),
    )