"""The third and fifth museum quiz rooms."""

from __future__ import annotations

from dataclasses import dataclass

from xjtuer.quiz import QuizRoom
from xjtuer.state import BGMReload

FINAL_BGM_ID = 9


@dataclass
class ClearBuilding:
    """Marks the warp that leads out of the museum into the buildings."""


def _final_music() -> BGMReload:
    return BGMReload(FINAL_BGM_ID)


def quiz_room_3() -> QuizRoom:
    """The third quiz, answered by the left-hand warp."""
    bx, by = 0.0, -2 * 608.0
    return QuizRoom(
        number=3,
        base=(bx, by),
        save_id=6,
        portrait="sjtu",
        portrait_scale=0.15,
        targets=((bx + 800.0, by + 608.0), None, None),
        hint_offset=(80.0, 160.0),
        hint_extras=(("xjtu", 160.0, 32.0, 0.09),),
    )


def quiz_room_5() -> QuizRoom:
    """The last quiz, whose left-hand warp leaves the museum."""
    bx, by = 2 * 800.0, -2 * 608.0
    return QuizRoom(
        number=5,
        base=(bx, by),
        save_id=8,
        portrait="xjtu",
        portrait_scale=0.09,
        targets=((bx, by + 608.0 * 4), None, None),
        hint_offset=(80.0, 128.0),
        accept_markers=(_final_music, ClearBuilding),
    )