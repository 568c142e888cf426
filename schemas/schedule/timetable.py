from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from core.state import SchoolClass
from utils.constants import *


class TeacherItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str


class ClassItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    teacher: str
    room: str
    weeklyBlocks: int

    def to_class(self) -> SchoolClass:
        return SchoolClass(self.id, self.teacher, self.room, self.weeklyBlocks)


class TimetableConfig(BaseModel):
    """Fully resolved input of the timetabling variant. Defaults reproduce the bundled sample."""

    model_config = ConfigDict(extra="forbid")

    days: List[str] = Field(default_factory=lambda: list(TIMETABLE_DAYS))
    blocksPerDay: int = Field(default=BLOCKS_PER_DAY)
    teachers: List[TeacherItem] = Field(
        default_factory=lambda: [TeacherItem(name=n) for n in TIMETABLE_TEACHERS]
    )
    classes: List[ClassItem] = Field(
        default_factory=lambda: [
            ClassItem(id=i, teacher=t, room=r, weeklyBlocks=b)
            for i, t, r, b in TIMETABLE_CLASSES
        ]
    )
    roomChangePenalty: int = Field(default=ROOM_CHANGE_PENALTY)
    timeLimitSeconds: float = Field(default=SOLVER_TIME_LIMIT_SECONDS, gt=0)
    solverParams: Optional[str] = None

    @property
    def numSlots(self) -> int:
        return len(self.days) * self.blocksPerDay
