from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum


class MuscleGroupId(IntEnum):
    """Muscle group ids as used by the backend and the `muscle-group-{id}` test ids."""

    CHEST = 1
    BACK = 2
    SHOULDERS = 3
    BICEPS = 4
    TRICEPS = 5
    FOREARMS = 6
    QUADRICEPS = 7
    HAMSTRINGS = 8
    GLUTES = 9
    CALVES = 10
    ABS = 11
    LOWER_BACK = 12
    ABDUCTOR = 13

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()


_ALIASES: dict[str, MuscleGroupId] = {
    "chest": MuscleGroupId.CHEST,
    "back": MuscleGroupId.BACK,
    "shoulders": MuscleGroupId.SHOULDERS,
    "shoulder": MuscleGroupId.SHOULDERS,
    "biceps": MuscleGroupId.BICEPS,
    "bicep": MuscleGroupId.BICEPS,
    "arm": MuscleGroupId.BICEPS,
    "arms": MuscleGroupId.BICEPS,
    "triceps": MuscleGroupId.TRICEPS,
    "tricep": MuscleGroupId.TRICEPS,
    "forearms": MuscleGroupId.FOREARMS,
    "forearm": MuscleGroupId.FOREARMS,
    "quadriceps": MuscleGroupId.QUADRICEPS,
    "quad": MuscleGroupId.QUADRICEPS,
    "hamstrings": MuscleGroupId.HAMSTRINGS,
    "hamstring": MuscleGroupId.HAMSTRINGS,
    "glutes": MuscleGroupId.GLUTES,
    "glute": MuscleGroupId.GLUTES,
    "calves": MuscleGroupId.CALVES,
    "calf": MuscleGroupId.CALVES,
    "abs": MuscleGroupId.ABS,
    "ab": MuscleGroupId.ABS,
    "lower back": MuscleGroupId.LOWER_BACK,
    "lowerback": MuscleGroupId.LOWER_BACK,
    "abductor": MuscleGroupId.ABDUCTOR,
}

_SET_SPEC = re.compile(r"^\s*(\d+)\s+sets?\s+of\s+(.+?)\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class SetSpec:
    number_of_sets: int
    muscle_group_id: MuscleGroupId


def muscle_group_id(name: str) -> MuscleGroupId:
    normalized = " ".join(name.lower().split())
    try:
        return _ALIASES[normalized]
    except KeyError:
        raise ValueError(f"Unknown muscle group: {name!r}. Available: {', '.join(_ALIASES)}") from None


def parse_set_spec(text: str) -> SetSpec:
    """Parse "4 sets of chest" style strings used by workout-day steps."""
    match = _SET_SPEC.match(text)
    if not match:
        raise ValueError(f"Invalid set format: {text!r}. Expected format: 'X sets of muscleGroup'")
    return SetSpec(number_of_sets=int(match.group(1)), muscle_group_id=muscle_group_id(match.group(2)))
