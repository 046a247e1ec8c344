"""Quest domain service - Random XP reward and level-up rule."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from apps.adventurers.domain.entities import Adventurer

QUEST_REWARD_MIN = 10
QUEST_REWARD_MAX = 20
LEVEL_UP_THRESHOLD = 100


class RandomSource(Protocol):
    """Anything that draws inclusive random integers (random.Random fits)."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True, slots=True)
class QuestOutcome:
    """Result of a single quest.

    Attributes:
        reward: XP drawn for the quest
        previous_level: level before the quest
        previous_xp: XP before the quest
        level: level after the quest
        xp: XP after the quest
    """

    reward: int
    previous_level: int
    previous_xp: int
    level: int
    xp: int

    @property
    def leveled_up(self) -> bool:
        return self.level > self.previous_level


class QuestService:
    """Resolves quests for adventurers.

    The random source is injected so callers can seed it or force draws.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def draw_reward(self) -> int:
        """Draw an XP reward, uniform over [QUEST_REWARD_MIN, QUEST_REWARD_MAX]."""
        return self._rng.randint(QUEST_REWARD_MIN, QUEST_REWARD_MAX)

    @staticmethod
    def resolve(level: int, xp: int, reward: int) -> QuestOutcome:
        """Apply a reward to (level, xp).

        Crossing LEVEL_UP_THRESHOLD grants one level and resets XP to zero;
        XP beyond the threshold is not carried into the new level.

        Args:
            level: current level
            xp: current XP
            reward: XP gained

        Returns:
            QuestOutcome
        """
        new_level, new_xp = level, xp + reward
        if new_xp >= LEVEL_UP_THRESHOLD:
            new_level, new_xp = level + 1, 0
        return QuestOutcome(
            reward=reward,
            previous_level=level,
            previous_xp=xp,
            level=new_level,
            xp=new_xp,
        )

    def embark(self, adventurer: Adventurer) -> QuestOutcome:
        """Send an adventurer on a quest and apply the outcome to it."""
        outcome = self.resolve(adventurer.level, adventurer.xp, self.draw_reward())
        adventurer.set_level(outcome.level)
        adventurer.set_xp(outcome.xp)
        return outcome
