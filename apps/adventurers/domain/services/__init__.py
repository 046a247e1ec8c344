"""Domain Services."""

from apps.adventurers.domain.services.quest_service import (
    LEVEL_UP_THRESHOLD,
    QUEST_REWARD_MAX,
    QUEST_REWARD_MIN,
    QuestOutcome,
    QuestService,
    RandomSource,
)

__all__ = [
    "LEVEL_UP_THRESHOLD",
    "QUEST_REWARD_MAX",
    "QUEST_REWARD_MIN",
    "QuestOutcome",
    "QuestService",
    "RandomSource",
]
