"""
combat.py

PURPOSE: Deterministic turn-based combat between the player and a monster.
DEPENDENCIES: models

ARCHITECTURE NOTES:
One encounter is a small state machine: ONGOING until either side drops
to zero hit points, then PLAYER_WINS or PLAYER_LOSES (both terminal).
Each exchange is the player striking first, then the monster striking
back only if it is still alive. There is no randomness.

The resolver mutates the combatants but not the room; clearing the
monster or ending the game is the caller's business.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from dungeon_mini.models.world import Monster, Player

logger = logging.getLogger(__name__)


class CombatOutcome(Enum):
    """State of a single encounter."""

    ONGOING = auto()
    PLAYER_WINS = auto()
    PLAYER_LOSES = auto()


@dataclass
class CombatReport:
    """What happened during an encounter."""

    outcome: CombatOutcome = CombatOutcome.ONGOING
    log: list[str] = field(default_factory=list)
    player_attacks: int = 0
    monster_attacks: int = 0

    @property
    def finished(self) -> bool:
        return self.outcome is not CombatOutcome.ONGOING


def exchange(player: Player, monster: Monster, report: CombatReport) -> CombatOutcome:
    """
    Run one attack exchange and return the resulting state.

    The monster only retaliates if the player's blow did not kill it.
    """
    damage = player.attack
    monster.hp -= damage
    report.player_attacks += 1
    report.log.append(f"You hit the {monster.name} for {damage}. Monster HP: {monster.hp}")
    if not monster.alive:
        return CombatOutcome.PLAYER_WINS

    damage = monster.level
    player.hp -= damage
    report.monster_attacks += 1
    report.log.append(f"The {monster.name} strikes back for {damage}. Your HP: {player.hp}")
    if not player.alive:
        return CombatOutcome.PLAYER_LOSES

    return CombatOutcome.ONGOING


def resolve_combat(player: Player, monster: Monster) -> CombatReport:
    """
    Fight until one side falls.

    Args:
        player: The player (hit points are reduced in place)
        monster: The monster (hit points are reduced in place)

    Returns:
        CombatReport with the terminal outcome and a line per blow
    """
    report = CombatReport()

    # A player who is already dead cannot start a fight; a dead monster is already beaten.
    if not player.alive:
        report.outcome = CombatOutcome.PLAYER_LOSES
    elif not monster.alive:
        report.outcome = CombatOutcome.PLAYER_WINS

    while not report.finished:
        report.outcome = exchange(player, monster, report)

    logger.debug(
        "Combat with %s finished: %s after %d player attacks",
        monster.name,
        report.outcome.name,
        report.player_attacks,
    )
    return report
