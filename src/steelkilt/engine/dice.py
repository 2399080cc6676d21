"""Dice for the Draft RPG rule set.

Every random decision in the engine is a single ten-sided die. The die is
never rolled implicitly: operations that need one take a DiceSource, so
simulations can be seeded and tests can script exact faces.
"""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from steelkilt.core.constants import DIE_FACES
from steelkilt.core.exceptions import DiceRollError
from steelkilt.core.logging import get_logger


logger = get_logger(__name__)


@runtime_checkable
class DiceSource(Protocol):
    """Anything that can roll a d10."""

    def d10(self) -> int:
        """Roll a ten-sided die and return a face in [1, 10]."""
        ...


class DiceRoller:
    """Uniform d10 roller with its own random generator.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> 1 <= roller.d10() <= 10
        True
    """

    def __init__(
        self,
        *,
        seed: int | None = None,
        log_rolls: bool = False,
        history_size: int = 1000,
    ) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
            log_rolls: Keep rolled faces in ``history``.
            history_size: Most recent faces ``history`` holds; older ones
                are discarded.
        """
        self._seed = seed
        self._rng = random.Random(seed)
        self._log_rolls = log_rolls
        self.history: deque[int] = deque(maxlen=history_size)
        logger.debug("DiceRoller initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def d10(self) -> int:
        face = self._rng.randint(1, DIE_FACES)
        if self._log_rolls:
            self.history.append(face)
        logger.debug("Rolled d10", face=face)
        return face

    def clear_history(self) -> None:
        self.history.clear()


class ScriptedDice:
    """Dice source that replays predetermined faces in order.

    Useful for replaying a recorded combat or for pinning down a scenario
    in tests.

    Example:
        >>> dice = ScriptedDice([7, 3])
        >>> dice.d10(), dice.d10()
        (7, 3)
    """

    def __init__(self, faces: Iterable[int]) -> None:
        """Initialize with the faces to replay.

        Raises:
            DiceRollError: If any face lies outside [1, 10].
        """
        self._faces = list(faces)
        for face in self._faces:
            if not 1 <= face <= DIE_FACES:
                raise DiceRollError("Scripted face out of range", face=face)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._faces) - self._position

    def d10(self) -> int:
        if self._position >= len(self._faces):
            raise DiceRollError(
                "Scripted dice exhausted",
                details={"rolled": len(self._faces)},
            )
        face = self._faces[self._position]
        self._position += 1
        return face


# Module-level convenience roller
_default_roller: DiceRoller | None = None


def get_default_roller() -> DiceRoller:
    """Return the shared roller, built from the dice settings on first use."""
    global _default_roller  # noqa: PLW0603
    if _default_roller is None:
        from steelkilt.core.config import get_settings

        settings = get_settings()
        _default_roller = DiceRoller(
            seed=settings.dice.seed,
            log_rolls=settings.dice.log_rolls,
            history_size=settings.dice.history_size,
        )
    return _default_roller


def reset_default_roller() -> None:
    """Drop the shared roller so the next call rebuilds it from settings."""
    global _default_roller  # noqa: PLW0603
    _default_roller = None


def d10() -> int:
    """Roll a d10 on the shared roller.

    Front ends that do not care about reproducibility can use this
    directly; the engine itself always takes an explicit DiceSource.
    """
    return get_default_roller().d10()


__all__ = [
    "DiceSource",
    "DiceRoller",
    "ScriptedDice",
    "get_default_roller",
    "reset_default_roller",
    "d10",
]
