"""Characters: the hero and the villains."""

from __future__ import annotations

import random
from dataclasses import dataclass

from birbrpg.dice import damage_multiplier

DEFAULT_HEALTH = 200


@dataclass
class Character:
    """A combatant with health, strength and healing power."""

    name: str = ""
    role: str = ""
    species: str = ""
    health: int = DEFAULT_HEALTH
    max_health: int = DEFAULT_HEALTH
    strength: int = 0
    healing: int = 0
    defending: bool = False

    @classmethod
    def villain(
        cls,
        name: str,
        role: str,
        species: str,
        health: int,
        strength: int,
        healing: int,
    ) -> "Character":
        """Create a villain whose maximum health equals its starting health."""
        return cls(
            name=name,
            role=role,
            species=species,
            health=health,
            max_health=health,
            strength=strength,
            healing=healing,
        )

    def sheet(self) -> str:
        """Return the character sheet as printable text."""
        return (
            "===== ficha =====\n"
            f"Nome: {self.name}\n"
            f"Classe: {self.role}\n"
            f"Espécie: {self.species}\n"
            f"Vida: {self.health}\n"
            f"Força: {self.strength}\n"
            f"Poder de cura: {self.healing}\n\n"
            "=================\n\n"
        )

    def heal(self, rng: random.Random | None = None) -> str:
        """Restore health by the healing power times a multiplier, capped at
        the maximum, and return the message describing it."""
        message = f"{self.name} se curou e recebeu {self.healing} pontos de vida\n"
        self.health += int(self.healing * damage_multiplier(rng))
        self.health = min(self.health, self.max_health)
        return message

    def take_damage(self, amount: int) -> str:
        """Subtract damage from health and return the message describing it."""
        self.health -= amount
        return f"{self.name} perdeu {amount} pontos de vida\n"