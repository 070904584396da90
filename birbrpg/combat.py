"""Turn-based fights between the hero and a villain."""

from __future__ import annotations

import random

from birbrpg.character import Character
from birbrpg.console import Console
from birbrpg.dice import damage_multiplier, roll_dice

_DOUBLE_RULE = "=" * 42
_SINGLE_RULE = "-" * 42

_ATTACK = 1
_DEFEND = 2
_HEAL = 3

MAX_HEALTH_BONUS = 50


def _announce(hero: Character, villain: Character, console: Console, opening: int) -> None:
    console.say(f"\n{_DOUBLE_RULE}\n")
    if opening == 1:
        console.say("!!! CUIDADO !!!\n")
        console.say(f"{hero.name} deu de cara com {villain.name}\n")
    elif opening == 2:
        console.say("Você sente o perigo se aproximando...\n")
        console.pause(1.0)
        console.say("!!! ATENCAO !!!\n")
        console.say(f"{hero.name} caiu no terreno de {villain.name}\n")
    else:
        console.say("Algo não está certo...\n")
        console.pause(1.0)
        console.say("!!! CUIDADO !!!\n")
        console.say(f"{villain.name} achou {hero.name}\n")
    console.say(f"{_DOUBLE_RULE}\n")
    console.pause(2.0)


def start_combat(
    hero: Character,
    villain: Character,
    console: Console,
    rng: random.Random | None = None,
) -> bool:
    """Fight until one side falls; return True when the hero wins."""
    _announce(hero, villain, console, roll_dice(1, 3, rng))

    while hero.health > 0 and villain.health > 0:
        player_turn(hero, villain, console, rng)
        if villain.health <= 0:
            console.say(f"\n{villain.name} foi derrotado!\n")
            console.pause(1.5)
            post_combat_rewards(hero, console, rng)
            return True

        enemy_turn(hero, villain, console, rng)
        if hero.health <= 0:
            return False

    return hero.health > 0


def _choose_action(hero: Character, villain: Character, console: Console) -> int:
    while True:
        console.say(
            f"\n--- SEU TURNO (Vida: {hero.health}) "
            f"({villain.name}: {villain.health})---\n"
            f"[1] Atacar {villain.name}\n"
            "[2] Defender\n"
            "[3] Curar\n"
            "Escolha sua acao: "
        )
        try:
            action = console.ask_int()
        except ValueError:
            action = 0
        if _ATTACK <= action <= _HEAL:
            return action
        console.say("Ação inválida! Escolha entre 1 e 3!!!\n")


def player_turn(
    hero: Character,
    villain: Character,
    console: Console,
    rng: random.Random | None = None,
) -> None:
    """Ask the player for an action and carry it out."""
    hero.defending = False
    action = _choose_action(hero, villain, console)

    if action == _ATTACK:
        if roll_dice(1, 20, rng) > 6:
            damage = int(hero.strength * damage_multiplier(rng))
            if villain.defending:
                damage //= 2
                villain.defending = False
                console.say(f"{villain.name} estava defendendo! Dano reduzido.\n")
            console.say(villain.take_damage(damage))
        else:
            console.say(f"{hero.name} errou o ataque!\n")
            console.say(f"{villain.name} não perdeu nenhum ponto de vida :(\n\n")
    elif action == _DEFEND:
        console.say(f"{hero.name} entra em postura defensiva.\n")
        hero.defending = True
    else:
        console.say(hero.heal(rng))

    console.pause(1.5)


def enemy_turn(
    hero: Character,
    villain: Character,
    console: Console,
    rng: random.Random | None = None,
) -> None:
    """Let the villain attack, guard or heal, chosen at random."""
    console.say(f"\n--- TURNO DE {villain.name} ---\n")
    console.pause(1.0)

    action = roll_dice(1, 10, rng)

    if action <= 8:
        if roll_dice(1, 20, rng) > 3:
            console.say(f"{villain.name} avanca para atacar!\n")
            console.pause(1.0)
            damage = int(villain.strength * damage_multiplier(rng))
            if hero.defending:
                damage //= 2
                console.say("Você reduziu o impacto com sua defesa!\n")
            console.say(hero.take_damage(damage))
        else:
            console.say(f"{villain.name} errou o ataque!\n")
            console.say("Você não perdeu nenhum ponto de vida!!\n\n")
    elif action == 9:
        console.say(f"{villain.name} assume uma postura de guarda.\n")
        villain.defending = True
    else:
        console.say(villain.heal(rng))

    console.pause(1.5)


def post_combat_rewards(
    hero: Character,
    console: Console,
    rng: random.Random | None = None,
) -> None:
    """Restore some health and raise the hero's stats after a victory."""
    recovered = roll_dice(10, 30, rng)
    strength_bonus = roll_dice(5, 15, rng)
    healing_bonus = roll_dice(3, 10, rng)

    console.say(
        f"\n{_SINGLE_RULE}\n"
        "O vento sopra forte pelas árvores da floresta...\n"
    )
    console.pause(1.5)
    console.say("A energia do ambiente revigora suas asas.\n\n")
    console.pause(1.5)

    console.say(f"Sua vida Máxima aumentou {MAX_HEALTH_BONUS} pontos!!!\n")
    hero.max_health += MAX_HEALTH_BONUS

    console.say(f"Você recuperou {recovered} pontos de vida!!!\n")
    hero.health = min(hero.health + recovered, hero.max_health)

    hero.strength += strength_bonus
    hero.healing += healing_bonus

    console.pause(1.5)
    console.say(
        f"Sua força aumentou em {strength_bonus}!\n"
        f"Seu poder de cura aumentou em {healing_bonus}!\n"
        f"Agora você está com {hero.health} pontos de vida.\n\n"
    )
    console.pause(2.5)
    console.say("E preparado para um novo desafio! \n")
    console.say(f"{_SINGLE_RULE}\n")
    console.pause(1.5)