import io

import pytest

from birbrpg.character import DEFAULT_HEALTH, Character
from birbrpg.combat import enemy_turn, player_turn, post_combat_rewards, start_combat
from birbrpg.console import Console


class ScriptedRng:
    def __init__(self, *values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high, (low, high, value)
        return value


def make_console(text=""):
    return Console(stdin=io.StringIO(text), stdout=io.StringIO(), delay=False)


def make_villain(health=100):
    return Character.villain("Gato", "vilão", "gato", health, 10, 5)


def output(console):
    return console.stdout.getvalue()


def _player_attack(defending):
    hero = Character(name="Piu", strength=17)
    villain = make_villain()
    villain.defending = defending
    player_turn(hero, villain, make_console("1\n"), ScriptedRng(20, 137))
    return 100 - villain.health, villain


def test_defending_villain_takes_half_damage():
    plain, _ = _player_attack(False)
    halved, villain = _player_attack(True)
    assert halved == plain // 2
    assert villain.defending is False


def test_hit_damage_stays_within_multiplier_bounds():
    damage, _ = _player_attack(False)
    assert 17 * 1.5 <= damage <= 17 * 2.5


def test_player_miss_leaves_villain_untouched():
    hero = Character(name="Piu", strength=17)
    villain = make_villain()
    console = make_console("1\n")
    player_turn(hero, villain, console, ScriptedRng(6))
    assert villain.health == 100
    assert "Piu errou o ataque!" in output(console)


def test_invalid_actions_are_rejected_until_valid():
    hero = Character(name="Piu")
    villain = make_villain()
    console = make_console("abc\n5\n2\n")
    player_turn(hero, villain, console, ScriptedRng())
    assert hero.defending is True
    assert output(console).count("Ação inválida! Escolha entre 1 e 3!!!") == 2


def test_player_turn_resets_previous_defence():
    hero = Character(name="Piu", strength=10)
    hero.defending = True
    villain = make_villain()
    player_turn(hero, villain, make_console("1\n"), ScriptedRng(1))
    assert hero.defending is False


def test_player_heal_is_capped_at_max_health():
    hero = Character(name="Piu", health=195, healing=10)
    player_turn(hero, make_villain(), make_console("3\n"), ScriptedRng(150))
    assert hero.health == hero.max_health


def test_running_out_of_input_raises_eof():
    with pytest.raises(EOFError):
        player_turn(Character(name="Piu"), make_villain(), make_console(""), ScriptedRng())


def _enemy_attack(defending):
    hero = Character(name="Piu")
    hero.defending = defending
    enemy_turn(hero, make_villain(), make_console(), ScriptedRng(1, 20, 120))
    return DEFAULT_HEALTH - hero.health


def test_defending_hero_takes_half_damage():
    plain = _enemy_attack(False)
    halved = _enemy_attack(True)
    assert halved == plain // 2
    assert plain > halved


def test_enemy_miss():
    hero = Character(name="Piu")
    console = make_console()
    enemy_turn(hero, make_villain(), console, ScriptedRng(5, 3))
    assert hero.health == DEFAULT_HEALTH
    assert "Gato errou o ataque!" in output(console)


def test_enemy_guards_on_nine():
    villain = make_villain()
    enemy_turn(Character(name="Piu"), villain, make_console(), ScriptedRng(9))
    assert villain.defending is True


def test_enemy_heals_on_ten_up_to_its_maximum():
    villain = make_villain()
    villain.health = 99
    console = make_console()
    enemy_turn(Character(name="Piu"), villain, console, ScriptedRng(10, 150))
    assert villain.health == villain.max_health
    assert "Gato se curou" in output(console)


def test_rewards_add_rolled_bonuses():
    hero = Character(name="Piu", health=10, strength=10, healing=5)
    post_combat_rewards(hero, make_console(), ScriptedRng(20, 15, 7))
    assert hero.health - 10 == 20
    assert hero.strength - 10 == 15
    assert hero.healing - 5 == 7
    assert hero.max_health == DEFAULT_HEALTH + 50


def test_rewards_cap_health_at_new_maximum():
    hero = Character(name="Piu", health=200, max_health=200)
    hero.max_health = 200
    post_combat_rewards(hero, make_console(), ScriptedRng(30, 5, 3))
    assert hero.health <= hero.max_health


@pytest.mark.parametrize(
    "opening, phrase",
    [(1, "Piu deu de cara com Gato"), (2, "Piu caiu no terreno de Gato"), (3, "Gato achou Piu")],
)
def test_opening_dialogue(opening, phrase):
    console = make_console()
    won = start_combat(Character(name="Piu"), make_villain(health=0), console, ScriptedRng(opening))
    assert won is True
    assert phrase in output(console)


def test_combat_victory_grants_rewards():
    hero = Character(name="Piu", strength=100)
    console = make_console("1\n")
    won = start_combat(hero, make_villain(), console, ScriptedRng(1, 20, 50, 10, 5, 3))
    assert won is True
    assert "Gato foi derrotado!" in output(console)
    assert hero.max_health == DEFAULT_HEALTH + 50


def test_combat_defeat():
    hero = Character(name="Piu", health=1)
    console = make_console("2\n")
    won = start_combat(hero, make_villain(), console, ScriptedRng(2, 1, 20, 100))
    assert won is False
    assert hero.health <= 0