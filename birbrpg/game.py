"""The adventure: character creation, the three fights and replays."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

from birbrpg.character import Character
from birbrpg.combat import start_combat
from birbrpg.console import Console
from birbrpg.dice import roll_dice

NAME_LIMIT = 20

_DOUBLE_RULE = "=" * 42
_SINGLE_RULE = "-" * 42

_BIRD_ART = (
    "\t  __\n"
    "\t /  \\\n"
    "\t< u |\n"
    "\t|   ----\n"
    "\t|   \\  |\n"
    "\tL-------\n"
    "\t  J  J\n"
)


@dataclass(frozen=True)
class _ClassProfile:
    role: str
    strength: tuple[int, int]
    healing: tuple[int, int]


_CLASSES = {
    1: _ClassProfile("mago", (10, 20), (4, 8)),
    2: _ClassProfile("curador", (10, 15), (8, 15)),
    3: _ClassProfile("guerreiro", (15, 25), (3, 7)),
}

_SPECIES = {1: "periquito", 2: "calopsita", 3: "papagaio"}


def make_villains() -> list[Character]:
    """Return the three villains in the order they are fought."""
    return [
        Character.villain("Gato Cat-astrofe", "vilão", "gato", 100, 10, 5),
        Character.villain("Lobo Mau", "vilão", "lobo", 200, 15, 10),
        Character.villain("Gavião de Fogo", "vilão", "gavião", 400, 20, 15),
    ]


def assign_attributes(
    hero: Character,
    class_choice: int,
    species: str,
    console: Console,
    rng: random.Random | None = None,
) -> None:
    """Set the hero's species, class and rolled stats; an unknown class is drawn at random."""
    hero.species = species
    profile = _CLASSES.get(class_choice)
    if profile is None:
        console.pause(1.0)
        console.say("Classe inválida...\nO universo escolherá por você...\n")
        console.ellipsis(0.2)
        console.say("\n")
        profile = _CLASSES[roll_dice(1, 3, rng)]
    hero.role = profile.role
    hero.strength = roll_dice(*profile.strength, rng)
    hero.healing = roll_dice(*profile.healing, rng)


def _read_name(console: Console) -> str:
    while True:
        name = console.read_line().lstrip()
        if name:
            return name


def _ask_int_or_zero(console: Console) -> int:
    try:
        return console.ask_int()
    except ValueError:
        return 0


def build_sheet(
    hero: Character,
    console: Console,
    rng: random.Random | None = None,
) -> None:
    """Ask for the hero's name, species and class, then show the sheet."""
    console.say("Para começar, vamos precisar definir alguns dados:\n\n")
    console.pause(1.0)
    console.say(f"digite o nome do seu personagem (até {NAME_LIMIT} caracteres):\n")
    hero.name = _read_name(console)

    if len(hero.name) >= NAME_LIMIT:
        console.say(
            "\n[Aviso]: O nome era muito longo e foi encurtado para caber na ficha.\n\n"
        )
        hero.name = hero.name[:NAME_LIMIT]

    console.say(
        f"escolha a espécie do {hero.name}:\n"
        "[1] periquito\n"
        "[2] calopsita\n"
        "[3] papagaio\n"
    )
    while (species := _SPECIES.get(_ask_int_or_zero(console))) is None:
        console.say("\nOpção inválida, digite de novo...\n\n")

    console.pause(1.0)
    console.say(
        "escolha a classe do seu personagem:\ncom muita atenção...\n"
        "[1] mago\t[ataque e cura]\n"
        "[2] curador\t[+cura e -ataque]\n"
        "[3] guerreiro\t[+ataque e -cura]\n"
    )
    class_choice = _ask_int_or_zero(console)

    assign_attributes(hero, class_choice, species, console, rng)

    console.pause(1.0)
    console.say(hero.sheet())


def _introduction(console: Console) -> None:
    console.say("================== birbRPG ===============\n\n")
    console.pause(1.0)
    console.say(
        "Seja Bem Vindo(a) ao BirbRPG!\n"
        "um mundo fantástico onde voce será um passarinho aventureiro\n"
        "numa jornada mística\n\n" + _BIRD_ART
    )
    console.say(f"{_SINGLE_RULE}\n\n")
    console.pause(1.0)
    console.say("Está na hora de saber quem você será")
    console.pause(0.5)
    console.ellipsis(0.5)
    console.pause(1.0)


def _prologue(hero: Character, console: Console) -> None:
    console.pause(2.0)
    console.say(
        "\nHouve um tempo onde os pássaros viviam em paz em sua\n"
        "bela floresta, coletando alimento e praticando voos livres\n\n"
    )
    console.pause(2.0)
    console.say(
        "Mas como nem tudo dura para sempre, há 100 anos,\n"
        "após a chegada de três animais sedentos por poder\n"
        "nenhuma ave soube o que era voar sem medo\n\n"
    )
    console.pause(1.5)
    console.say(
        f"Porém, você, {hero.name}, ainda tem esperança...\n"
        "de dias mais belos...\nde manhãs tranquilas"
    )
    console.ellipsis(0.5)
    console.pause(1.5)
    console.say("E por isso decidiu lutar.\n\n")


def _cat_story(console: Console) -> None:
    console.pause(2.0)
    console.say(
        "O primeiro na linha de frente era o Gato Cat-astrofe,\n"
        "que recebeu esse apelido pelo que ele espalhava em seu caminho...\n"
    )
    console.pause(3.0)
    console.say(
        "Ele é rapido, e fica vigiando as noites, procurando\n"
        "por vítimas descuidadas que ousam sair a luz da Lua.\n\n"
        "Ele só nao espera ter alguem vindo atrás dele.\n"
    )
    console.pause(2.0)


def _wolf_story(console: Console) -> None:
    console.pause(1.0)
    console.say(f"{_SINGLE_RULE}\n\n")
    console.say("\nA jornada continua mais a fundo na floresta...\n")
    console.pause(3.0)
    console.say(
        "\nDepois de uma planície, ao amanhecer, você avista o covil\n"
        "do terrível Lobo Mau, que impede que qualquer um deixe a floresta\n"
        "(e tem como hobbie atacar velhinhas)\n"
    )
    console.pause(2.0)


def _hawk_story(console: Console) -> None:
    console.pause(1.0)
    console.say(f"{_SINGLE_RULE}\n\n")
    console.say("\nVoce alcanca o topo da montanha para o desafio final...\n")
    console.pause(3.0)
    console.say(
        "\nO pôr do Sol marca a paisagem atrás do ninho do pior de todos os vilões"
    )
    console.ellipsis(0.5)
    console.pause(1.5)
    console.say("\nE você se sente tomado por determinação")
    console.pause(2.0)


def play_round(console: Console, rng: random.Random | None = None) -> bool:
    """Play one full adventure; return True when every villain is defeated."""
    hero = Character()
    villains = make_villains()
    stories = (_cat_story, _wolf_story, _hawk_story)

    _introduction(console)
    build_sheet(hero, console, rng)
    _prologue(hero, console)

    alive = True
    for story, villain in zip(stories, villains):
        story(console)
        alive = start_combat(hero, villain, console, rng)
        if not alive:
            break

    console.say(f"\n{_DOUBLE_RULE}\n")
    if alive:
        console.say(
            f"VITÓRIA! O Lendário Birb {hero.name} derrotou todas as ameaças "
            "e salvou a todos!\n"
        )
    else:
        console.say("GAME OVER! Suas asas fraquejaram e o mundo caiu em trevas.\n")
    console.say(f"{_SINGLE_RULE}\n")
    return alive


def _ask_play_again(console: Console) -> bool:
    prompt = "Deseja tentar novamente??\n[1] Sim\n[2] Não\n"
    console.say("\n\n" + prompt)
    while (answer := _ask_int_or_zero(console)) not in (1, 2):
        console.say("Valor inválido!\n")
        console.say("\n" + prompt)
    return answer == 1


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="birbrpg", description="A text role-playing adventure starring a small bird."
    )
    parser.add_argument(
        "--no-delay", action="store_true", help="print narration without pauses"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the game until the player declines to play again."""
    args = _parser().parse_args(argv)
    console = Console(delay=not args.no_delay)
    rng = random.Random(args.seed)
    try:
        while True:
            play_round(console, rng)
            again = _ask_play_again(console)
            console.say(f"{_DOUBLE_RULE}\n")
            if not again:
                return 0
    except EOFError:
        console.say("\n")
        return 1