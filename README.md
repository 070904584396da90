# birbrpg

A turn-based text role-playing game for the terminal. You are a little bird
on a quest to free the forest from three villains. The game text is in
Portuguese.

## Installing

    pip install .

## Playing

    birbrpg

Options:

- `--no-delay` prints the narration without the dramatic pauses.
- `--seed N` seeds the dice, so the same inputs give the same game.

The command exits with status 0 when you choose not to play again. It exits
with status 1 if the input ends during a game.

### Your bird

First you name your bird. A name of 20 characters or more is cut to 20. Next
you choose a species: periquito, calopsita or papagaio. The game asks again
until you give a valid choice. Last, you choose a class. Your strength and
healing power are rolled from the class ranges:

| Class     | Strength | Healing |
|-----------|----------|---------|
| mago      | 10–20    | 4–8     |
| curador   | 10–15    | 8–15    |
| guerreiro | 15–25    | 3–7     |

If you give an invalid class, the game picks one of the three at random. Your
bird starts with 200 health.

### The villains

You fight them in this order:

| Villain          | Health | Strength | Healing |
|------------------|--------|----------|---------|
| Gato Cat-astrofe | 100    | 10       | 5       |
| Lobo Mau         | 200    | 15       | 10      |
| Gavião de Fogo   | 400    | 20       | 15      |

### Combat

Each of your turns offers three actions:

1. **Atacar**. The attack hits on a d20 roll above 6. Damage is your strength
   times a random multiplier between 1.5 and 2.5, rounded down. If the villain
   is guarding, the damage is halved and the guard drops.
2. **Defender**. Villain attacks do half damage until your next turn.
3. **Curar**. You gain your healing power times the same kind of multiplier.
   Health never goes above your maximum.

On its turn, a villain attacks 80% of the time, and the attack hits on a d20
roll above 3. It guards 10% of the time and heals 10% of the time.

Each time you beat a villain, you get these rewards:

- Your maximum health goes up by 50.
- You recover 10–30 health, up to the new maximum.
- Your strength goes up by 5–15 and your healing power by 3–10.

You win if you beat all three villains. After each game you can choose to play
again.

## Using it from Python

The modules can be used on their own:

- `birbrpg.dice`: `roll_dice(low, high, rng=None)` and
  `damage_multiplier(rng=None)`.
- `birbrpg.character`: the `Character` dataclass with
  `Character.villain(...)`, `sheet()`, `heal(rng=None)` and
  `take_damage(amount)`. The last two return the message that describes
  the change.
- `birbrpg.console`: `Console(stdin=None, stdout=None, delay=True, sleep=time.sleep)`
  does all reading and writing. Pass it `io.StringIO` streams and
  `delay=False` to script a game.
- `birbrpg.combat`: `start_combat`, `player_turn`, `enemy_turn` and
  `post_combat_rewards`.
- `birbrpg.game`: `make_villains()`, `assign_attributes(...)`,
  `build_sheet(...)`, `play_round(console, rng=None)` and `main(argv=None)`.

Every function that rolls dice takes an optional `random.Random`.

## What it does not do

There is no saving or loading. A game exists only while the command runs.

## Running the tests

    pip install ".[test]"
    pytest