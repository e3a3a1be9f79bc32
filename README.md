# periodicity

A small spell-casting role-playing game. You play a warlock facing the
Alpine Terror: queue spells from the button panel, watch the cast bar fill,
and see the damage over time roll in as floating combat text until the enemy
falls.

The game logic is an entity-component core that does not depend on any
window. A `World` (in `periodicity.world`) holds the interface entities
(`EntityManager`), the game entities (`GameEntityManager`) and the sprite
animations (`Animation`). Its systems (`s_mortality`, `s_debuffs`,
`s_damage`, `update_game`) and the animations all advance through
`World.tick(dt)`. Drawing (`periodicity.render.Renderer`) and input
(`periodicity.user_input`) are done with pygame.

## Installing

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

```
periodicity
```

This opens a 1920×1080 window titled "Periodicity". Assets are read from
`./src/assets` by default; another folder can be given with
`--assets PATH`. The folder must hold the fonts `gb.ttf` and `lilex.ttf`
and a `sprites` folder; every `.png`, `.jpg` or `.jpeg` file in `sprites`
is loaded as a texture named after its file stem. A missing font or
sprites folder stops the game with `FileNotFoundError`. Sprites of a
defeated enemy are drawn in grey.

Controls, all by left mouse button:

- **A** casts *Miasma* (a two-second cast), which puts a damage-over-time
  debuff on the enemy.
- **B** casts *Infernum* (a two-second cast), which deals upfront damage and
  then burns over time.
- **C** strikes the enemy for 5 health directly.
- **G** opens and closes the character-stats panel.
- Hovering a button or the cast bar shows its tooltip.

## Using the core in code

```python
from periodicity.buttons import branch_from_click
from periodicity.layout import build_interface
from periodicity.properties import ClickAction
from periodicity.world import World

world = World()
build_interface(world)          # game entities, buttons, panels, sprites
branch_from_click(world, ClickAction.C)
world.tick(0.016)

enemy = world.gem.get_enemy()
print(world.gem.stats[enemy].health_curr)   # 395
```

`build_interface` does not load textures; sprites refer to them by id and
are only drawn once `world.anims.load_textures(folder)` has loaded them.
Button actions that need their button (run, A, B, C, H) raise `LookupError`
when the interface has not been built.

## What it does not do

- The run button and the **H** button only show as pressed; **D**, **E**
  and **F** do nothing. The run button's tooltip speaks of a text editor,
  but the game has no text editor and runs no code.
- There is no saving or loading of a game, and only one enemy is created.