# emojivshuman

A small real-time lane-defence game. Plant emoji on a 5 × 7 grid, spend
stars to afford more of them, and stop waves of humans before they reach
the left edge of the field. Survive all the waves (thirty in a fresh level)
to win.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window and reads the mouse.

## Playing

```
emojivshuman
```

By default the level files are kept in the current directory. Use
`--directory` to keep them somewhere else:

```
emojivshuman --directory saves
```

The start menu has two buttons:

- **新的游戏** (new game) starts the level in `Normal.txt`.
- **读取存档** (load archive) continues the level saved in `Archive.txt`.

If the level file is missing, a default level is written to it and then
loaded.

During a game:

- Click a card in the top slot to pick an emoji, then click a free brick
  to plant it. Each emoji costs stars, and a card is greyed out and cannot
  be picked until you can afford it.
- Pick the shovel card, then click an emoji to remove it.
- You gain 30 stars every 150 frames. Star emoji also produce stars; click
  one to collect 25 more.
- A defeated human sometimes drops a coin; click it to collect it. Coins
  buy props:
  - the rocket (10 coins) sends a rocket down each of the five lanes;
  - the candy (5 coins) restores every emoji to full health.
- The **菜单** (menu) button pauses the game. The pause dialog can continue,
  restart the level from `Normal.txt`, or return to the start menu.

A human that walks past the left edge loses the game. Clearing the field
after the last wave wins it.

Leaving a level (returning to the menu, restarting, or closing the window)
saves a game that is still running to `Archive.txt`. Once a game is won or
lost, `Archive.txt` is reset to the contents of `Normal.txt`.

## Emoji

| Card   | Stars | Effect                                          |
|--------|-------|-------------------------------------------------|
| Sweat  | 50    | Shoots a plain bullet                           |
| Stars  | 50    | Produces a star every ten seconds               |
| Love   | 75    | Shoots hearts that pierce every human they meet |
| Hot    | 75    | Shoots blood that makes the target bleed        |
| Cold   | 75    | Shoots snow that slows the target               |
| Laugh  | 100   | Shoots two bullets per volley                   |

Shooting emoji only fire while a human is in their row.

## What it does not do

The window is drawn with plain shapes and text: there are no sprites,
animations or background pictures. No music or sound is played; the game
only announces sound cues by name through its `sound` signal.

## Using it as a library

The game logic does not depend on the drawing code.
`emojivshuman.game.Game` runs one level loaded from a level file (creating
the file with the default level if it is missing):

```python
from emojivshuman.game import Game

game = Game("Normal.txt")
game.tick()              # one frame; also decides which cards are affordable
game.select_card(1)      # pick the Sweat card
game.click_brick(3, 2)   # plant it at row 3, column 2
game.advance(10_000)     # let ten seconds of game time pass
print(game.star, game.round, len(game.humans))
game.close()             # save to Archive.txt next to the level file
```

`Game` also offers `pause()`, `resume()`, `generate_humans()`,
`pick_up(item)`, `click_plant(plant)`, `to_archive()` and `save()`. Pass
`rng=` a `random.Random` to make waves and coin drops repeatable.

Level files can be handled on their own with `emojivshuman.archive`:
`load_archive`, `save_archive`, `parse_archive`, `format_archive` and
`default_archive`. Malformed files raise `ArchiveError`.

## Running the tests

```
pip install .[test]
pytest
```