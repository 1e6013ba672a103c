# gemswap

A match-three puzzle game on an 8×8 board, drawn with pygame. Swap two
neighbouring gems so that three or more of the same colour line up. The matched
gems burst and are cleared. The gems above them fall into the gaps, and new gems
drop in from the top. If you do not make a move for a while, the game marks a
swap that would make a match.

## Installing

```
pip install .
```

The package depends on pygame. To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

```
gemswap
gemswap --resources path/to/Resources
```

The command opens a 1024×768 window. It also writes a log to `log.txt` in the
current directory. `--resources` names the directory with the images and the
font. The default is `Resources`. The directory must hold these files:

- `bitmap fonts/Consolas.png` is the font atlas.
- `bitmap fonts/Consolas.fnt` holds the glyph records. Each record is eight
  comma-separated integers: `id,x,y,width,height,offset_x,offset_y,advance`.
- `sprites/bg.png`, `sprites/selected.png`, `sprites/gem_bg.png`,
  `sprites/stone.png` and `sprites/hint_bg.png`.
- `sprites/3.png`, `sprites/5.png`, `sprites/7.png`, `sprites/14.png` and
  `sprites/17.png` are the five gem colours.
- `sprites/burst_sprite_sheet.png` is the burst animation.

If an image or the font cannot be loaded, the error goes to the log and the
game does not start.

Controls:

- Press on a gem and drag more than 40 pixels left, right, up or down. The gem
  swaps with its neighbour in that direction.
- Or click two gems, one after the other. If they are adjacent, they swap. If
  they are not, both are deselected.
- If a swap makes no match, the gems move over and then back.
- Four seconds after the board waits for input, a hint frames one pair of gems
  that would make a match if swapped.
- Escape or closing the window quits.

The frame rate is shown at the top of the screen.

## What it does not do

- The game plays no sound. `gemswap.sound.SoundController.load` can load sound
  files for the match, swap and settle effects. However, the game uses the
  shared controller from `get_sound_controller()`, and that controller has no
  sounds.
- The window is always created windowed. The `full_screen` argument of
  `gemswap.game.Game` is recorded and not used.
- There is no score, no level goal and no saved state. Only the first board
  layout in `gemswap.settings.BOARDS` is used.

## Using the pieces

The board and the states can be driven without a window:

```python
import pygame

from gemswap.assets import AssetManager, Texture
from gemswap.grid import TEXTURE_NAMES, GridController
from gemswap.randomness import RandomSource
from gemswap.sound import SoundController
from gemswap.states.fill import FillEmptySlotsState

assets = AssetManager()
for name in TEXTURE_NAMES:
    assets.add_texture(name, Texture(pygame.Surface((64, 64))))

grid = GridController(None, assets=assets, rng=RandomSource(seed=1))
state = FillEmptySlotsState(grid, SoundController({}))
state.execute()
while not state.is_done():
    grid.update(0.05)
    state.update(0.05)

state = state.next_state()  # a MatchResolutionState
```

### Board and game

- `gemswap.grid.GridController` holds the slots (`slots`) and the gems on the
  board (`gems`). It also runs burst effects and the hint marker, and gathers
  the per-instance drawing data (`InstancingData`).
- `gemswap.game.Game` opens the window and runs the loop. `gemswap.game.main`
  is the command.

### States

The states in `gemswap.states` run the turn cycle. Each one has `kind`,
`execute()`, `update(dt)`, `is_done()` and `next_state()`:

- `fill.FillEmptySlotsState` lets hanging gems fall and spawns new ones until
  no slot is free.
- `match_resolution.MatchResolutionState` clears every row and column run of
  three or more. If there is no run, it hands over to input.
- `mouse_input.MouseInputState` turns drags and clicks into swaps.
- `hint.HintState` waits, then shows a swap that makes a match.
  `hint.forms_match(slots, slot)` tells whether a slot is in a line of three
  equal gems within two cells of it.
- `delay.DelayState` waits a set time, then hands over to a configured state.

### Helpers

- `gemswap.vectors` holds `Vec2`, `Vec3`, `Vec4` and scalar helpers.
- `gemswap.matrix` holds `Mat4`, `translate`, `scale`, `rotate`, `ortho`,
  `frustum`, `perspective` and `look_at`.
- `gemswap.camera.Camera` is the camera.
- `gemswap.timer.Timer` is the frame timer. It takes an optional clock
  function.
- `gemswap.randomness.RandomSource` is a random source that can be seeded.
- `gemswap.render`, `gemswap.text` and `gemswap.batch` draw sprites, bitmap
  text and batches of quads onto a pygame surface.