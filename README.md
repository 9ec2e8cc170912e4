# baddcs

A small top-down jet combat arcade game. You fly a fighter near the bottom
of the screen while a wave of five enemy jets comes down from above. The
enemies drift left and right, fire their guns and, now and then, launch a
homing missile at you. A radar scope on the left shows the enemies ahead of
you; click a contact to lock it and fire your own guided missile at it.

## Installing

```
pip install .
```

The game uses `pygame` for its window, drawing, sound and input.

## Playing

```
baddcs
```

The window opens on a title screen; click **START** to begin.

| Key / mouse       | Action                                              |
|-------------------|-----------------------------------------------------|
| Left / Right      | Move your jet                                       |
| Space             | Fire the gun                                        |
| Q                 | Release a pair of flares                            |
| Click a contact   | Select or deselect a radar contact                  |
| M                 | Fire a missile at the selected contact once locked  |
| Enter             | Restart the round                                   |
| Escape            | Quit                                                |

You start with 10 health. An enemy bullet takes 1, an enemy missile hit
takes 5 and colliding with an enemy jet takes 8. Each enemy takes two gun
hits, or one missile. Shoot down every enemy to win ("YOU WON"); at zero
health the round ends ("GAME OVER"). The bar along the bottom shows your
health and the number of enemies left.

### Radar

The scope refreshes once a second and shows the enemies inside the radar's
range in front of you. Each contact is re-rolled as lockable or not from
moment to moment (about nine times in ten it is). Clicking a lockable
contact selects it and turns it red; keeping it selected for one second
completes the lock, after which **M** fires a missile. A missile steers
towards its target until it is within 200 pixels of it, then flies straight
on.

While an enemy missile is in the air, a warning arc along the top of the
scope flashes yellow.

## Assets

The game looks for its files relative to the directory it is started from:

- `Graphics/jet.png`, `Graphics/jet2.png`, `Graphics/missile.png`,
  `Graphics/radar_jet.png`
- `Fonts/PressStart2P-Regular.ttf`, `Fonts/Quantico-Bold.ttf`
- `Sounds/gunfire.wav`, `Sounds/bullet_hit.wav`,
  `Sounds/radar_update_blip.wav`, `Sounds/Chaff_Flare_SFX.wav`,
  `Sounds/missile_lock_VWS.wav`, `Sounds/missile_locking.mp3`,
  `Sounds/Wild_Blue_Yonder.mp3` (title music)
- `missile_launch_warning.mp3` (in the starting directory itself)

None of them is shipped with the package. Where an image is missing a plain
shape is drawn instead, where a font is missing pygame's default font is
used, and where a sound is missing (or no audio device is available) the
game stays silent.

## Using the pieces from code

The game logic does not need a window. `baddcs.game.Game` holds one round
and is advanced with `Game.update(now, controls)` and
`Game.handle_input(now, controls)`, where `now` is a time in seconds and
`controls` is a `baddcs.game.Controls` describing the frame's inputs. A
`random.Random` can be passed as `rng=` for repeatable waves, and a
`baddcs.core.Screen` to change the playing area.

## What the game does not do

- Flares are visual only: releasing them does not break the lock of an
  enemy missile, and enemies never release flares of their own.
- There is a single wave of enemies; there is no score, no levels and
  nothing is saved between runs.
- There is no pause and no option to change the window size, enemy count or
  key bindings from the command line.

## Running the tests

```
pip install .[test]
pytest
```