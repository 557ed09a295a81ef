# squaregame

You steer a yellow square across a large dark field. Ninety-nine red squares
are placed at random positions around the start. The game has a title screen,
a main menu, a settings screen where you can rebind the movement keys, the game
itself and a pause overlay.

## Installing

```
pip install .
```

The game uses `pygame` to open its window, draw and read input.

## Playing

```
squaregame
```

Options:

- `--config PATH`: the display settings file. The default is `cfg/gfx.ini`.
- `--font PATH`: the font file. The default is `assets/fonts/PixellettersFull.ttf`.

Both paths are resolved from the current directory. If the font file does not
exist, the command prints the error and exits with status 1.

Screens:

- **Title screen**: a blinking prompt. Release any key to go to the menu.
- **Menu**: use Up and Down to pick *Play*, *Settings* or *Exit*, then release
  Enter. *Exit* closes the window.
- **Game**: hold the arrow keys to move the square. Diagonal movement is slowed
  so that it is as fast as straight movement. The camera follows the square,
  which turns red while it moves and shows its hitpoints. Press Escape, or
  switch to another window, to pause.
- **Pause**: Escape goes back to the game. Backspace goes back to the main menu.
- **Settings**: select a movement action and release Enter. The next key you
  release is bound to that action, and the label next to it shows the key's
  name. *Back* returns to the menu. Bindings last until the game closes.

The frame rate is shown in the top-left corner of the window.

## Display settings

The display settings file holds one `key=value` pair per line:

```
title=Title
resolution_width=1280
resolution_height=720
fullscreen=0
vsync=0
framerate=60
```

`framerate` is the frame-rate limit. Lines with an unknown key are logged as a
warning and skipped. A value that is not an integer, where one is expected,
raises `ValueError`. If the file cannot be opened, the game opens an 800×600
window titled `title`, with vsync on and the frame rate limited to one frame
per second.

The `GFX` dataclass in `squaregame.gfx` reads and writes this format with
`GFX.load(path)` and `GFX.save(path)`. By default, the resolution is that of
the desktop.

## Using the pieces

You can use parts of the engine on their own:

- `squaregame.scene_node.SceneNode`: a transform hierarchy. It updates and draws
  its children and passes `squaregame.command.Command` objects down the tree.
  A node runs a command when its category matches the command's `Category` flags.
- `squaregame.entity.Entity`: a scene node with hitpoints and a velocity.
- `squaregame.command_queue.CommandQueue`: a first-in, first-out queue of commands.
- `squaregame.state_stack.StateStack`: a screen stack. Push, pop and clear
  requests are held back and applied after each update or event pass.
- `squaregame.container.Container`, `squaregame.button.Button` and
  `squaregame.label.Label`: a keyboard-driven menu GUI.
- `squaregame.player_controller.PlayerController`: key bindings that turn held
  keys into movement commands.
- `squaregame.resources.ResourceManager`: resources held by identifier, each
  loaded once. `font_holder()` and `texture_holder()` create holders for fonts
  and images.

## What it does not do

- The squares are drawn as plain coloured shapes, and no textures are loaded.
- The red squares do not move.
- Nothing collides. Hitpoints never change during play.
- Neither changed key bindings nor display settings are saved when the game exits.

## Tests

```
pip install .[test]
pytest
```