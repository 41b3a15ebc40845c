# sandfall

sandfall is a small falling-sand toy. You place grains of sand in a window and
they fall. A grain moves straight down when the space below it is free. When
that space is taken by a grain that has come to rest, it slides down to the
left or down to the right. When it can do neither, it stays where it is. A grain
waits while the grain below it is still falling. The grid is 500 by 500 cells,
drawn in an 800 by 800 window.

## Installing

```
pip install .
```

This installs pygame as well.

## Playing

```
sandfall
```

Controls:

- **Left click** places one grain under the pointer.
- **Hold Left Shift and the left button** places grains continuously.
- **Hold Left Control and the left button** places a disc of grains with radius 10.
- **Right click** advances the simulation by one extra step.
- Closing the window ends the program.

The window is limited to 60 frames per second. The simulation runs at 50 steps
per second, whatever the frame rate. Each frame prints the FPS, the frame time
and the highest frame time so far.

## Using the simulation from code

`sandfall.world.World` holds the grid and does not need a window:

```python
from sandfall.world import World

world = World()
world.create_cell_from_click((400, 10))    # pixel position in the window
world.create_cell_circle_from_click((200, 200), 5)
for _ in range(100):
    world.step()
print(sorted(world.occupied()))            # grid positions that hold sand
```

`World(width, height, window_height)` sets the grid size and the window height
the cell size is worked out from (500, 500 and 800 by default).
`World.grid_position` turns a pixel position into a grid position.
`World.grid_positions_in_radius` lists every grid position within a radius of a
pixel position. `create_cell_from_click` returns the new cell, or `None` when
the place is outside the grid or already taken; `create_cell_circle_from_click`
returns the list of cells it made.

Grains are `sandfall.cell.Cell` objects. Their draw data is held as
`sandfall.cell.Vertex` records, six to a cell (two triangles), in
`World.vertices`. Each grain's colour is a sandy tone with a little random
variation, drawn by `sandfall.rng.random_int`.

`sandfall.game` holds the window: `Game` runs the main loop, `FrameStats`
keeps the frame timings and `ticks_due` works out how many simulation steps a
frame owes. `sandfall.paths` gives the directory of the running program
(`executable_path`) and the directory two levels above it (`project_path`).

## What it does not do

There is only one material, sand. The package cannot save or load a scene, and
it has no way to erase grains once they are placed.

## Tests

```
pip install .[test]
pytest
```