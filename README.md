# handmade

A small game-loop prototype built on pygame. It opens a resizable 1920×1080
window titled "Hell World" and fills it with a blue/green gradient. A
gamepad's d-pad or left stick scrolls the gradient. A stereo 16-bit sine tone
plays at 48000 samples per second. The tone is 256 Hz, and it rises to 512 Hz
while the space bar is held down.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
handmade
```

Press Alt+F4 or close the window to quit. The program prints to standard
output as it runs:

- each key press or release that is not a repeat, as the key code followed by `1` or `0`;
- the left-stick position of every connected controller, once per frame;
- the timing of each frame, as milliseconds per frame and frames per second.

When it starts, it also reports whether each controller supports rumble.
At most four controllers are used.

## Using the pieces

### `handmade.game`

- `OffscreenBuffer(width, height)` is a 32-bit-per-pixel buffer stored row by
  row in a `bytearray`, little-endian. It has `width`, `height`, `pitch` and
  `memory`.
  - `resize(width, height)` reallocates and clears the buffer. Negative
    dimensions raise `ValueError`.
  - `pixel(x, y)` returns one pixel's 32-bit value. A position outside the
    buffer raises `IndexError`.
- `render_weird_gradient(buffer, blue_offset, green_offset)` sets every pixel
  to `(green << 8) | blue`. Blue is `(x + blue_offset) mod 256` and green is
  `(y + green_offset) mod 256`.
- `game_update_and_render(buffer, blue_offset, green_offset)` draws one frame.
  At present it draws only the gradient.

### `handmade.sound`

`SoundOutput` holds the state of a continuous sine tone. Its defaults are
48000 samples per second, 256 Hz and volume 3000. Its latency is one
fifteenth of a second of samples.

- `set_tone(tone_hz)` changes the frequency and recomputes the wave period in
  samples. A frequency that is not positive, or one too high for the sample
  rate, raises `ValueError`.
- `target_queue_bytes()` gives the number of bytes needed to cover the latency.
- `bytes_to_write(queued_bytes)` gives the number of bytes still needed to
  reach that target.
- `fill(bytes_to_write)` returns that many bytes of interleaved little-endian
  stereo samples and advances the phase of the wave. Any trailing partial
  frame is silent. A negative count raises `ValueError`.

### `handmade.platform`

- `ControllerState` is a snapshot of one controller's buttons, triggers and
  sticks.
- `apply_controller(state, x_offset, y_offset)` returns new offsets. The d-pad
  moves them by 4. The left stick adds its value divided by 4096, truncated
  toward zero.
- `handle_key(key, pressed, repeat, alt_down, sound_output)` switches the tone
  when the space bar is pressed or released. It returns `True` for Alt+F4.
- `handle_event(event, sound_output)` handles a pygame event. It returns
  `True` when the program should quit.
- `FrameTimer().tick()` returns the time since the previous tick, as
  `ms_per_frame` and `fps`.
- `main(argv=None)` runs the program.

## Limitations

- The back buffer keeps the size the window had when it opened. If the window
  is resized, each frame is scaled to fit it.
- Controller buttons other than the d-pad are read, but they do nothing.
- Rumble is only probed at start-up. It is never used.
- There is no game beyond the scrolling gradient and the tone: no game state
  and no saving.