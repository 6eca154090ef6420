"""Window, input, audio and timing layer that drives the game loop."""

from __future__ import annotations

import argparse
import math
import time
from dataclasses import dataclass
from typing import Callable, NamedTuple

import pygame

from handmade.game import OffscreenBuffer, game_update_and_render
from handmade.sound import SoundOutput

MAX_CONTROLLERS = 4
WINDOW_TITLE = "Hell World"
WINDOW_SIZE = (1920, 1080)
LOW_TONE_HZ = 256
HIGH_TONE_HZ = 512
DPAD_STEP = 4
STICK_DIVISOR = 4096


@dataclass
class ControllerState:
    """Snapshot of one game controller's buttons and axes."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    start: bool = False
    back: bool = False
    left_shoulder: bool = False
    right_shoulder: bool = False
    a_button: bool = False
    b_button: bool = False
    x_button: bool = False
    y_button: bool = False
    left_trigger: int = 0
    right_trigger: int = 0
    left_stick_x: int = 0
    left_stick_y: int = 0
    right_stick_x: int = 0
    right_stick_y: int = 0


class FrameStats(NamedTuple):
    ms_per_frame: float
    fps: float


class FrameTimer:
    """Measures the time between successive frames."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last = clock()

    def tick(self) -> FrameStats:
        """Close the current frame and return its duration and rate."""
        now = self._clock()
        elapsed = now - self._last
        self._last = now
        fps = 1.0 / elapsed if elapsed > 0 else math.inf
        return FrameStats(elapsed * 1000.0, fps)


def _truncating_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def apply_controller(state: ControllerState, x_offset: int, y_offset: int) -> tuple[int, int]:
    """Return the scroll offsets moved by the controller's d-pad and left stick."""
    if state.up:
        y_offset -= DPAD_STEP
    elif state.down:
        y_offset += DPAD_STEP
    if state.left:
        x_offset -= DPAD_STEP
    elif state.right:
        x_offset += DPAD_STEP
    x_offset += _truncating_div(state.left_stick_x, STICK_DIVISOR)
    y_offset += _truncating_div(state.left_stick_y, STICK_DIVISOR)
    return x_offset, y_offset


def handle_key(key: int, pressed: bool, repeat: bool, alt_down: bool, sound_output: SoundOutput) -> bool:
    """React to a key transition; return True when the program should quit."""
    should_quit = key == pygame.K_F4 and alt_down
    if not repeat:
        if key == pygame.K_SPACE:
            sound_output.set_tone(HIGH_TONE_HZ if pressed else LOW_TONE_HZ)
        print(f"{key} {int(pressed)}")
    return should_quit


def handle_event(event: pygame.event.Event, sound_output: SoundOutput) -> bool:
    """Process one event; return True when the program should quit."""
    if event.type == pygame.QUIT:
        print("QUIT")
        return True
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        return handle_key(
            event.key,
            event.type == pygame.KEYDOWN,
            bool(getattr(event, "repeat", False)),
            bool(getattr(event, "mod", 0) & pygame.KMOD_ALT),
            sound_output,
        )
    return False


def _axis(joystick: pygame.joystick.JoystickType, index: int) -> int:
    if index >= joystick.get_numaxes():
        return 0
    return int(joystick.get_axis(index) * 32767)


def _button(joystick: pygame.joystick.JoystickType, index: int) -> bool:
    return index < joystick.get_numbuttons() and bool(joystick.get_button(index))


def _read_controller(joystick: pygame.joystick.JoystickType) -> ControllerState:
    hat_x, hat_y = joystick.get_hat(0) if joystick.get_numhats() else (0, 0)
    return ControllerState(
        up=hat_y > 0,
        down=hat_y < 0,
        left=hat_x < 0,
        right=hat_x > 0,
        a_button=_button(joystick, 0),
        b_button=_button(joystick, 1),
        x_button=_button(joystick, 2),
        y_button=_button(joystick, 3),
        left_shoulder=_button(joystick, 4),
        right_shoulder=_button(joystick, 5),
        back=_button(joystick, 6),
        start=_button(joystick, 7),
        left_stick_x=_axis(joystick, 0),
        left_stick_y=_axis(joystick, 1),
        left_trigger=_axis(joystick, 2),
        right_stick_x=_axis(joystick, 3),
        right_stick_y=_axis(joystick, 4),
        right_trigger=_axis(joystick, 5),
    )


def _open_controllers() -> list[pygame.joystick.JoystickType]:
    controllers = []
    for joystick_index in range(pygame.joystick.get_count()):
        if len(controllers) >= MAX_CONTROLLERS:
            break
        joystick = pygame.joystick.Joystick(joystick_index)
        joystick.init()
        controller_index = len(controllers)
        if joystick.rumble(0.0, 0.0, 1):
            print(f"Rumble enabled for controller {controller_index}")
        else:
            print(f"No rumble support for controller {controller_index}")
        controllers.append(joystick)
    return controllers


def _init_audio(sound: SoundOutput) -> pygame.mixer.ChannelType | None:
    buffer_samples = sound.samples_per_second * sound.bytes_per_sample // 60
    try:
        pygame.mixer.init(frequency=sound.samples_per_second, size=-16, channels=2, buffer=buffer_samples)
    except pygame.error as exc:
        print(f"Can't open audio: {exc}")
        return None
    settings = pygame.mixer.get_init()
    if settings is None or settings[1] != -16:
        print("Can't set audio format to signed 16-bit little-endian")
        pygame.mixer.quit()
        return None
    return pygame.mixer.Channel(0)


def _queue_audio(channel: pygame.mixer.ChannelType, sound: SoundOutput) -> None:
    if channel.get_queue() is not None:
        return
    queued = sound.target_queue_bytes() if channel.get_busy() else 0
    wanted = sound.bytes_to_write(queued)
    chunk = sound.fill(wanted if wanted > 0 else sound.target_queue_bytes())
    tone = pygame.mixer.Sound(buffer=chunk)
    if channel.get_busy():
        channel.queue(tone)
    else:
        channel.play(tone)


def _present(window: pygame.Surface, buffer: OffscreenBuffer) -> None:
    image = pygame.image.frombuffer(buffer.memory, (buffer.width, buffer.height), "BGRA").convert()
    if image.get_size() != window.get_size():
        image = pygame.transform.scale(image, window.get_size())
    window.blit(image, (0, 0))
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the game loop until the user quits."""
    argparse.ArgumentParser(description="Scrolling gradient with a sine tone.").parse_args(argv)
    pygame.init()
    try:
        try:
            window = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        except pygame.error:
            print("No window")
            return 0
        pygame.display.set_caption(WINDOW_TITLE)
        controllers = _open_controllers()
        timer = FrameTimer()

        buffer = OffscreenBuffer(*window.get_size())
        sound = SoundOutput()
        channel = _init_audio(sound)
        x_offset = y_offset = 0
        running = True
        while running:
            for event in pygame.event.get():
                if handle_event(event, sound):
                    running = False

            for joystick in controllers:
                if joystick.get_init():
                    state = _read_controller(joystick)
                    x_offset, y_offset = apply_controller(state, x_offset, y_offset)
                    print(f"{state.left_stick_x} {state.left_stick_y}")

            game_update_and_render(buffer, x_offset, y_offset)
            if channel is not None:
                _queue_audio(channel, sound)
            _present(window, buffer)

            stats = timer.tick()
            print(f"{stats.ms_per_frame:.02f} ms/f, {stats.fps:.02f} f/s")
        return 0
    finally:
        pygame.quit()