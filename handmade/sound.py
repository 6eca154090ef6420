"""Sine-wave tone generation for the audio queue."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

SAMPLES_PER_SECOND = 48000
DEFAULT_TONE_HZ = 256
DEFAULT_TONE_VOLUME = 3000
CHANNELS = 2
BYTES_PER_SAMPLE = 2 * CHANNELS


@dataclass
class SoundOutput:
    """State of a continuous stereo 16-bit sine tone."""

    samples_per_second: int = SAMPLES_PER_SECOND
    tone_hz: int = DEFAULT_TONE_HZ
    tone_volume: int = DEFAULT_TONE_VOLUME
    running_sample_index: int = 0
    bytes_per_sample: int = BYTES_PER_SAMPLE
    t_sine: float = 0.0
    wave_period: int = field(init=False)
    latency_sample_count: int = field(init=False)

    def __post_init__(self) -> None:
        self.set_tone(self.tone_hz)
        self.latency_sample_count = self.samples_per_second // 15

    def set_tone(self, tone_hz: int) -> None:
        """Change the tone frequency and recompute the wave period in samples."""
        if tone_hz <= 0:
            raise ValueError(f"tone frequency must be positive, got {tone_hz}")
        self.tone_hz = tone_hz
        self.wave_period = self.samples_per_second // tone_hz
        if self.wave_period <= 0:
            raise ValueError(f"tone of {tone_hz} Hz is too high for {self.samples_per_second} samples/s")

    def target_queue_bytes(self) -> int:
        """Bytes of audio that should be waiting in the queue to cover the latency."""
        return self.latency_sample_count * self.bytes_per_sample

    def bytes_to_write(self, queued_bytes: int) -> int:
        """Bytes still needed to bring a queue holding ``queued_bytes`` up to target."""
        return self.target_queue_bytes() - queued_bytes

    def fill(self, bytes_to_write: int) -> bytes:
        """Generate ``bytes_to_write`` bytes of interleaved little-endian stereo samples.

        A trailing partial frame, if any, is filled with silence.
        """
        if bytes_to_write < 0:
            raise ValueError(f"cannot write a negative number of bytes: {bytes_to_write}")
        sample_count = bytes_to_write // self.bytes_per_sample
        step = 2.0 * math.pi / self.wave_period
        frames = []
        for _ in range(sample_count):
            value = int(math.sin(self.t_sine) * self.tone_volume)
            frames.extend((value, value))
            self.t_sine += step
        self.running_sample_index = (self.running_sample_index + sample_count) & 0xFFFFFFFF
        data = struct.pack(f"<{len(frames)}h", *frames)
        return data + bytes(bytes_to_write - len(data))