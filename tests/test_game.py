import pytest

from handmade.game import OffscreenBuffer, game_update_and_render, render_weird_gradient


def test_new_buffer_has_pitch_and_memory_for_its_size():
    buffer = OffscreenBuffer(10, 6)
    assert buffer.pitch == 10 * 4
    assert len(buffer.memory) == 10 * 6 * 4
    assert not any(buffer.memory)


def test_resize_replaces_dimensions_and_memory():
    buffer = OffscreenBuffer(4, 4)
    render_weird_gradient(buffer, 1, 1)
    buffer.resize(7, 3)
    assert (buffer.width, buffer.height, buffer.pitch) == (7, 3, 28)
    assert len(buffer.memory) == 7 * 3 * 4
    assert not any(buffer.memory)


def test_resize_rejects_negative_dimensions():
    buffer = OffscreenBuffer(2, 2)
    with pytest.raises(ValueError):
        buffer.resize(-1, 2)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_pixel_out_of_range_raises(x, y):
    buffer = OffscreenBuffer(3, 3)
    with pytest.raises(IndexError):
        buffer.pixel(x, y)


def test_gradient_without_offsets_puts_coordinates_in_channels():
    buffer = OffscreenBuffer(16, 12)
    render_weird_gradient(buffer, 0, 0)
    value = buffer.pixel(5, 7)
    assert value & 0xFF == 5
    assert (value >> 8) & 0xFF == 7
    assert value >> 16 == 0


def test_gradient_upper_bytes_stay_zero():
    buffer = OffscreenBuffer(20, 5)
    render_weird_gradient(buffer, 123, 77)
    assert buffer.pixel(0, 0) == 0x4D7B
    upper = [buffer.pixel(x, y) >> 16 for y in range(5) for x in range(20)]
    assert upper == [0] * 100
    assert list(buffer.memory[2::4]) == [0] * 100
    assert list(buffer.memory[3::4]) == [0] * 100


def test_offsets_wrap_every_256():
    first = OffscreenBuffer(300, 4)
    second = OffscreenBuffer(300, 4)
    render_weird_gradient(first, 3, 9)
    render_weird_gradient(second, 3 + 256, 9 - 256)
    assert first.memory == second.memory


def test_blue_offset_shifts_columns():
    shifted = OffscreenBuffer(8, 4)
    plain = OffscreenBuffer(8, 4)
    render_weird_gradient(shifted, 1, 0)
    render_weird_gradient(plain, 0, 0)
    for y in range(4):
        for x in range(7):
            assert shifted.pixel(x, y) == plain.pixel(x + 1, y)


def test_green_offset_shifts_rows():
    shifted = OffscreenBuffer(5, 6)
    plain = OffscreenBuffer(5, 6)
    render_weird_gradient(shifted, 0, 2)
    render_weird_gradient(plain, 0, 0)
    for y in range(4):
        for x in range(5):
            assert shifted.pixel(x, y) == plain.pixel(x, y + 2)


def test_game_update_and_render_draws_the_gradient():
    via_game = OffscreenBuffer(9, 9)
    direct = OffscreenBuffer(9, 9)
    game_update_and_render(via_game, 40, -12)
    render_weird_gradient(direct, 40, -12)
    assert via_game.memory == direct.memory
    assert any(via_game.memory)