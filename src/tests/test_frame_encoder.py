"""
Tests for the bit-serial frame protocol.

A recording port captures every line write so the exact wire sequence can
be checked; SimulatedBitPort decodes whole frames.
"""

import pytest

from led_system import BitPort, FrameEncoder, OutputLine, PixelBuffer, frame_bytes
from led_system.frame_encoder import byte_to_bits, pixel_word


class RecordingLine(OutputLine):
    def __init__(self, name, events):
        self.name = name
        self.events = events

    def set_high(self):
        self.events.append((self.name, 1))

    def set_low(self):
        self.events.append((self.name, 0))


class RecordingPort(BitPort):
    def __init__(self):
        self.events = []
        self._data = RecordingLine("data", self.events)
        self._clock = RecordingLine("clock", self.events)

    @property
    def data(self):
        return self._data

    @property
    def clock(self):
        return self._clock

    def open(self):
        pass

    def close(self):
        pass


class TestFrameBytes:

    @pytest.mark.parametrize("brightness,level", [(None, 10), (0.0, 0), (1.0, 31)])
    def test_all_zero_buffer(self, brightness, level):
        payload = frame_bytes(PixelBuffer(brightness))

        expected = bytes(4) + bytes([0xE0 | level, 0, 0, 0]) * 8 + bytes(4)
        assert payload == expected
        assert len(payload) == 40

    def test_pixel_word_order_is_header_blue_green_red(self):
        assert pixel_word(red=0x11, green=0x22, blue=0x33, brightness_level=5) == bytes([0xE5, 0x33, 0x22, 0x11])

    def test_pixels_in_index_order(self, buffer):
        buffer.set_pixel(0, 1, 2, 3)
        buffer.set_pixel(7, 4, 5, 6)
        payload = frame_bytes(buffer)

        assert payload[4:8] == bytes([0xEA, 3, 2, 1])
        assert payload[32:36] == bytes([0xEA, 6, 5, 4])

    def test_byte_to_bits_msb_first(self):
        assert byte_to_bits(0x80) == [1, 0, 0, 0, 0, 0, 0, 0]
        assert byte_to_bits(0xE5) == [1, 1, 1, 0, 0, 1, 0, 1]


class TestWireSequence:

    def test_each_bit_is_data_then_clock_pulse(self):
        port = RecordingPort()
        FrameEncoder(port).write_byte(0xA0)

        expected = []
        for bit in [1, 0, 1, 0, 0, 0, 0, 0]:
            expected += [("data", bit), ("clock", 1), ("clock", 0)]
        assert port.events == expected

    def test_render_ends_with_latch_pulses(self, buffer):
        port = RecordingPort()
        FrameEncoder(port).render(buffer)

        tail = port.events[-9:]
        assert tail == [("data", 0)] + [("clock", 1), ("clock", 0)] * 4

    def test_render_event_count(self, buffer):
        port = RecordingPort()
        FrameEncoder(port).render(buffer)

        clock_pulses = sum(1 for name, level in port.events if name == "clock" and level == 1)
        assert clock_pulses == 40 * 8 + 4


class TestSimulatedPort:

    def test_decoded_frame_matches_payload(self, port, encoder, buffer):
        buffer.set_pixel_hex(3, "FF8000")
        encoder.render(buffer)

        [(payload, latch_bits)] = port.frames()
        assert payload == frame_bytes(buffer)
        assert latch_bits == [0, 0, 0, 0]
        assert port.pixels(payload)[3] == (255, 128, 0, 10)

    def test_clear_then_render_matches_initial_frame(self, port, encoder, buffer):
        encoder.render(buffer)
        buffer.set_all(200, 100, 50)
        encoder.render(buffer)
        buffer.clear()
        encoder.render(buffer)

        frames = [payload for payload, _ in port.frames()]
        assert frames[2] == frames[0]
        assert frames[1] != frames[0]

    def test_render_count(self, port, encoder, buffer):
        for _ in range(3):
            encoder.render(buffer)
        assert encoder.render_count == 3
        assert port.frame_count == 3

    def test_write_to_closed_port_fails(self, buffer):
        from led_system import SimulatedBitPort
        closed = SimulatedBitPort()
        with pytest.raises(RuntimeError):
            FrameEncoder(closed).render(buffer)
