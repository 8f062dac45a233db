"""
Tests for TestSession: screen selection, playback, resize and dead pixel cycling.
"""

import pytest

from models.enums import BurnInPatternID, ParamFamily, PlaybackState, TestID
from models.errors import InvalidParameterError
from models.events import EventType


@pytest.fixture
def published(event_bus):
    received = []
    for event_type in EventType:
        event_bus.subscribe(event_type, received.append)
    return received


class TestSelection:

    @pytest.mark.asyncio
    async def test_default_screen_is_dead_pixel(self, session):
        assert session.test_id is TestID.DEAD_PIXEL
        assert session.draw() is True
        assert session.surface.pixel(0, 0) == (255, 0, 0, 255)

    @pytest.mark.asyncio
    async def test_select_test_by_name(self, session, published):
        await session.select_test("contrast")

        assert session.test_id is TestID.CONTRAST
        assert [e.type for e in published] == [EventType.TEST_SELECTED]

    @pytest.mark.asyncio
    async def test_unknown_test(self, session):
        with pytest.raises(InvalidParameterError):
            await session.select_test("tv-static")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("test_id", list(TestID))
    async def test_every_screen_draws(self, session, test_id):
        await session.select_test(test_id)

        assert session.draw() is True
        assert session.surface.frames_presented == 1
        assert session.surface.last_frame[..., 3].any()

    @pytest.mark.asyncio
    async def test_animated_screens(self, session):
        await session.select_test(TestID.GRADIENT)
        assert session.is_animated is False

        await session.select_test(TestID.BURN_IN_FIX)
        assert session.is_animated is True

        await session.select_test(TestID.DEAD_PIXEL)
        await session.store.update(ParamFamily.DEAD_PIXEL, auto_mode=True)
        assert session.is_animated is True


class TestBurnIn:

    @pytest.mark.asyncio
    async def test_tick_advances_phase(self, session, clock):
        await session.select_test(TestID.BURN_IN_FIX)

        assert await session.tick(clock.advance(16)) is True
        assert session.engine.state.offset == pytest.approx(5.0)
        assert session.ticks_rendered == 1

    @pytest.mark.asyncio
    async def test_select_pattern_resets_phase_and_stores_choice(self, session, clock, published):
        await session.select_test(TestID.BURN_IN_FIX)
        await session.tick(clock.advance(16))

        await session.select_pattern("plasma")

        assert session.engine.pattern_id is BurnInPatternID.PLASMA
        assert session.engine.state.offset == 0
        assert session.store.get(ParamFamily.BURN_IN).pattern is BurnInPatternID.PLASMA
        assert EventType.PATTERN_SELECTED in [e.type for e in published]

    @pytest.mark.asyncio
    async def test_config_change_switches_pattern(self, session, clock):
        await session.select_test(TestID.BURN_IN_FIX)
        await session.tick(clock.advance(16))

        await session.store.update(ParamFamily.BURN_IN, pattern="spiral")

        assert session.engine.pattern_id is BurnInPatternID.SPIRAL
        assert session.engine.state.offset == 0

    @pytest.mark.asyncio
    async def test_speed_change_keeps_phase(self, session, clock):
        await session.select_test(TestID.BURN_IN_FIX)
        await session.tick(clock.advance(16))

        await session.store.update(ParamFamily.BURN_IN, speed=100)
        await session.tick(clock.advance(16))

        assert session.engine.state.offset == pytest.approx(15.0)

    @pytest.mark.asyncio
    async def test_invalid_pattern_rejected(self, session):
        with pytest.raises(InvalidParameterError):
            await session.select_pattern("laser")

        assert session.engine.pattern_id is BurnInPatternID.SCROLLING_BARS


class TestPlayback:

    @pytest.mark.asyncio
    async def test_pause_freezes_phase(self, session, clock, published):
        await session.select_test(TestID.BURN_IN_FIX)
        await session.tick(clock.advance(16))

        assert await session.toggle_pause() is PlaybackState.PAUSED
        assert await session.tick(clock.advance(16)) is False
        assert session.engine.state.offset == pytest.approx(5.0)

        assert await session.toggle_pause() is PlaybackState.RUNNING
        await session.tick(clock.advance(16))
        assert session.engine.state.offset == pytest.approx(10.0)

        playback = [e.state for e in published if e.type is EventType.PLAYBACK_CHANGED]
        assert playback == [PlaybackState.PAUSED, PlaybackState.RUNNING]

    @pytest.mark.asyncio
    async def test_pause_twice_publishes_once(self, session, published):
        await session.pause()
        await session.pause()

        assert len(published) == 1

    @pytest.mark.asyncio
    async def test_response_time_excludes_paused_time(self, session, clock):
        await session.select_test(TestID.RESPONSE_TIME)
        await session.tick(clock.now())
        await session.tick(clock.advance(100))

        await session.pause()
        await session.tick(clock.advance(5000))
        await session.resume()
        await session.tick(clock.advance(3000))
        await session.tick(clock.advance(100))

        assert session.motion.state.elapsed_ms == pytest.approx(200)


class TestResize:

    @pytest.mark.asyncio
    async def test_zero_size_skips_tick(self, session, clock, published):
        await session.resize(0, 0)

        assert await session.tick(clock.advance(16)) is False
        assert session.ticks_skipped == 1
        assert session.ticks_rendered == 0
        assert [e.type for e in published] == [EventType.SURFACE_RESIZED]

    @pytest.mark.asyncio
    async def test_resize_applied_before_next_draw(self, session, clock):
        await session.select_test(TestID.BURN_IN_FIX)
        await session.resize(0, 0)
        await session.tick(clock.advance(16))

        await session.resize(50, 40)
        assert session.surface.size.width == 0

        assert await session.tick(clock.advance(16)) is True
        assert (session.surface.size.width, session.surface.size.height) == (50, 40)
        assert session.surface.last_frame.shape == (40, 50, 4)
        # the skipped tick did not advance the phase
        assert session.engine.state.offset == pytest.approx(5.0)

    @pytest.mark.asyncio
    async def test_draw_on_zero_surface(self, session):
        await session.resize(0, 10)

        assert session.draw() is False
        assert session.surface.frames_presented == 0


class TestDeadPixelColors:

    @pytest.mark.asyncio
    async def test_next_and_prev_wrap(self, session):
        assert await session.prev_color() == 7
        assert session.dead_pixel_color.to_hex() == "#ffff00"
        assert await session.next_color() == 0
        assert await session.next_color() == 1

    @pytest.mark.asyncio
    async def test_custom_color(self, session):
        await session.store.update(ParamFamily.DEAD_PIXEL, use_custom_color=True, custom_color="#123456")
        session.draw()

        assert session.surface.pixel(5, 5) == (0x12, 0x34, 0x56, 255)

    @pytest.mark.asyncio
    async def test_auto_mode_cycles_on_interval(self, session, clock):
        await session.store.update(ParamFamily.DEAD_PIXEL, auto_mode=True, interval=500)

        await session.tick(clock.now())
        await session.tick(clock.advance(250))
        assert session.store.get(ParamFamily.DEAD_PIXEL).color_index == 0

        await session.tick(clock.advance(250))
        assert session.store.get(ParamFamily.DEAD_PIXEL).color_index == 1
        assert session.surface.pixel(0, 0) == (0, 255, 0, 255)

    @pytest.mark.asyncio
    async def test_auto_mode_steps_every_elapsed_interval(self, session, clock):
        await session.store.update(ParamFamily.DEAD_PIXEL, auto_mode=True, interval=500)
        await session.tick(clock.now())

        await session.tick(clock.advance(2250))
        assert session.store.get(ParamFamily.DEAD_PIXEL).color_index == 4

        # 250 ms carried over from the previous tick
        await session.tick(clock.advance(250))
        assert session.store.get(ParamFamily.DEAD_PIXEL).color_index == 5

    @pytest.mark.asyncio
    async def test_auto_mode_ignores_paused_time(self, session, clock):
        await session.store.update(ParamFamily.DEAD_PIXEL, auto_mode=True, interval=500)
        await session.tick(clock.now())
        await session.tick(clock.advance(400))

        await session.pause()
        await session.tick(clock.advance(10000))
        await session.resume()
        await session.tick(clock.advance(10000))

        assert session.store.get(ParamFamily.DEAD_PIXEL).color_index == 0

        await session.tick(clock.advance(100))
        assert session.store.get(ParamFamily.DEAD_PIXEL).color_index == 1
