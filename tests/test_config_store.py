"""
Tests for ConfigStore snapshot replacement and change events.
"""

import pytest

from models.enums import BurnInPatternID, ParamFamily
from models.errors import InvalidParameterError
from models.events import EventType
from services import config_validation
from services.config_store import ConfigStore


@pytest.fixture
def changes(event_bus):
    received = []
    event_bus.subscribe(EventType.CONFIG_CHANGED, received.append)
    return received


class TestConfigStore:

    def test_starts_with_defaults(self, store):
        for family in ParamFamily:
            assert store.get(family) == config_validation.defaults(family)

    def test_initial_snapshots_override_defaults(self):
        custom = config_validation.validate(ParamFamily.CONTRAST, {"grid_size": 32})
        store = ConfigStore(initial={ParamFamily.CONTRAST: custom})

        assert store.get("contrast").grid_size == 32

    @pytest.mark.asyncio
    async def test_update_replaces_snapshot_and_publishes(self, store, changes):
        before = store.get(ParamFamily.BURN_IN)
        after = await store.update(ParamFamily.BURN_IN, speed=80, pattern="plasma")

        assert after.speed == 80
        assert after.pattern is BurnInPatternID.PLASMA
        assert store.get(ParamFamily.BURN_IN) is after
        # readers holding the old snapshot are unaffected
        assert before.speed == 50

        assert len(changes) == 1
        assert changes[0].family is ParamFamily.BURN_IN
        assert changes[0].params is after

    @pytest.mark.asyncio
    async def test_update_is_clamped(self, store):
        params = await store.update("brightness", brightness=250)

        assert params.brightness == 100

    @pytest.mark.asyncio
    async def test_no_op_update_does_not_publish(self, store, changes):
        await store.update(ParamFamily.CONTRAST, grid_size=8)

        assert changes == []

    @pytest.mark.asyncio
    async def test_rejected_update_keeps_current(self, store, changes):
        current = store.get(ParamFamily.BURN_IN)

        with pytest.raises(InvalidParameterError):
            await store.update(ParamFamily.BURN_IN, pattern="laser")

        assert store.get(ParamFamily.BURN_IN) is current
        assert changes == []

    @pytest.mark.asyncio
    async def test_reset_one_family(self, store, changes):
        await store.update(ParamFamily.GRADIENT, steps=16)
        await store.update(ParamFamily.CONTRAST, grid_size=2)

        await store.reset(ParamFamily.GRADIENT)

        assert store.get(ParamFamily.GRADIENT).steps == 256
        assert store.get(ParamFamily.CONTRAST).grid_size == 2
        assert len(changes) == 3

    @pytest.mark.asyncio
    async def test_reset_all(self, store):
        await store.update(ParamFamily.GRADIENT, steps=16)
        await store.update(ParamFamily.CONTRAST, grid_size=2)

        await store.reset()

        assert store.snapshot() == {family: config_validation.defaults(family) for family in ParamFamily}

    @pytest.mark.asyncio
    async def test_works_without_event_bus(self):
        store = ConfigStore()
        params = await store.update(ParamFamily.DEAD_PIXEL, color_index=3)

        assert params.color_index == 3
