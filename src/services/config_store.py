"""
ConfigStore - current parameter snapshot per family

Snapshots are immutable and replaced wholesale: update() merges the changes
into the current values, validates once, swaps the snapshot and publishes
ConfigChangedEvent. Readers holding the previous snapshot are unaffected.
"""

from typing import Any, Dict, Optional, Union

from models.enums import ParamFamily
from models.events import ConfigChangedEvent
from models.pattern_params import PatternParams
from services import config_validation
from services.event_bus import EventBus
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigStore:
    """
    Holds one validated snapshot per ParamFamily.

    Example:
        store = ConfigStore(event_bus)
        await store.update(ParamFamily.BURN_IN, speed=80, pattern="plasma")
        params = store.get(ParamFamily.BURN_IN)
    """

    def __init__(
        self,
        event_bus: Optional[EventBus] = None,
        initial: Optional[Dict[ParamFamily, PatternParams]] = None,
    ):
        self.event_bus = event_bus
        self._snapshots: Dict[ParamFamily, PatternParams] = {
            family: config_validation.defaults(family) for family in ParamFamily
        }
        # startup values become the reset target
        if initial:
            self._snapshots.update(initial)
        self._startup: Dict[ParamFamily, PatternParams] = dict(self._snapshots)

    def get(self, family: Union[ParamFamily, str]) -> PatternParams:
        return self._snapshots[config_validation.resolve_family(family)]

    def snapshot(self) -> Dict[ParamFamily, PatternParams]:
        return dict(self._snapshots)

    async def update(self, family: Union[ParamFamily, str], **changes: Any) -> PatternParams:
        """
        Merge, validate and publish.

        Returns the new snapshot (or the current one when nothing changed).

        Raises:
            ConfigurationError / InvalidParameterError: change rejected; the
            current snapshot is kept
        """
        family = config_validation.resolve_family(family)
        current = self._snapshots[family]
        params = config_validation.validate(family, {**current.to_dict(), **changes})

        if params == current:
            return current

        return await self._replace(family, params)

    async def reset(self, family: Optional[Union[ParamFamily, str]] = None) -> None:
        """Restore startup values for one family, or for all of them."""
        families = list(ParamFamily) if family is None else [config_validation.resolve_family(family)]
        for fam in families:
            if self._snapshots[fam] != self._startup[fam]:
                await self._replace(fam, self._startup[fam])
        log.info("Configuration reset", families=", ".join(f.value for f in families))

    async def _replace(self, family: ParamFamily, params: PatternParams) -> PatternParams:
        self._snapshots[family] = params
        log.info("Parameters updated", family=family.value, values=params.to_dict())

        if self.event_bus:
            await self.event_bus.publish(ConfigChangedEvent(family, params))
        return params
