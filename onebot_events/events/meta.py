"""Meta events: connection lifecycle and heartbeats."""

from pydantic import Field, StrictBool, StrictInt, StrictStr

from onebot_events.events.base import Event, WireModel


class MetaEvent(Event):
    meta_event_type: StrictStr = ""  # lifecycle, heartbeat


class LifecycleMetaEvent(MetaEvent):
    sub_type: StrictStr = ""  # enable, disable, connect


class HeartbeatStatus(WireModel):
    online: StrictBool = False
    good: StrictBool = False


class HeartbeatMetaEvent(MetaEvent):
    status: HeartbeatStatus = Field(default_factory=HeartbeatStatus)
    interval: StrictInt = 0  # milliseconds
