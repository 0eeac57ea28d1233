"""Request events: friend and group-join requests awaiting the bot."""

from pydantic import StrictInt, StrictStr

from onebot_events.events.base import Event


class RequestEvent(Event):
    request_type: StrictStr = ""  # friend, group
    user_id: StrictInt = 0  # requester
    comment: StrictStr = ""  # verification message
    flag: StrictStr = ""  # pass back to the API to approve or reject


class FriendRequestEvent(RequestEvent):
    pass


class GroupRequestEvent(RequestEvent):
    sub_type: StrictStr = ""  # add, invite (bot invited into the group)
    group_id: StrictInt = 0
