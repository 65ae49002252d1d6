from enum import IntEnum


class ChannelType(IntEnum):
    text = 0
    dm = 1
    voice = 2
    group_dm = 3
    category = 4
    announcement = 5


DM_CHANNEL_TYPES = frozenset({ChannelType.dm, ChannelType.group_dm})
