"""
Community operations (cip07): communities, invitations and channels.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..constants import (
    KIND_COMMUNITY_CHANNEL_CREATE,
    KIND_COMMUNITY_CHANNEL_MESSAGE,
    KIND_COMMUNITY_CREATE,
    KIND_COMMUNITY_INVITE,
    OP_CHANNEL_CREATE,
    OP_CHANNEL_MESSAGE,
    OP_COMMUNITY_CREATE,
    OP_COMMUNITY_INVITE,
)
from ..dispatch import OperationModule
from ..operation import OperationRecord, tag_field


@dataclass
class CommunityCreateEvent(OperationRecord):
    OPERATION = OP_COMMUNITY_CREATE

    community_id: str = tag_field("community_id", required=True)
    name: str = tag_field("name", required=True)
    community_type: str = tag_field("type")

    def set_community_create_info(self, community_id: str, name: str, community_type: str) -> None:
        self.set_fields(community_id=community_id, name=name, community_type=community_type)


@dataclass
class CommunityInviteEvent(OperationRecord):
    OPERATION = OP_COMMUNITY_INVITE

    community_id: str = tag_field("community_id", required=True)
    inviter_id: str = tag_field("inviter_id", required=True)
    invitee_id: str = tag_field("invitee_id", required=True)
    method: str = tag_field("method")

    def set_community_invite_info(self, community_id: str, inviter_id: str,
                                  invitee_id: str, method: str) -> None:
        self.set_fields(
            community_id=community_id,
            inviter_id=inviter_id,
            invitee_id=invitee_id,
            method=method,
        )


@dataclass
class ChannelCreateEvent(OperationRecord):
    OPERATION = OP_CHANNEL_CREATE

    community_id: str = tag_field("community_id", required=True)
    channel_id: str = tag_field("channel_id", required=True)
    name: str = tag_field("name")
    channel_type: str = tag_field("type")

    def set_channel_create_info(self, community_id: str, channel_id: str,
                                name: str, channel_type: str) -> None:
        self.set_fields(
            community_id=community_id,
            channel_id=channel_id,
            name=name,
            channel_type=channel_type,
        )


@dataclass
class ChannelMessageEvent(OperationRecord):
    OPERATION = OP_CHANNEL_MESSAGE

    channel_id: str = tag_field("channel_id", required=True)
    user_id: str = tag_field("user_id", required=True)
    reply_to: str = tag_field("reply_to", omit_empty=True)

    def set_channel_message_info(self, channel_id: str, user_id: str, reply_to: str = "") -> None:
        self.set_fields(channel_id=channel_id, user_id=user_id, reply_to=reply_to)


MODULE = OperationModule(
    name="community",
    package="cip07",
    kinds={
        KIND_COMMUNITY_CREATE: OP_COMMUNITY_CREATE,
        KIND_COMMUNITY_INVITE: OP_COMMUNITY_INVITE,
        KIND_COMMUNITY_CHANNEL_CREATE: OP_CHANNEL_CREATE,
        KIND_COMMUNITY_CHANNEL_MESSAGE: OP_CHANNEL_MESSAGE,
    },
    records=(CommunityCreateEvent, CommunityInviteEvent, ChannelCreateEvent, ChannelMessageEvent),
)


def parse_community_event(envelope, registry=None) -> OperationRecord:
    return MODULE.parse(envelope, registry)
