"""
Social operations (cip06).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from ..constants import (
    KIND_SOCIAL_COLLECT,
    KIND_SOCIAL_COMMENT,
    KIND_SOCIAL_FOLLOW,
    KIND_SOCIAL_LIKE,
    KIND_SOCIAL_MESSAGE,
    KIND_SOCIAL_QUESTION,
    KIND_SOCIAL_ROOM,
    KIND_SOCIAL_SHARE,
    KIND_SOCIAL_TAG,
    KIND_SOCIAL_UNFOLLOW,
    OP_COLLECT,
    OP_COMMENT,
    OP_FOLLOW,
    OP_LIKE,
    OP_MESSAGE,
    OP_QUESTION,
    OP_ROOM,
    OP_SHARE,
    OP_TAG,
    OP_UNFOLLOW,
)
from ..dispatch import OperationModule
from ..operation import LIST, OperationRecord, tag_field


@dataclass
class LikeEvent(OperationRecord):
    OPERATION = OP_LIKE

    object_id: str = tag_field("object_id", required=True)
    user_id: str = tag_field("user_id", required=True)

    def set_like_info(self, object_id: str, user_id: str) -> None:
        self.set_fields(object_id=object_id, user_id=user_id)


@dataclass
class CollectEvent(OperationRecord):
    OPERATION = OP_COLLECT

    object_id: str = tag_field("object_id", required=True)
    user_id: str = tag_field("user_id", required=True)

    def set_collect_info(self, object_id: str, user_id: str) -> None:
        self.set_fields(object_id=object_id, user_id=user_id)


@dataclass
class ShareEvent(OperationRecord):
    OPERATION = OP_SHARE

    object_id: str = tag_field("object_id", required=True)
    user_id: str = tag_field("user_id", required=True)
    platform: str = tag_field("platform")
    clicks: str = tag_field("clicks")

    def set_share_info(self, object_id: str, user_id: str, platform: str, clicks: str) -> None:
        self.set_fields(object_id=object_id, user_id=user_id, platform=platform, clicks=clicks)


@dataclass
class CommentEvent(OperationRecord):
    OPERATION = OP_COMMENT

    object_id: str = tag_field("object_id", required=True)
    user_id: str = tag_field("user_id", required=True)
    parent: str = tag_field("parent", omit_empty=True)  # parent comment id

    def set_comment_info(self, object_id: str, user_id: str, parent: str = "") -> None:
        self.set_fields(object_id=object_id, user_id=user_id, parent=parent)


@dataclass
class TagEvent(OperationRecord):
    OPERATION = OP_TAG

    object_id: str = tag_field("object_id", required=True)
    tag: str = tag_field("tag", required=True)

    def set_tag_info(self, object_id: str, tag: str) -> None:
        self.set_fields(object_id=object_id, tag=tag)


@dataclass
class FollowEvent(OperationRecord):
    OPERATION = OP_FOLLOW

    user_id: str = tag_field("user_id", required=True)
    target_id: str = tag_field("target_id", required=True)

    def set_follow_info(self, user_id: str, target_id: str) -> None:
        self.set_fields(user_id=user_id, target_id=target_id)


@dataclass
class UnfollowEvent(OperationRecord):
    OPERATION = OP_UNFOLLOW

    user_id: str = tag_field("user_id", required=True)
    target_id: str = tag_field("target_id", required=True)

    def set_unfollow_info(self, user_id: str, target_id: str) -> None:
        self.set_fields(user_id=user_id, target_id=target_id)


@dataclass
class QuestionEvent(OperationRecord):
    OPERATION = OP_QUESTION

    object_id: str = tag_field("object_id", required=True)
    user_id: str = tag_field("user_id", required=True)
    quality: str = tag_field("quality")

    def set_question_info(self, object_id: str, user_id: str, quality: str) -> None:
        self.set_fields(object_id=object_id, user_id=user_id, quality=quality)


@dataclass
class RoomEvent(OperationRecord):
    OPERATION = OP_ROOM

    name: str = tag_field("name", required=True)
    description: str = tag_field("description")
    members: List[str] = tag_field("members", shape=LIST)

    def set_room_info(self, name: str, description: str, members: List[str] = ()) -> None:
        self.set_fields(name=name, description=description, members=members)


@dataclass
class MessageEvent(OperationRecord):
    OPERATION = OP_MESSAGE

    room_id: str = tag_field("room_id", required=True)
    reply_to: str = tag_field("reply_to", omit_empty=True)
    mentions: List[str] = tag_field("mentions", shape=LIST)

    def set_message_info(self, room_id: str, reply_to: str = "", mentions: List[str] = ()) -> None:
        self.set_fields(room_id=room_id, reply_to=reply_to, mentions=mentions)


MODULE = OperationModule(
    name="social",
    package="cip06",
    description="Social interactions: reactions, follows, rooms and messages",
    kinds={
        KIND_SOCIAL_LIKE: OP_LIKE,
        KIND_SOCIAL_COLLECT: OP_COLLECT,
        KIND_SOCIAL_SHARE: OP_SHARE,
        KIND_SOCIAL_COMMENT: OP_COMMENT,
        KIND_SOCIAL_TAG: OP_TAG,
        KIND_SOCIAL_FOLLOW: OP_FOLLOW,
        KIND_SOCIAL_UNFOLLOW: OP_UNFOLLOW,
        KIND_SOCIAL_QUESTION: OP_QUESTION,
        KIND_SOCIAL_ROOM: OP_ROOM,
        KIND_SOCIAL_MESSAGE: OP_MESSAGE,
    },
    records=(
        LikeEvent,
        CollectEvent,
        ShareEvent,
        CommentEvent,
        TagEvent,
        FollowEvent,
        UnfollowEvent,
        QuestionEvent,
        RoomEvent,
        MessageEvent,
    ),
)


def parse_social_event(envelope, registry=None) -> OperationRecord:
    return MODULE.parse(envelope, registry)
