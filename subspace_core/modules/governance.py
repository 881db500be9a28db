"""
Governance operations (cip01): post, propose, vote, invite, mint.

These are the default operations a subspace declares at creation time
(see constants.DEFAULT_SUBSPACE_OPS).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from ..constants import (
    KIND_GOVERNANCE_INVITE,
    KIND_GOVERNANCE_MINT,
    KIND_GOVERNANCE_POST,
    KIND_GOVERNANCE_PROPOSE,
    KIND_GOVERNANCE_VOTE,
    OP_INVITE,
    OP_MINT,
    OP_POST,
    OP_PROPOSE,
    OP_VOTE,
)
from ..dispatch import OperationModule
from ..operation import OperationRecord, tag_field


@dataclass
class PostEvent(OperationRecord):
    OPERATION = OP_POST

    content_type: str = tag_field("content_type")

    def set_content_type(self, content_type: str) -> None:
        self.set_fields(content_type=content_type)


@dataclass
class ProposeEvent(OperationRecord):
    OPERATION = OP_PROPOSE

    proposal_id: str = tag_field("proposal_id", required=True)
    rules: str = tag_field("rules", omit_empty=True)

    def set_proposal(self, proposal_id: str, rules: str = "") -> None:
        self.set_fields(proposal_id=proposal_id, rules=rules)


@dataclass
class VoteEvent(OperationRecord):
    OPERATION = OP_VOTE

    proposal_id: str = tag_field("proposal_id", required=True)
    vote: str = tag_field("vote", required=True)

    def set_vote(self, proposal_id: str, vote: str) -> None:
        self.set_fields(proposal_id=proposal_id, vote=vote)


@dataclass
class InviteEvent(OperationRecord):
    OPERATION = OP_INVITE

    inviter_addr: str = tag_field("inviter_addr", required=True)
    rules: str = tag_field("rules", omit_empty=True)

    def set_inviter(self, inviter_addr: str, rules: str = "") -> None:
        self.set_fields(inviter_addr=inviter_addr, rules=rules)


@dataclass
class MintEvent(OperationRecord):
    OPERATION = OP_MINT

    token_name: str = tag_field("token_name", required=True)
    token_symbol: str = tag_field("token_symbol", required=True)
    token_decimals: str = tag_field("token_decimals")
    initial_supply: str = tag_field("initial_supply")
    drop_ratio: str = tag_field("drop_ratio")

    def set_token_info(self, name: str, symbol: str, decimals: str,
                       initial_supply: str, drop_ratio: str) -> None:
        self.set_fields(
            token_name=name,
            token_symbol=symbol,
            token_decimals=decimals,
            initial_supply=initial_supply,
            drop_ratio=drop_ratio,
        )

    def parse_reward_rules(self) -> Dict[int, int]:
        """
        Parse drop_ratio ("<kind>:<points>,...") into {kind: points}.
        Malformed segments are skipped.
        """
        rules: Dict[int, int] = {}
        for segment in self.drop_ratio.split(","):
            parts = segment.split(":")
            if len(parts) != 2:
                continue
            try:
                rules[int(parts[0])] = int(parts[1])
            except ValueError:
                continue
        return rules


MODULE = OperationModule(
    name="governance",
    package="cip01",
    description="Subspace governance: posts, proposals, votes, invites, token mint",
    kinds={
        KIND_GOVERNANCE_POST: OP_POST,
        KIND_GOVERNANCE_PROPOSE: OP_PROPOSE,
        KIND_GOVERNANCE_VOTE: OP_VOTE,
        KIND_GOVERNANCE_INVITE: OP_INVITE,
        KIND_GOVERNANCE_MINT: OP_MINT,
    },
    records=(PostEvent, ProposeEvent, VoteEvent, InviteEvent, MintEvent),
)


def parse_governance_event(envelope, registry=None) -> OperationRecord:
    return MODULE.parse(envelope, registry)
