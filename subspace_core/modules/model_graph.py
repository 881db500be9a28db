"""
Model graph operations (cip03): model lineage, datasets, compute,
fine-tuning and conversation/session records.

ModelEvent stores its lineage hash in a "parent" tag, so the same value
also shows up in the header's parents list.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from ..constants import (
    KIND_MODEL_GRAPH_ALGO,
    KIND_MODEL_GRAPH_COMPUTE,
    KIND_MODEL_GRAPH_CONVERSATION,
    KIND_MODEL_GRAPH_DATASET,
    KIND_MODEL_GRAPH_FINETUNE,
    KIND_MODEL_GRAPH_MODEL,
    KIND_MODEL_GRAPH_SESSION,
    KIND_MODEL_GRAPH_VALID,
    OP_ALGO,
    OP_COMPUTE,
    OP_CONVERSATION,
    OP_DATASET,
    OP_FINETUNE,
    OP_MODEL,
    OP_SESSION,
    OP_VALID,
)
from ..dispatch import OperationModule
from ..operation import LIST, OperationRecord, tag_field


@dataclass
class ModelEvent(OperationRecord):
    OPERATION = OP_MODEL

    parent_hash: str = tag_field("parent")
    contributions: str = tag_field("contrib")

    def set_contributions(self, contributions: str) -> None:
        self.set_fields(contributions=contributions)

    def set_parent(self, parent_hash: str) -> None:
        self.set_fields(parent_hash=parent_hash)


@dataclass
class ComputeEvent(OperationRecord):
    OPERATION = OP_COMPUTE

    compute_type: str = tag_field("compute_type")

    def set_compute_type(self, compute_type: str) -> None:
        self.set_fields(compute_type=compute_type)


@dataclass
class AlgoEvent(OperationRecord):
    OPERATION = OP_ALGO

    algo_type: str = tag_field("algo_type")

    def set_algo_type(self, algo_type: str) -> None:
        self.set_fields(algo_type=algo_type)


@dataclass
class ValidEvent(OperationRecord):
    OPERATION = OP_VALID

    valid_result: str = tag_field("valid_result")

    def set_valid_result(self, valid_result: str) -> None:
        self.set_fields(valid_result=valid_result)


@dataclass
class DatasetEvent(OperationRecord):
    OPERATION = OP_DATASET

    project_id: str = tag_field("project_id")
    task_id: str = tag_field("task_id")
    category: str = tag_field("category")
    format: str = tag_field("format")
    contributors: List[str] = tag_field("contributors", shape=LIST)

    def set_dataset_info(self, project_id: str, task_id: str, category: str,
                         format: str, contributors: List[str]) -> None:
        self.set_fields(
            project_id=project_id,
            task_id=task_id,
            category=category,
            format=format,
            contributors=contributors,
        )


@dataclass
class FinetuneEvent(OperationRecord):
    OPERATION = OP_FINETUNE

    project_id: str = tag_field("project_id")
    task_id: str = tag_field("task_id")
    dataset_id: str = tag_field("dataset_id", required=True)
    provider_id: str = tag_field("provider_id")
    model_name: str = tag_field("model_name", required=True)

    def set_finetune_info(self, project_id: str, task_id: str, dataset_id: str,
                          provider_id: str, model_name: str) -> None:
        self.set_fields(
            project_id=project_id,
            task_id=task_id,
            dataset_id=dataset_id,
            provider_id=provider_id,
            model_name=model_name,
        )


@dataclass
class ConversationEvent(OperationRecord):
    OPERATION = OP_CONVERSATION

    session_id: str = tag_field("session_id", required=True)
    user_id: str = tag_field("user_id")
    model_id: str = tag_field("model_id")
    timestamp: str = tag_field("timestamp")
    interaction_hash: str = tag_field("interaction_hash")

    def set_conversation_info(self, session_id: str, user_id: str, model_id: str,
                              timestamp: str, interaction_hash: str) -> None:
        self.set_fields(
            session_id=session_id,
            user_id=user_id,
            model_id=model_id,
            timestamp=timestamp,
            interaction_hash=interaction_hash,
        )


@dataclass
class SessionEvent(OperationRecord):
    OPERATION = OP_SESSION

    session_id: str = tag_field("session_id", required=True)
    action: str = tag_field("action", required=True)  # e.g. "start" / "end"
    user_id: str = tag_field("user_id")
    start_time: str = tag_field("start_time")
    end_time: str = tag_field("end_time", omit_empty=True)

    def set_session_info(self, session_id: str, action: str, user_id: str,
                         start_time: str, end_time: str = "") -> None:
        self.set_fields(
            session_id=session_id,
            action=action,
            user_id=user_id,
            start_time=start_time,
            end_time=end_time,
        )


MODULE = OperationModule(
    name="model_graph",
    package="cip03",
    description="Model lineage, datasets, compute and fine-tuning records",
    kinds={
        KIND_MODEL_GRAPH_MODEL: OP_MODEL,
        KIND_MODEL_GRAPH_DATASET: OP_DATASET,
        KIND_MODEL_GRAPH_COMPUTE: OP_COMPUTE,
        KIND_MODEL_GRAPH_ALGO: OP_ALGO,
        KIND_MODEL_GRAPH_VALID: OP_VALID,
        KIND_MODEL_GRAPH_FINETUNE: OP_FINETUNE,
        KIND_MODEL_GRAPH_CONVERSATION: OP_CONVERSATION,
        KIND_MODEL_GRAPH_SESSION: OP_SESSION,
    },
    records=(
        ModelEvent,
        DatasetEvent,
        ComputeEvent,
        AlgoEvent,
        ValidEvent,
        FinetuneEvent,
        ConversationEvent,
        SessionEvent,
    ),
)


def parse_model_graph_event(envelope, registry=None) -> OperationRecord:
    return MODULE.parse(envelope, registry)
