"""
Common graph operations (cip02): projects and tasks, plus a small
entity/relation/observation knowledge graph.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from ..constants import (
    KIND_COMMON_GRAPH_ENTITY,
    KIND_COMMON_GRAPH_OBSERVATION,
    KIND_COMMON_GRAPH_PROJECT,
    KIND_COMMON_GRAPH_RELATION,
    KIND_COMMON_GRAPH_TASK,
    OP_ENTITY,
    OP_OBSERVATION,
    OP_PROJECT,
    OP_RELATION,
    OP_TASK,
)
from ..dispatch import OperationModule
from ..operation import LIST, OperationRecord, tag_field


@dataclass
class ProjectEvent(OperationRecord):
    OPERATION = OP_PROJECT

    project_id: str = tag_field("project_id", required=True)
    name: str = tag_field("name")
    desc: str = tag_field("desc")
    status: str = tag_field("status")
    members: List[str] = tag_field("members", shape=LIST)

    def set_project_info(self, project_id: str, name: str, desc: str,
                         members: List[str], status: str) -> None:
        self.set_fields(project_id=project_id, name=name, desc=desc, status=status, members=members)


@dataclass
class TaskEvent(OperationRecord):
    OPERATION = OP_TASK

    project_id: str = tag_field("project_id", required=True)
    task_id: str = tag_field("task_id", required=True)
    title: str = tag_field("title")
    assignee: str = tag_field("assignee")
    status: str = tag_field("status")
    deadline: str = tag_field("deadline")

    def set_task_info(self, project_id: str, task_id: str, title: str,
                      assignee: str, status: str, deadline: str) -> None:
        self.set_fields(
            project_id=project_id,
            task_id=task_id,
            title=title,
            assignee=assignee,
            status=status,
            deadline=deadline,
        )


@dataclass
class EntityEvent(OperationRecord):
    OPERATION = OP_ENTITY

    entity_name: str = tag_field("entity_name", required=True)
    entity_type: str = tag_field("entity_type")

    def set_entity_info(self, entity_name: str, entity_type: str) -> None:
        self.set_fields(entity_name=entity_name, entity_type=entity_type)


@dataclass
class RelationEvent(OperationRecord):
    OPERATION = OP_RELATION

    from_entity: str = tag_field("from", required=True)
    to_entity: str = tag_field("to", required=True)
    relation_type: str = tag_field("relation_type")
    context: str = tag_field("context", omit_empty=True)

    def set_relation_info(self, from_entity: str, to_entity: str,
                          relation_type: str, context: str = "") -> None:
        self.set_fields(
            from_entity=from_entity,
            to_entity=to_entity,
            relation_type=relation_type,
            context=context,
        )


@dataclass
class ObservationEvent(OperationRecord):
    OPERATION = OP_OBSERVATION

    entity_name: str = tag_field("entity_name", required=True)
    observation: str = tag_field("observation")

    def set_observation_info(self, entity_name: str, observation: str) -> None:
        self.set_fields(entity_name=entity_name, observation=observation)


MODULE = OperationModule(
    name="common_graph",
    package="cip02",
    description="Projects, tasks and a shared entity/relation graph",
    kinds={
        KIND_COMMON_GRAPH_PROJECT: OP_PROJECT,
        KIND_COMMON_GRAPH_TASK: OP_TASK,
        KIND_COMMON_GRAPH_ENTITY: OP_ENTITY,
        KIND_COMMON_GRAPH_RELATION: OP_RELATION,
        KIND_COMMON_GRAPH_OBSERVATION: OP_OBSERVATION,
    },
    records=(ProjectEvent, TaskEvent, EntityEvent, RelationEvent, ObservationEvent),
)


def parse_common_graph_event(envelope, registry=None) -> OperationRecord:
    return MODULE.parse(envelope, registry)
