"""
Open research operations (cip05): papers, annotations, reviews,
AI analyses and discussions.

read_paper and co_create_paper have reserved kinds but no record types yet;
dispatching them raises UnknownOperation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from ..constants import (
    KIND_OPEN_RESEARCH_AI_ANALYSIS,
    KIND_OPEN_RESEARCH_ANNOTATION,
    KIND_OPEN_RESEARCH_CO_CREATE,
    KIND_OPEN_RESEARCH_DISCUSSION,
    KIND_OPEN_RESEARCH_PAPER,
    KIND_OPEN_RESEARCH_READ_PAPER,
    KIND_OPEN_RESEARCH_REVIEW,
    OP_AI_ANALYSIS,
    OP_ANNOTATION,
    OP_CO_CREATE_PAPER,
    OP_DISCUSSION,
    OP_PAPER,
    OP_READ_PAPER,
    OP_REVIEW,
)
from ..dispatch import OperationModule
from ..operation import LIST, PAIRS, OperationRecord, tag_field


@dataclass
class PaperEvent(OperationRecord):
    OPERATION = OP_PAPER

    doi: str = tag_field("doi", required=True)
    paper_type: str = tag_field("paper_type")
    year: str = tag_field("year")
    journal: str = tag_field("journal")
    authors: List[str] = tag_field("authors", shape=LIST)
    keywords: List[str] = tag_field("keywords", shape=LIST)

    def set_paper_info(self, doi: str, paper_type: str, authors: List[str],
                       keywords: List[str], year: str, journal: str) -> None:
        self.set_fields(
            doi=doi,
            paper_type=paper_type,
            year=year,
            journal=journal,
            authors=authors,
            keywords=keywords,
        )


@dataclass
class AnnotationEvent(OperationRecord):
    OPERATION = OP_ANNOTATION

    paper_id: str = tag_field("paper_id", required=True)
    position: str = tag_field("position")
    annotation_type: str = tag_field("type")
    parent_id: str = tag_field("parent", omit_empty=True)

    def set_annotation_info(self, paper_id: str, position: str,
                            annotation_type: str, parent_id: str = "") -> None:
        self.set_fields(
            paper_id=paper_id,
            position=position,
            annotation_type=annotation_type,
            parent_id=parent_id,
        )


@dataclass
class ReviewEvent(OperationRecord):
    OPERATION = OP_REVIEW

    paper_id: str = tag_field("paper_id", required=True)
    rating: str = tag_field("rating")
    aspects: Dict[str, str] = tag_field("aspects", shape=PAIRS)  # e.g. {"novelty": "5"}

    def set_review_info(self, paper_id: str, rating: str, aspects: Dict[str, str]) -> None:
        self.set_fields(paper_id=paper_id, rating=rating, aspects=aspects)


@dataclass
class AIAnalysisEvent(OperationRecord):
    OPERATION = OP_AI_ANALYSIS

    analysis_type: str = tag_field("analysis_type", required=True)
    prompt: str = tag_field("prompt")
    paper_ids: List[str] = tag_field("paper_ids", shape=LIST)

    def set_ai_analysis_info(self, analysis_type: str, paper_ids: List[str], prompt: str) -> None:
        self.set_fields(analysis_type=analysis_type, prompt=prompt, paper_ids=paper_ids)


@dataclass
class DiscussionEvent(OperationRecord):
    OPERATION = OP_DISCUSSION

    topic: str = tag_field("topic", required=True)
    parent_id: str = tag_field("parent", omit_empty=True)
    references: List[str] = tag_field("references", shape=LIST)

    def set_discussion_info(self, topic: str, parent_id: str = "",
                            references: List[str] = ()) -> None:
        self.set_fields(topic=topic, parent_id=parent_id, references=references)


MODULE = OperationModule(
    name="open_research",
    package="cip05",
    description="Open research: papers, annotations, reviews and discussion",
    kinds={
        KIND_OPEN_RESEARCH_PAPER: OP_PAPER,
        KIND_OPEN_RESEARCH_ANNOTATION: OP_ANNOTATION,
        KIND_OPEN_RESEARCH_REVIEW: OP_REVIEW,
        KIND_OPEN_RESEARCH_AI_ANALYSIS: OP_AI_ANALYSIS,
        KIND_OPEN_RESEARCH_DISCUSSION: OP_DISCUSSION,
        KIND_OPEN_RESEARCH_READ_PAPER: OP_READ_PAPER,
        KIND_OPEN_RESEARCH_CO_CREATE: OP_CO_CREATE_PAPER,
    },
    records=(PaperEvent, AnnotationEvent, ReviewEvent, AIAnalysisEvent, DiscussionEvent),
)


def parse_open_research_event(envelope, registry=None) -> OperationRecord:
    return MODULE.parse(envelope, registry)
