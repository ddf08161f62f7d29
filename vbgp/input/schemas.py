"""Pydantic schemas for goal-state snapshots supplied from outside.

A snapshot is a JSON list of records, one per goal of a single agent:

    [
        {"name": "Profit", "type": "maximize", "value": 80,
         "prior_value": 100, "importance": 0.5, "confidence": false},
        ...
    ]
"""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from vbgp.model.goals import Goal, GoalState, GoalType


class GoalStateRecord(BaseModel):
    """One goal and its measurements for the current decision cycle."""
    name: str = Field(min_length=1)
    type: GoalType
    value: float = 0.0
    focal_value: float = 0.0
    prior_value: float = 0.0
    importance: float = 0.0
    confidence: bool = True

    def to_goal(self) -> Goal:
        return Goal(name=self.name, type=self.type)

    def to_state(self) -> GoalState:
        return GoalState(
            value=self.value,
            focal_value=self.focal_value,
            prior_value=self.prior_value,
            importance=self.importance,
            confidence=self.confidence,
        )


class GoalStateSnapshot(BaseModel):
    """All goal states of one agent."""
    goals: list[GoalStateRecord]

    @field_validator("goals")
    @classmethod
    def unique_goal_names(cls, goals: list[GoalStateRecord]) -> list[GoalStateRecord]:
        seen: set[str] = set()
        for record in goals:
            if record.name in seen:
                raise ValueError(f"Duplicate goal '{record.name}' in snapshot")
            seen.add(record.name)
        return goals

    def to_goal_states(self) -> dict[Goal, GoalState]:
        return {record.to_goal(): record.to_state() for record in self.goals}


_RECORDS_ADAPTER = TypeAdapter(list[GoalStateRecord])


def parse_snapshot(raw_json: Union[str, bytes]) -> GoalStateSnapshot:
    """Validate a JSON list of goal-state records.

    Raises:
        pydantic.ValidationError: If the JSON is malformed or a record is invalid
    """
    return GoalStateSnapshot(goals=_RECORDS_ADAPTER.validate_json(raw_json))
