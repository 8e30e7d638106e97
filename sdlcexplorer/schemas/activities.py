"""
Practice activity schemas for SDLC Explorer.

Each track can carry three kinds of hands-on activity next to its lessons:
- Phase arrangement questions (put items in order, or match items to targets)
- Staged case studies (one multiple choice decision per SDLC stage)
- Decision simulations (choices move project metrics phase by phase)
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ActivityModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# -----------------------------------------------------------------------------
# Phase arrangement
# -----------------------------------------------------------------------------

class ArrangeItem(ActivityModel):
    id: str
    text: str
    correct_order: Optional[int] = None


class MatchTarget(ActivityModel):
    id: str
    text: str
    correct_match: str


class ArrangeQuestion(ActivityModel):
    """
    Order questions rank every item; match questions pair items to targets.

    Items are presented in file order, so content authors should shuffle them.
    """
    id: int
    kind: Literal["order", "match"] = "order"
    question: str
    items: list[ArrangeItem] = Field(default_factory=list)
    targets: list[MatchTarget] = Field(default_factory=list)

    @property
    def correct_sequence(self) -> list[str]:
        ranked = [item for item in self.items if item.correct_order is not None]
        return [item.id for item in sorted(ranked, key=lambda item: item.correct_order)]

    def find_item(self, item_id: str) -> Optional[ArrangeItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def find_target(self, target_id: str) -> Optional[MatchTarget]:
        for target in self.targets:
            if target.id == target_id:
                return target
        return None


# -----------------------------------------------------------------------------
# Case studies
# -----------------------------------------------------------------------------

class CaseOption(ActivityModel):
    id: str
    text: str
    correct: bool = False


class CaseStage(ActivityModel):
    id: str
    title: str
    context: str = ""
    situation: str = ""
    question: str
    options: list[CaseOption] = Field(default_factory=list)
    explanation: str = ""
    best_practices: list[str] = []

    @property
    def correct_option_id(self) -> Optional[str]:
        for option in self.options:
            if option.correct:
                return option.id
        return None

    def find_option(self, option_id: str) -> Optional[CaseOption]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None


class CaseStudy(ActivityModel):
    id: str
    title: str
    description: str = ""
    scenario: str = ""
    stages: list[CaseStage] = []


# -----------------------------------------------------------------------------
# Decision simulations
# -----------------------------------------------------------------------------

FAILURE_MARKER = "FAILURE"


class Decision(ActivityModel):
    """A choice within a simulation phase and its effect on each metric."""
    id: str
    title: str
    description: str = ""
    effects: dict[str, float] = {}
    outcome: str = ""

    @property
    def is_failure(self) -> bool:
        return FAILURE_MARKER in self.outcome


class SimulationPhase(ActivityModel):
    id: str
    title: str
    scenario: str = ""
    status: str = ""
    decisions: list[Decision] = []

    def find_decision(self, decision_id: str) -> Optional[Decision]:
        for decision in self.decisions:
            if decision.id == decision_id:
                return decision
        return None


class Simulation(ActivityModel):
    id: str
    title: str
    description: str = ""
    icon: str = ""
    color: str = "#1ABC9C"
    initial_context: dict[str, float] = {}
    phases: list[SimulationPhase] = []


# -----------------------------------------------------------------------------
# Per-track bundle
# -----------------------------------------------------------------------------

class TrackActivities(ActivityModel):
    track: str
    ordering: list[ArrangeQuestion] = []
    case_studies: list[CaseStudy] = []
    simulations: list[Simulation] = []

    @classmethod
    def empty(cls, track: str) -> "TrackActivities":
        return cls(track=track)

    @property
    def is_empty(self) -> bool:
        return not (self.ordering or self.case_studies or self.simulations)

    def find_case_study(self, study_id: str) -> Optional[CaseStudy]:
        for study in self.case_studies:
            if study.id == study_id:
                return study
        return None

    def find_simulation(self, simulation_id: str) -> Optional[Simulation]:
        for simulation in self.simulations:
            if simulation.id == simulation_id:
                return simulation
        return None
