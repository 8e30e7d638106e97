"""
SimulationEngine - Project decision simulation across SDLC phases.

The learner picks one decision per phase. Each decision shifts the project
metrics in the simulation context (budget, timeline, satisfaction and so
on). After the last phase the final outcome is scored from the initial
context and every decision taken.

A context that carries an "ai_efficiency" metric is scored as an
AI-augmented project: that metric counts towards success and high AI
efficiency gives a small bonus to other metrics.
"""

import logging
from typing import Optional, Sequence

from sdlcexplorer.schemas import (
    Decision,
    DecisionRecord,
    Simulation,
    SimulationOutcome,
    SimulationPhase,
)

logger = logging.getLogger(__name__)

BUDGET = "budget"
TIMELINE = "timeline"
AI_EFFICIENCY = "ai_efficiency"
SUCCESS_METRICS = ("user_satisfaction", "security", "performance", "reputation")

AI_BONUS_THRESHOLD = 70
AI_BONUS = {"performance": 5, "user_satisfaction": 3, TIMELINE: 0.5}

# (minimum success score, title, description), highest band first
OUTCOME_BANDS = [
    (85, "🎉 Outstanding Success!",
     "Your project exceeded expectations and delivered exceptional results. "
     "Stakeholders are thrilled with the outcome."),
    (70, "✅ Project Success",
     "Your project was successful with good results across most metrics. "
     "Some areas could be improved for future projects."),
    (50, "⚠️ Mixed Results",
     "Your project had mixed outcomes. While some aspects were successful, "
     "significant challenges impacted overall results."),
    (0, "❌ Project Challenges",
     "Your project faced major difficulties and did not meet success criteria. "
     "Important lessons learned for future projects."),
]

AI_OUTCOME_BANDS = [
    (85, "🤖🎉 AI-Powered Excellence!",
     "Your AI-augmented project achieved outstanding success! AI integration "
     "amplified team capabilities and delivered exceptional results."),
    (70, "🤖✅ AI-Enhanced Success",
     "Your AI-augmented project was successful with strong results. AI tools "
     "effectively enhanced traditional development processes."),
    (50, "🤖⚠️ Mixed AI Integration",
     "Your project had mixed AI integration results. While some AI tools helped, "
     "others faced adoption challenges that impacted outcomes."),
    (0, "🤖❌ AI Integration Challenges",
     "Your AI-augmented project faced significant challenges. AI integration "
     "difficulties and adoption issues impacted overall success."),
]


# -----------------------------------------------------------------------------
# Scoring
# -----------------------------------------------------------------------------

def apply_effects(context: dict[str, float], effects: dict[str, float]) -> dict[str, float]:
    """Add each effect to the matching metric. Unknown metrics are ignored."""
    updated = dict(context)
    for key, delta in effects.items():
        if key in updated:
            updated[key] += delta
    return updated


def normalize_context(context: dict[str, float]) -> dict[str, float]:
    """Clamp metrics: budget >= 0, timeline >= 1, everything else 0..100."""
    normalized = {}
    for key, value in context.items():
        if key == BUDGET:
            normalized[key] = max(0, value)
        elif key == TIMELINE:
            normalized[key] = max(1, value)
        else:
            normalized[key] = max(0, min(100, value))
    return normalized


def _variance(final: dict[str, float], initial: dict[str, float], key: str) -> float:
    if not initial.get(key):
        return 0.0
    return (final[key] - initial[key]) / initial[key] * 100


def _band(score: float, bands) -> tuple[str, str]:
    for minimum, title, description in bands:
        if score >= minimum:
            return title, description
    return bands[-1][1], bands[-1][2]


def _lessons(initial, final, decisions, success) -> list[str]:
    lessons = []
    failures = sum(1 for decision in decisions if decision.is_failure)
    if failures:
        lessons.append(f"Ran into {failures} critical failure point(s) that set the project back.")

    if success >= 80:
        lessons.append("Excellent project management led to outstanding results across all metrics.")
        lessons.append("Strong stakeholder communication and technical execution created a successful outcome.")
    elif success >= 60:
        lessons.append("Good project management with room for improvement in some areas.")
        lessons.append("Balanced approach achieved solid results while managing trade-offs effectively.")
    else:
        lessons.append("Project faced significant challenges that impacted overall success.")
        lessons.append("Future projects should focus on better risk management and stakeholder alignment.")

    if BUDGET in initial:
        if final[BUDGET] < initial[BUDGET] * 0.5:
            lessons.append("Significant budget overruns indicate need for better cost estimation and control.")
        elif final[BUDGET] >= initial[BUDGET] * 0.8:
            lessons.append("Excellent budget management kept project costs well under control.")

    if final.get("security", 0) >= 80:
        lessons.append("Strong security practices protected the project from vulnerabilities.")
    return lessons


def _ai_lessons(initial, final, decisions, success) -> list[str]:
    lessons = []
    ai = final[AI_EFFICIENCY]
    if ai >= 80:
        lessons.append("Excellent AI integration dramatically improved project efficiency and outcomes.")
        lessons.append("Team successfully leveraged AI tools while maintaining human oversight and decision-making.")
    elif ai >= 60:
        lessons.append("Good AI adoption with room for improvement in AI tool utilization.")
        lessons.append("Balanced approach between AI assistance and traditional methods showed promise.")
    else:
        lessons.append("AI integration challenges limited the potential benefits of AI-augmented development.")
        lessons.append("Future projects should focus on better AI tool selection and team training.")

    failures = sum(1 for decision in decisions if decision.is_failure)
    if failures:
        lessons.append(f"Ran into {failures} critical AI-related failure point(s) that compromised the project.")

    ai_decisions = sum(1 for decision in decisions if "ai" in decision.id or "ai" in decision.title.lower())
    if ai_decisions >= 3:
        lessons.append("Comprehensive AI integration across multiple project phases enhanced overall effectiveness.")

    if success >= 80:
        lessons.append("Outstanding AI-augmented project management achieved superior results.")
        lessons.append("AI tools successfully amplified team capabilities while preserving project quality.")
    elif success >= 60:
        lessons.append("Solid AI-enhanced project execution with opportunities for deeper AI integration.")
    else:
        lessons.append("AI integration faced challenges that impacted project success. Review the AI adoption strategy.")

    if BUDGET in initial and final[BUDGET] >= initial[BUDGET] * 0.8 and ai >= 70:
        lessons.append("AI efficiency gains contributed to excellent budget performance.")
    if final.get("performance", 0) >= 80 and ai >= 75:
        lessons.append("AI-powered optimizations significantly enhanced system performance.")
    return lessons


def calculate_outcome(initial_context: dict[str, float], decisions: Sequence[Decision]) -> SimulationOutcome:
    """
    Score a finished simulation.

    Effects are summed from the initial context, the AI bonus is applied,
    and only then are metrics clamped.
    """
    raw = dict(initial_context)
    for decision in decisions:
        raw = apply_effects(raw, decision.effects)

    ai_project = AI_EFFICIENCY in raw
    if ai_project and raw[AI_EFFICIENCY] > AI_BONUS_THRESHOLD:
        raw = apply_effects(raw, AI_BONUS)

    final = normalize_context(raw)
    metrics = SUCCESS_METRICS + ((AI_EFFICIENCY,) if ai_project else ())
    success = sum(final.get(metric, 0) for metric in metrics) / len(metrics)

    if ai_project:
        lessons = _ai_lessons(initial_context, final, decisions, success)
        title, description = _band(success, AI_OUTCOME_BANDS)
    else:
        lessons = _lessons(initial_context, final, decisions, success)
        title, description = _band(success, OUTCOME_BANDS)

    return SimulationOutcome(
        context=final,
        success=success,
        title=title,
        description=description,
        lessons=lessons,
        budget_variance=_variance(final, initial_context, BUDGET),
        timeline_variance=_variance(final, initial_context, TIMELINE),
    )


# -----------------------------------------------------------------------------
# Engine
# -----------------------------------------------------------------------------

class SimulationEngine:
    """
    Plays one simulation phase by phase.

    Phases run in file order. The live context shown during play is clamped
    after every decision; the final outcome is recomputed from scratch.
    """

    def __init__(self, simulation: Optional[Simulation] = None):
        self.simulation: Optional[Simulation] = None
        self.phase_index = 0
        self.outcome: Optional[SimulationOutcome] = None
        self._raw: dict[str, float] = {}
        self._decisions: list[Decision] = []
        self._history: list[DecisionRecord] = []
        self.load(simulation)

    def load(self, simulation: Optional[Simulation]):
        self.simulation = simulation
        self.restart()

    def restart(self):
        """Discard every decision and return to the first phase."""
        self.phase_index = 0
        self.outcome = None
        self._raw = dict(self.simulation.initial_context) if self.simulation else {}
        self._decisions = []
        self._history = []

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    @property
    def phases(self) -> list[SimulationPhase]:
        return list(self.simulation.phases) if self.simulation else []

    @property
    def current_phase(self) -> Optional[SimulationPhase]:
        if self.phase_index < len(self.phases):
            return self.phases[self.phase_index]
        return None

    @property
    def is_complete(self) -> bool:
        return self.outcome is not None

    @property
    def context(self) -> dict[str, float]:
        return normalize_context(self._raw)

    @property
    def history(self) -> list[DecisionRecord]:
        return list(self._history)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def choose(self, decision_id: str) -> bool:
        """Take a decision in the current phase and move on."""
        phase = self.current_phase
        if phase is None or self.is_complete:
            return False
        decision = phase.find_decision(decision_id)
        if decision is None:
            logger.debug(f"Rejected decision {decision_id!r} in phase {phase.id}")
            return False

        self._raw = apply_effects(self._raw, decision.effects)
        self._decisions.append(decision)
        self._history.append(DecisionRecord(
            phase_id=phase.id,
            phase_title=phase.title,
            decision_id=decision.id,
            decision_title=decision.title,
            outcome=decision.outcome,
            is_failure=decision.is_failure,
        ))
        self.phase_index += 1

        if self.phase_index >= len(self.phases):
            self.outcome = calculate_outcome(self.simulation.initial_context, self._decisions)
            logger.info(f"Simulation {self.simulation.id} finished: {self.outcome.title} ({self.outcome.success:.0f})")
        return True
