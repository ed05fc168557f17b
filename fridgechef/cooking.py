"""
Cooking mode: the step-through state machine for one recipe.

States are "viewing step i" for i in [0, len(steps)), starting at 0. Next and
previous are bounded and any actual move resets read-aloud to idle, so speech
of the previous step never carries over. Each start of read-aloud gets its own
utterance id; the browser reports that id back when playback ends (or fails),
and only a report for the current utterance returns the session to idle.
Finishing (or closing) leaves the mode entirely and is handled by the caller
via state.close_recipe().

Navigation is by array position; RecipeStep.step_number is only shown as a
label.
"""

from dataclasses import dataclass, replace

from .models import Recipe, RecipeStep

READ_ALOUD_RATE = 0.9
READ_ALOUD_PITCH = 1.0

ACTION_NEXT = "Next Step"
ACTION_FINISH = "Finish Cooking"


@dataclass(frozen=True)
class CookingSession:
    """
    Position within a recipe plus the read-aloud flag.

    Attributes:
        recipe: Recipe being cooked
        current_step: 0-based index into recipe.steps
        is_speaking: Whether the current step is being read aloud
        speech_count: Number of times read-aloud was started, part of utterance_id
    """
    recipe: Recipe
    current_step: int = 0
    is_speaking: bool = False
    speech_count: int = 0

    @property
    def step_count(self) -> int:
        return len(self.recipe.steps)

    @property
    def step(self) -> RecipeStep:
        return self.recipe.steps[self.current_step]

    @property
    def is_first(self) -> bool:
        return self.current_step == 0

    @property
    def is_last(self) -> bool:
        return self.current_step >= self.step_count - 1

    @property
    def progress(self) -> float:
        """Fraction of steps reached, 1.0 on the last step."""
        return (self.current_step + 1) / self.step_count

    @property
    def step_label(self) -> str:
        return f"Step {self.current_step + 1} of {self.step_count}"

    @property
    def primary_action(self) -> str:
        """Label of the main call-to-action; finishing is primary only on the last step."""
        return ACTION_FINISH if self.is_last else ACTION_NEXT

    @property
    def read_aloud_label(self) -> str:
        return "Stop" if self.is_speaking else "Read Aloud"

    @property
    def utterance_id(self) -> str:
        """Identifies the current read-aloud playback, e.g. 'recipe-1c9e:2:3'."""
        return f"{self.recipe.id}:{self.current_step}:{self.speech_count}"


def start_cooking(recipe: Recipe) -> CookingSession:
    return CookingSession(recipe=recipe)


def next_step(session: CookingSession) -> CookingSession:
    """Advance one step; no-op on the last step."""
    if session.current_step < session.step_count - 1:
        return replace(session, current_step=session.current_step + 1, is_speaking=False)
    return session


def previous_step(session: CookingSession) -> CookingSession:
    """Go back one step; no-op on the first step."""
    if session.current_step > 0:
        return replace(session, current_step=session.current_step - 1, is_speaking=False)
    return session


def toggle_read_aloud(session: CookingSession) -> CookingSession:
    """Idle -> speaking (a new utterance), or speaking -> idle (which stops playback)."""
    if session.is_speaking:
        return replace(session, is_speaking=False)
    return replace(session, is_speaking=True, speech_count=session.speech_count + 1)


def speech_finished(session: CookingSession, utterance_id: str) -> CookingSession:
    """
    Playback of an utterance ended or failed.

    Returns the session unchanged (same object) unless it is still speaking
    that very utterance; reports for earlier steps or stopped playback are
    stale and ignored.
    """
    if session.is_speaking and utterance_id == session.utterance_id:
        return replace(session, is_speaking=False)
    return session

