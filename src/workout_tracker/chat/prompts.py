"""Coach system prompt and workout-history context."""

from ..models.workout import Workout, format_weight

NO_RECENT_WORKOUTS = "The user hasn't logged any workouts in the past 2 weeks."

SYSTEM_PROMPT = """You are a knowledgeable and supportive personal fitness coach. Your role is to help users plan their workouts, give advice on exercises, and create personalized workout plans based on their history.

When suggesting workouts, format them clearly like this:
**Exercise Name**
- Sets: X
- Reps: X
- Weight: (see below)
- Notes: Any tips or form cues

IMPORTANT WEIGHT GUIDELINES:
- Do NOT suggest specific weights (like "135 lbs") - everyone's strength is different
- Instead, give guidance like:
  - "Choose a weight where the last 2 reps feel challenging"
  - "Start light and increase each set until it feels hard"
  - "Use a weight you can control with good form for all reps"
- If the user has logged that exercise before, you can reference it: "Try the same weight as last time, or add 5 lbs if it felt easy"
- For bodyweight exercises, just say "Bodyweight" or suggest modifications (easier/harder)

Guidelines:
- Be encouraging but realistic
- Consider the user's recent workout history when making suggestions
- If they've worked certain muscle groups recently, suggest complementary exercises or rest
- Ask clarifying questions if needed (e.g., equipment available, time constraints, fitness goals)
- Keep responses concise but helpful
- If suggesting a full workout, organize it logically (warmup, main lifts, accessories, cooldown)

IMPORTANT: When you suggest exercises that could be logged, format them in a way that's clear and actionable. The user can save these to their workout log."""


def format_context_date(workout: Workout) -> str:
    """Short local date such as ``Mon, Jan 15``."""
    local = workout.created_at.astimezone()
    return f"{local:%a, %b} {local.day}"


def format_workout_line(workout: Workout) -> str:
    """One history line: ``- Mon, Jan 15: Squat - 3x5 @ 225lbs (notes)``."""
    notes = f" ({workout.notes})" if workout.notes else ""
    return (
        f"- {format_context_date(workout)}: {workout.exercise} - "
        f"{workout.sets}x{workout.reps} @ {format_weight(workout.weight)}lbs{notes}"
    )


def format_workouts_for_context(workouts: list[Workout]) -> str:
    """Render recent workouts for inclusion in the system prompt."""
    if not workouts:
        return NO_RECENT_WORKOUTS

    lines = [format_workout_line(w) for w in workouts]
    return "Recent workouts (last 2 weeks):\n" + "\n".join(lines)


def build_system_prompt(workouts: list[Workout]) -> str:
    """Coach prompt followed by the user's recent history."""
    return f"{SYSTEM_PROMPT}\n\n{format_workouts_for_context(workouts)}"
