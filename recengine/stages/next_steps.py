"""
Next-Step Aggregator

Builds three families of action items from enrolled courses only, then merges,
de-duplicates and ranks them:

1. continue_course (course in progress): first uncompleted lesson by `order`
2. start_course (never started): first lesson by `order`
3. take_quiz: every uncompleted lesson with an attached quiz

Finished courses contribute nothing. Families are emitted continue, start, quiz
(course order within each), which is the tie-break order of the final sort.
"""

import logging
from typing import Iterable, List, Optional, Set

from ..models import (
    EnrolledCourseState,
    Lesson,
    NextStep,
    NextStepKey,
    NextStepType,
    RecommendationConfig,
)
from ..models.config import DEFAULT_CONFIG
from ..utils.ordering import rank_descending
from ..utils.scores import round_half_up

logger = logging.getLogger(__name__)


def continue_priority(progress_percentage: float, config: RecommendationConfig = DEFAULT_CONFIG) -> int:
    """Priority of a continue step for a course at the given progress."""
    if config.continue_priority_mode == "legacy":
        return round_half_up(100 - progress_percentage)
    return round_half_up(progress_percentage)


def _first_uncompleted(lessons: List[Lesson], completed_ids: Set[str]) -> Optional[Lesson]:
    for lesson in lessons:
        if lesson.id not in completed_ids:
            return lesson
    return None


def _continue_steps(states: List[EnrolledCourseState], config: RecommendationConfig) -> Iterable[NextStep]:
    for state in states:
        if state.progress is None or state.progress.is_finished:
            continue
        if state.progress_percentage <= 0:
            continue
        lesson = _first_uncompleted(state.lessons_in_order(), state.completed_lesson_ids)
        if lesson is None:
            continue
        yield NextStep(
            course_id=state.course.id,
            lesson_id=lesson.id,
            type=NextStepType.CONTINUE_COURSE,
            title=f"Continue: {state.course.title}",
            description=f"Next lesson: {lesson.title}",
            priority=continue_priority(state.progress_percentage, config),
        )


def _start_steps(states: List[EnrolledCourseState], config: RecommendationConfig) -> Iterable[NextStep]:
    for state in states:
        if state.progress is not None and (state.progress.is_finished or state.progress_percentage > 0):
            continue
        lessons = state.lessons_in_order()
        if not lessons:
            continue
        yield NextStep(
            course_id=state.course.id,
            lesson_id=lessons[0].id,
            type=NextStepType.START_COURSE,
            title=f"Start: {state.course.title}",
            description="Begin your learning journey",
            priority=config.start_priority,
        )


def _quiz_steps(states: List[EnrolledCourseState], config: RecommendationConfig) -> Iterable[NextStep]:
    for state in states:
        if state.progress is not None and state.progress.is_finished:
            continue
        completed = state.completed_lesson_ids
        for lesson in state.lessons_in_order():
            if not lesson.quiz_id or lesson.id in completed:
                continue
            yield NextStep(
                course_id=state.course.id,
                lesson_id=lesson.id,
                type=NextStepType.TAKE_QUIZ,
                title=f"Take Quiz: {lesson.title}",
                description=f"Complete the quiz for {lesson.title}",
                priority=config.quiz_priority,
            )


def build_next_steps(
    states: List[EnrolledCourseState],
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[NextStep]:
    """Merge all step families, drop duplicate (course, lesson, type) keys, rank and truncate."""
    seen: Set[NextStepKey] = set()
    steps: List[NextStep] = []
    for family in (_continue_steps, _start_steps, _quiz_steps):
        for step in family(states, config):
            if step.key in seen:
                continue
            seen.add(step.key)
            steps.append(step)
    logger.debug("[next_steps] built=%d courses=%d", len(steps), len(states))
    return rank_descending(steps, key=lambda s: s.priority, limit=config.next_steps_limit)
