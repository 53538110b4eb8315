"""Next-step aggregation: continue/start/quiz families, priorities, dedup and truncation."""

from recengine.models import (
    CourseProgress,
    EnrolledCourseState,
    Lesson,
    NextStepType,
    RecommendationConfig,
)
from recengine.stages import build_next_steps, continue_priority

from .conftest import make_course


def state(course_id, progress=None, lessons=(), title=None):
    return EnrolledCourseState(
        course=make_course(course_id, title=title or f"Course {course_id}"),
        progress=CourseProgress.model_validate(progress) if progress is not None else None,
        lessons=[Lesson.model_validate(lesson) for lesson in lessons],
    )


def lessons_for(prefix, count, quiz_orders=()):
    return [
        {"id": f"{prefix}-l{i}", "order": i, "title": f"{prefix} {i}", "quiz_id": f"q-{prefix}-{i}" if i in quiz_orders else None}
        for i in range(1, count + 1)
    ]


class TestContinueSteps:
    """Courses in progress produce a continue step for the first uncompleted lesson."""

    def test_first_uncompleted_lesson_by_order(self):
        lessons = list(reversed(lessons_for("x", 3)))
        s = state("x", {"progress_percentage": 40, "completed_lesson_ids": ["x-l1"]}, lessons, title="Solar")

        steps = build_next_steps([s])

        assert len(steps) == 1
        step = steps[0]
        assert step.type == NextStepType.CONTINUE_COURSE
        assert step.lesson_id == "x-l2"
        assert step.title == "Continue: Solar"
        assert step.description == "Next lesson: x 2"
        assert step.priority == 40

    def test_all_lessons_completed_gives_no_continue_step(self):
        s = state("x", {"progress_percentage": 90, "completed_lesson_ids": ["x-l1", "x-l2"]}, lessons_for("x", 2))
        assert build_next_steps([s]) == []

    def test_closer_to_completion_ranks_higher(self):
        nearly = state("nearly", {"progress_percentage": 90}, lessons_for("n", 2))
        barely = state("barely", {"progress_percentage": 10}, lessons_for("b", 2))

        steps = build_next_steps([barely, nearly])

        assert [s.course_id for s in steps] == ["nearly", "barely"]

    def test_continue_priority_is_monotonic_in_progress(self):
        priorities = [continue_priority(p) for p in range(1, 100)]
        assert priorities == sorted(priorities)

    def test_legacy_mode_inverts_priority(self):
        config = RecommendationConfig(continue_priority_mode="legacy")

        assert continue_priority(80, config) == 20
        assert continue_priority(10, config) == 90


class TestStartSteps:
    """Courses never started produce a start step for their first lesson."""

    def test_no_progress_record(self):
        s = state("y", None, list(reversed(lessons_for("y", 3))), title="Wind")

        steps = build_next_steps([s])

        assert steps[0].type == NextStepType.START_COURSE
        assert steps[0].lesson_id == "y-l1"
        assert steps[0].priority == 50
        assert steps[0].title == "Start: Wind"

    def test_zero_percent_record(self):
        s = state("y", {"progress_percentage": 0}, lessons_for("y", 1))
        assert build_next_steps([s])[0].type == NextStepType.START_COURSE

    def test_course_without_lessons_gives_nothing(self):
        assert build_next_steps([state("y", None, [])]) == []


class TestQuizSteps:
    """Uncompleted lessons with a quiz produce take_quiz steps."""

    def test_quiz_for_each_uncompleted_quiz_lesson(self):
        s = state(
            "z",
            {"progress_percentage": 30, "completed_lesson_ids": ["z-l1"]},
            lessons_for("z", 4, quiz_orders=(1, 3, 4)),
        )

        steps = build_next_steps([s])
        quizzes = [step for step in steps if step.type == NextStepType.TAKE_QUIZ]

        assert [q.lesson_id for q in quizzes] == ["z-l3", "z-l4"]
        assert all(q.priority == 30 for q in quizzes)
        assert quizzes[0].title == "Take Quiz: z 3"

    def test_finished_course_contributes_nothing(self):
        done_by_flag = state("a", {"completed": True, "progress_percentage": 60}, lessons_for("a", 2, quiz_orders=(2,)))
        done_by_percent = state("b", {"progress_percentage": 100}, lessons_for("b", 2, quiz_orders=(2,)))

        assert build_next_steps([done_by_flag, done_by_percent]) == []


class TestMergeAndRank:
    """Merged queue ordering, truncation and duplicate suppression."""

    def test_continue_at_eighty_precedes_start(self):
        x = state("x", {"progress_percentage": 80, "completed_lesson_ids": ["x-l1"]}, lessons_for("x", 3))
        y = state("y", None, lessons_for("y", 2))

        steps = build_next_steps([y, x])

        assert steps[0].course_id == "x"
        assert steps[0].priority == 80
        assert steps[1].course_id == "y"
        assert steps[1].priority == 50

    def test_truncates_to_five(self):
        states = [state(f"c{i}", None, lessons_for(f"c{i}", 3, quiz_orders=(1, 2, 3))) for i in range(3)]

        steps = build_next_steps(states)

        assert len(steps) == 5
        # three starts (50) first in course order, then quizzes (30)
        assert [s.type for s in steps[:3]] == [NextStepType.START_COURSE] * 3
        assert [s.course_id for s in steps[:3]] == ["c0", "c1", "c2"]
        assert steps[3].type == NextStepType.TAKE_QUIZ

    def test_equal_priorities_keep_family_then_course_order(self):
        config = RecommendationConfig(start_priority=30, quiz_priority=30, next_steps_limit=10)
        a = state("a", None, lessons_for("a", 1, quiz_orders=(1,)))
        b = state("b", None, lessons_for("b", 1))

        steps = build_next_steps([a, b], config)

        assert [(s.course_id, s.type) for s in steps] == [
            ("a", NextStepType.START_COURSE),
            ("b", NextStepType.START_COURSE),
            ("a", NextStepType.TAKE_QUIZ),
        ]

    def test_duplicate_enrolments_do_not_duplicate_steps(self):
        x = state("x", {"progress_percentage": 20}, lessons_for("x", 2, quiz_orders=(1,)))

        steps = build_next_steps([x, x])
        keys = [s.key for s in steps]

        assert len(keys) == len(set(keys))
        assert len(steps) == 2

    def test_limit_comes_from_config(self):
        states = [state(f"c{i}", None, lessons_for(f"c{i}", 1)) for i in range(4)]
        assert len(build_next_steps(states, RecommendationConfig(next_steps_limit=2))) == 2
