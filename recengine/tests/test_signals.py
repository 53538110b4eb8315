"""Signal extraction: completed set, rounded difficulty average, category/tag unions."""

from recengine.stages import extract_signals
from recengine.utils import average_difficulty, round_half_up

from .conftest import make_course, make_snapshot


class TestExtractSignals:
    """Tests for extract_signals()."""

    def test_empty_inputs_give_empty_signals(self):
        signals = extract_signals(make_snapshot(time_spent=0), [])

        assert signals.completed_courses == []
        assert signals.average_completed_difficulty == 0
        assert signals.enrolled_categories == set()
        assert signals.total_time_spent_minutes == 0
        assert not signals.has_history

    def test_completed_courses_come_from_catalog_in_catalog_order(self):
        a = make_course("a", difficulty="beginner")
        b = make_course("b")
        c = make_course("c")
        snapshot = make_snapshot(enrolled=[c, a], completed_ids=["c", "a", "gone"])

        signals = extract_signals(snapshot, [a, b, c])

        assert [course.id for course in signals.completed_courses] == ["a", "c"]
        assert signals.completed_course_ids == {"a", "c", "gone"}
        assert signals.catalog_ids == {"a", "b", "c"}

    def test_enrolled_categories_are_the_union_over_enrolled_courses(self):
        a = make_course("a", category=["Energy", "Climate"])
        b = make_course("b", category=["Policy"])
        signals = extract_signals(make_snapshot(enrolled=[a, b]), [a, b])

        assert signals.enrolled_categories == {"Energy", "Climate", "Policy"}
        assert signals.completed_categories == set()

    def test_completed_tags_and_categories(self):
        a = make_course("a", category=["Energy"], tags=["solar", "grid"])
        signals = extract_signals(make_snapshot(enrolled=[a], completed_ids=["a"]), [a])

        assert signals.completed_categories == {"Energy"}
        assert signals.completed_tags == {"solar", "grid"}


class TestAverageDifficulty:
    """Rounded mean of difficulty levels."""

    def test_no_courses_is_zero(self):
        assert average_difficulty([]) == 0

    def test_half_rounds_up(self):
        beginner = make_course("a", difficulty="beginner")
        intermediate = make_course("b", difficulty="intermediate")
        advanced = make_course("c", difficulty="advanced")

        assert average_difficulty([beginner, intermediate]) == 2
        assert average_difficulty([intermediate, advanced]) == 3

    def test_rounds_to_nearest(self):
        beginner = make_course("a", difficulty="beginner")
        advanced = make_course("c", difficulty="advanced")

        # (1 + 1 + 3) / 3 = 1.67
        assert average_difficulty([beginner, beginner, advanced]) == 2

    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2
