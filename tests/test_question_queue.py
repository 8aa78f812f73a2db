import unittest

from bookquiz.app import explain
from bookquiz.question.errors import NoCurrentQuestion
from bookquiz.question.queue import QuestionQueue

from tests.helpers import Q1, Q2, Q3


class QuestionQueueTests(unittest.TestCase):
    def test_construction_makes_first_question_current(self) -> None:
        queue = QuestionQueue([Q1, Q2, Q3])
        self.assertEqual(queue.get_current_question(), Q1)
        self.assertEqual(queue.get_current_question_text(), "2+2?")
        self.assertEqual(queue.get_current_question_choices(), ("3", "4", "5", "6"))
        self.assertEqual(queue.get_current_question_answer(), "b")
        self.assertTrue(queue.has_more_questions())

    def test_empty_queue_accessors_raise(self) -> None:
        queue = QuestionQueue([])
        self.assertFalse(queue.has_more_questions())
        self.assertIsNone(queue.current)
        self.assertEqual(queue.get_questions(), [])
        with self.assertRaises(NoCurrentQuestion):
            queue.get_current_question()
        with self.assertRaises(NoCurrentQuestion):
            queue.get_current_question_text()
        with self.assertRaises(NoCurrentQuestion):
            queue.get_current_question_choices()
        with self.assertRaises(NoCurrentQuestion):
            queue.get_current_question_answer()

    def test_default_constructor_is_empty(self) -> None:
        self.assertFalse(QuestionQueue().has_more_questions())

    def test_advance_exhausts_after_one_call_per_question(self) -> None:
        queue = QuestionQueue([Q1, Q2, Q3])
        for _ in range(2):
            queue.advance()
            self.assertTrue(queue.has_more_questions())
        queue.advance()
        self.assertFalse(queue.has_more_questions())
        self.assertEqual(queue.asked_count, 3)
        self.assertEqual(queue.waiting_count, 0)

    def test_current_question_stays_at_front_of_waiting_queue(self) -> None:
        queue = QuestionQueue([Q1, Q2, Q3])
        self.assertEqual(queue.waiting_count, 3)
        self.assertEqual(queue.asked_count, 0)
        queue.advance()
        self.assertEqual(queue.get_current_question(), Q2)
        self.assertEqual(queue.waiting_count, 2)
        self.assertEqual(queue.asked_count, 1)

    def test_get_questions_is_asked_then_waiting_and_conserved(self) -> None:
        queue = QuestionQueue([Q1, Q2, Q3])
        for _ in range(4):
            self.assertEqual(queue.get_questions(), [Q1, Q2, Q3])
            queue.advance()

    def test_get_questions_returns_a_copy(self) -> None:
        queue = QuestionQueue([Q1])
        snapshot = queue.get_questions()
        snapshot.clear()
        self.assertEqual(queue.get_questions(), [Q1])

    def test_insert_appends_without_moving_cursor(self) -> None:
        queue = QuestionQueue([Q1])
        queue.insert(Q2)
        self.assertEqual(queue.get_current_question(), Q1)
        self.assertEqual(queue.get_questions(), [Q1, Q2])

    def test_insert_into_exhausted_queue_makes_it_current(self) -> None:
        queue = QuestionQueue([Q1])
        queue.advance()
        self.assertFalse(queue.has_more_questions())
        queue.insert(Q2)
        self.assertTrue(queue.has_more_questions())
        self.assertEqual(queue.get_current_question(), Q2)
        self.assertEqual(queue.get_questions(), [Q1, Q2])

    def test_constructor_takes_over_the_given_list(self) -> None:
        questions = [Q1, Q2]
        queue = QuestionQueue(questions)
        queue.advance()
        self.assertEqual(questions, [Q2])

    def test_accepts_non_list_iterables(self) -> None:
        queue = QuestionQueue(iter((Q1, Q2)))
        self.assertEqual(queue.get_questions(), [Q1, Q2])

    def test_advance_and_insert_are_traced(self) -> None:
        with explain.capture() as events:
            queue = QuestionQueue([Q1])
            queue.advance()
            queue.insert(Q2)
        names = [name for name, _ in events]
        self.assertEqual(names, ["question_advanced", "question_advanced", "question_inserted", "question_advanced"])
        self.assertTrue(events[1][1]["exhausted"])


if __name__ == "__main__":
    unittest.main()
