import datetime
from unittest import TestCase

from runlist import Run, UnsupportedKeyError, lookup, overlapping_range


def increment(key):
    return key + 1


RUNS = [Run(0, 5), Run(10, 15), Run(15, 20), Run(30, 40)]


class OverlappingRangeTest(TestCase):
    def test_empty(self):
        self.assertEqual(overlapping_range([], Run(0, 5)), (0, 0))

    def test_before_all(self):
        self.assertEqual(overlapping_range(RUNS, Run(-10, -5)), (0, 0))

    def test_after_all(self):
        self.assertEqual(overlapping_range(RUNS, Run(50, 60)), (4, 4))

    def test_gap(self):
        self.assertEqual(overlapping_range(RUNS, Run(6, 9)), (1, 1))
        self.assertEqual(overlapping_range(RUNS, Run(21, 29)), (3, 3))

    def test_touching(self):
        self.assertEqual(overlapping_range(RUNS, Run(5, 10)), (1, 1))
        self.assertEqual(overlapping_range(RUNS, Run(20, 30)), (3, 3))

    def test_single(self):
        self.assertEqual(overlapping_range(RUNS, Run(3, 7)), (0, 1))
        self.assertEqual(overlapping_range(RUNS, Run(35, 36)), (3, 4))

    def test_same_start_shorter(self):
        self.assertEqual(overlapping_range(RUNS, Run(10, 12)), (1, 2))

    def test_same_start_longer(self):
        self.assertEqual(overlapping_range(RUNS, Run(10, 17)), (1, 3))

    def test_starts_inside(self):
        self.assertEqual(overlapping_range(RUNS, Run(12, 31)), (1, 4))

    def test_covers_all(self):
        self.assertEqual(overlapping_range(RUNS, Run(-1, 41)), (0, 4))


class LookupTest(TestCase):
    def test_empty(self):
        self.assertIsNone(lookup([], 0, increment))

    def test_start(self):
        self.assertEqual(lookup(RUNS, 0, increment), 0)
        self.assertEqual(lookup(RUNS, 15, increment), 2)

    def test_inside(self):
        self.assertEqual(lookup(RUNS, 4, increment), 0)
        self.assertEqual(lookup(RUNS, 39, increment), 3)

    def test_end_is_exclusive(self):
        self.assertIsNone(lookup(RUNS, 5, increment))
        self.assertIsNone(lookup(RUNS, 40, increment))

    def test_before_first(self):
        self.assertIsNone(lookup(RUNS, -1, increment))

    def test_gap(self):
        self.assertIsNone(lookup(RUNS, 9, increment))

    def test_single_point_run(self):
        self.assertEqual(lookup([Run(3, 4)], 3, increment), 0)
        self.assertIsNone(lookup([Run(3, 4)], 4, increment))

    def test_dates(self):
        runs = [Run(datetime.date(2020, 1, 1), datetime.date(2020, 2, 1))]

        def next_day(day):
            return day + datetime.timedelta(days=1)

        self.assertEqual(lookup(runs, datetime.date(2020, 1, 31), next_day), 0)
        self.assertIsNone(lookup(runs, datetime.date(2020, 2, 1), next_day))

    def test_no_successor(self):
        with self.assertRaises(UnsupportedKeyError):
            lookup(RUNS, "a", increment)

    def test_successor_of_another_type(self):
        with self.assertRaises(TypeError) as cm:
            lookup(RUNS, 1, str)
        self.assertNotIsInstance(cm.exception, UnsupportedKeyError)
