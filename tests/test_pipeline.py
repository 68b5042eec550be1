"""
Tests for the classification pipeline
"""

import unittest

from bullseye.core import ClassificationPipeline, LabelMapper, SessionState
from bullseye.models import BoundingBox, LabelCandidate
from bullseye.utils.constants import (
    SENTINEL_NO_CLASSIFIER,
    SENTINEL_PREDICTION_ERROR,
    SENTINEL_UNKNOWN,
)

from fakes import FakeClassifier, FakeClock, FakeRasterizer, RecordingObserver, candidates

BBOX = BoundingBox(10, 10, 50, 50)


class TestClassificationPipeline(unittest.TestCase):
    def setUp(self):
        self.observer = RecordingObserver()
        self.session = SessionState(observers=[self.observer])
        self.rasterizer = FakeRasterizer()
        self.clock = FakeClock(1234)

    def _pipeline(self, primary=None, fallback=None):
        return ClassificationPipeline(
            self.session,
            self.rasterizer,
            primary=primary,
            fallback=fallback,
            clock=self.clock,
        )

    def test_mapped_category_updates_leaderboard(self):
        classifier = FakeClassifier(candidates(("Gir", 0.92), ("ox", 0.05)))
        expected = LabelMapper().map("Gir")

        record = self._pipeline(primary=classifier).classify("frame", BBOX, 0.75)

        self.assertEqual(record.category, expected)
        self.assertEqual(record.confidence, 0.92)
        self.assertEqual(record.timestamp, 1234)
        self.assertEqual(self.session.leaderboard.count(expected), 1)
        self.assertEqual(self.session.buffer.contents(), [record])
        self.assertEqual(self.observer.records, [record])
        self.assertEqual(len(self.observer.rankings), 1)
        self.assertEqual(self.observer.rankings[0][0].category, expected)

    def test_extracts_fixed_size_still(self):
        classifier = FakeClassifier(candidates(("Gir", 0.9)))
        self._pipeline(primary=classifier).classify("frame", BBOX, 0.75)

        self.assertEqual(self.rasterizer.calls, [("frame", BBOX, 224)])
        self.assertEqual(classifier.images, [("still", (10, 10, 50, 50), 224)])

    def test_counter_incremented_before_classification(self):
        seen = []
        classifier = FakeClassifier(candidates(("Gir", 0.9)))
        original = classifier.classify

        def classify(image):
            seen.append(self.session.capture_count)
            return original(image)

        classifier.classify = classify
        record = self._pipeline(primary=classifier).classify("frame", BBOX, 0.75)

        self.assertEqual(seen, [1])
        self.assertEqual(record.capture_number, 1)
        self.assertEqual(self.observer.counts, [1])

    def test_primary_preferred_over_fallback(self):
        primary = FakeClassifier(candidates(("Gir", 0.9)))
        fallback = FakeClassifier(candidates(("ox", 0.8)))
        self._pipeline(primary=primary, fallback=fallback).classify("frame", BBOX, 0.7)

        self.assertEqual(len(primary.images), 1)
        self.assertEqual(fallback.images, [])

    def test_fallback_used_when_primary_not_ready(self):
        primary = FakeClassifier(candidates(("Gir", 0.9)), ready=False)
        fallback = FakeClassifier(candidates(("ox", 0.8)))
        record = self._pipeline(primary=primary, fallback=fallback).classify(
            "frame", BBOX, 0.7
        )

        self.assertEqual(primary.images, [])
        self.assertEqual(len(fallback.images), 1)
        self.assertEqual(record.category, LabelMapper().map("ox"))
        self.assertEqual(record.confidence, 0.8)

    def test_no_classifier_ready(self):
        primary = FakeClassifier(ready=False)
        record = self._pipeline(primary=primary).classify("frame", BBOX, 0.75)

        self.assertEqual(record.category, SENTINEL_NO_CLASSIFIER)
        self.assertEqual(record.confidence, 0.75)
        self.assertEqual(self.session.leaderboard.ranked_view(), [])
        self.assertEqual(self.observer.rankings, [])
        self.assertEqual(self.observer.records, [record])
        self.assertEqual(self.session.capture_count, 1)

    def test_no_classifiers_configured(self):
        record = self._pipeline().classify("frame", BBOX, 0.66)
        self.assertEqual(record.category, SENTINEL_NO_CLASSIFIER)

    def test_empty_result_is_unknown(self):
        record = self._pipeline(primary=FakeClassifier([])).classify("frame", BBOX, 0.8)

        self.assertEqual(record.category, SENTINEL_UNKNOWN)
        self.assertEqual(record.confidence, 0.8)
        self.assertEqual(len(self.session.leaderboard), 0)
        self.assertEqual(len(self.session.buffer), 1)

    def test_classifier_fault_is_absorbed(self):
        classifier = FakeClassifier(error=RuntimeError("model exploded"))
        with self.assertLogs("bullseye.core.pipeline", level="ERROR"):
            record = self._pipeline(primary=classifier).classify("frame", BBOX, 0.7)

        self.assertEqual(record.category, SENTINEL_PREDICTION_ERROR)
        self.assertEqual(record.confidence, 0.7)
        self.assertEqual(len(self.session.leaderboard), 0)
        self.assertEqual(self.observer.records, [record])

    def test_missing_probability_falls_back_to_detection_score(self):
        classifier = FakeClassifier([LabelCandidate(label="Gir", probability=None)])
        record = self._pipeline(primary=classifier).classify("frame", BBOX, 0.7)
        self.assertEqual(record.confidence, 0.7)

    def test_missing_probability_and_score_falls_back_to_zero(self):
        classifier = FakeClassifier([LabelCandidate(label="Gir", probability=None)])
        record = self._pipeline(primary=classifier).classify("frame", BBOX, 0)
        self.assertEqual(record.confidence, 0)

    def test_empty_label_hashes_unknown_literal(self):
        classifier = FakeClassifier([LabelCandidate(label="", probability=0.4)])
        record = self._pipeline(primary=classifier).classify("frame", BBOX, 0.7)
        self.assertEqual(record.category, LabelMapper().map("unknown"))
        self.assertEqual(self.session.leaderboard.count(record.category), 1)

    def test_explicit_timestamp_wins_over_clock(self):
        classifier = FakeClassifier(candidates(("Gir", 0.9)))
        record = self._pipeline(primary=classifier).classify(
            "frame", BBOX, 0.7, timestamp=99
        )
        self.assertEqual(record.timestamp, 99)


if __name__ == "__main__":
    unittest.main()
