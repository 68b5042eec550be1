"""
Tests for Ultralytics result conversion and classifier loading
"""

import unittest
from types import SimpleNamespace

import torch

from bullseye.vision.yolo import (
    candidates_from_results,
    detections_from_results,
    load_classifiers,
)


def _det_results(cls, xyxy, conf):
    boxes = SimpleNamespace(
        cls=torch.tensor(cls, dtype=torch.float32),
        xyxy=torch.tensor(xyxy, dtype=torch.float32),
        conf=torch.tensor(conf, dtype=torch.float32),
    )
    return [SimpleNamespace(boxes=boxes)]


class TestDetectionConversion(unittest.TestCase):
    def test_converts_boxes(self):
        results = _det_results([19.0, 17.0], [[10, 10, 60, 60], [0, 0, 5, 5]], [0.75, 0.9])
        detections = detections_from_results(results, {17: "horse", 19: "cow"})

        self.assertEqual([d.object_class for d in detections], ["cow", "horse"])
        self.assertEqual(detections[0].bbox.as_tuple(), (10.0, 10.0, 50.0, 50.0))
        self.assertAlmostEqual(detections[0].score, 0.75, places=5)

    def test_no_boxes(self):
        self.assertEqual(detections_from_results([SimpleNamespace(boxes=None)], {}), [])
        self.assertEqual(detections_from_results([], {}), [])


class TestCandidateConversion(unittest.TestCase):
    def test_best_first_top_k(self):
        probs = SimpleNamespace(data=torch.tensor([0.1, 0.6, 0.05, 0.25]))
        names = {0: "ox", 1: "water buffalo", 2: "bison", 3: "ram"}

        result = candidates_from_results([SimpleNamespace(probs=probs)], names, top_k=3)

        self.assertEqual([c.label for c in result], ["water buffalo", "ram", "ox"])
        self.assertAlmostEqual(result[0].probability, 0.6, places=5)

    def test_missing_probs(self):
        self.assertEqual(candidates_from_results([SimpleNamespace(probs=None)], {}, 5), [])
        self.assertEqual(candidates_from_results([], {}, 5), [])


class _Loadable:
    def __init__(self, fail=False):
        self.fail = fail
        self.loaded = False

    def load(self):
        if self.fail:
            raise FileNotFoundError("weights missing")
        self.loaded = True


class TestLoadClassifiers(unittest.TestCase):
    def test_primary_only_when_it_loads(self):
        primary, fallback = _Loadable(), _Loadable()
        load_classifiers(primary, fallback)
        self.assertTrue(primary.loaded)
        self.assertFalse(fallback.loaded)

    def test_fallback_after_primary_failure(self):
        primary, fallback = _Loadable(fail=True), _Loadable()
        with self.assertLogs("bullseye.vision.yolo", level="ERROR"):
            load_classifiers(primary, fallback)
        self.assertTrue(fallback.loaded)

    def test_both_fail(self):
        primary, fallback = _Loadable(fail=True), _Loadable(fail=True)
        with self.assertLogs("bullseye.vision.yolo", level="ERROR") as logs:
            load_classifiers(primary, fallback)
        self.assertEqual(len([r for r in logs.records if r.levelname == "ERROR"]), 2)

    def test_no_classifiers(self):
        with self.assertLogs("bullseye.vision.yolo", level="WARNING"):
            load_classifiers(None, None)


if __name__ == "__main__":
    unittest.main()
