"""
Tests for the on-disk capture gallery
"""

import os
import tempfile
import unittest

import cv2
import numpy as np

from bullseye.core import ClassificationPipeline, SessionState
from bullseye.models import BoundingBox, CaptureRecord
from bullseye.vision import CropRasterizer, GalleryWriter

from fakes import FakeClassifier, FakeClock, candidates


def _still(value: int = 128) -> np.ndarray:
    return np.full((32, 32, 3), value, dtype=np.uint8)


def _record(n: int, category: str = "Gir", image=None) -> CaptureRecord:
    return CaptureRecord(
        image=_still() if image is None else image,
        category=category,
        confidence=0.92,
        timestamp=n,
        capture_number=n,
    )


class TestGalleryWriter(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def _files(self) -> list[str]:
        return sorted(f for f in os.listdir(self.dir) if f.startswith("capture_"))

    def test_writes_still(self):
        gallery = GalleryWriter(self.dir)
        gallery.on_capture_recorded(_record(1, "Holstein_Friesian"))

        self.assertEqual(self._files(), ["capture_000001_holstein_friesian_92.jpg"])
        written = cv2.imread(os.path.join(self.dir, self._files()[0]))
        self.assertEqual(written.shape, (32, 32, 3))

    def test_sentinel_category_filename(self):
        gallery = GalleryWriter(self.dir)
        gallery.on_capture_recorded(_record(7, "unknown (no classifier)"))
        self.assertEqual(self._files(), ["capture_000007_unknown_no_classifier_92.jpg"])

    def test_keeps_only_capacity_newest(self):
        gallery = GalleryWriter(self.dir, capacity=3)
        for n in range(1, 6):
            gallery.on_capture_recorded(_record(n))

        self.assertEqual(
            self._files(),
            [
                "capture_000003_gir_92.jpg",
                "capture_000004_gir_92.jpg",
                "capture_000005_gir_92.jpg",
            ],
        )

    def test_clears_previous_session(self):
        stale = os.path.join(self.dir, "capture_000099_gir_50.jpg")
        cv2.imwrite(stale, _still())
        other = os.path.join(self.dir, "notes.txt")
        with open(other, "w", encoding="utf-8") as f:
            f.write("keep")

        GalleryWriter(self.dir)

        self.assertFalse(os.path.exists(stale))
        self.assertTrue(os.path.exists(other))

    def test_skips_records_without_image_data(self):
        gallery = GalleryWriter(self.dir)
        gallery.on_capture_recorded(
            CaptureRecord(image=None, category="Gir", confidence=0.5, timestamp=0)
        )
        self.assertEqual(self._files(), [])

    def test_pipeline_capture_reaches_disk(self):
        gallery = GalleryWriter(self.dir)
        session = SessionState(observers=[gallery])
        pipeline = ClassificationPipeline(
            session,
            CropRasterizer(),
            primary=FakeClassifier(candidates(("Gir", 0.92))),
            clock=FakeClock(),
        )
        frame = np.full((240, 320, 3), 200, dtype=np.uint8)

        record = pipeline.classify(frame, BoundingBox(10, 10, 50, 50), 0.75)

        self.assertEqual(len(self._files()), 1)
        written = cv2.imread(os.path.join(self.dir, self._files()[0]))
        self.assertEqual(written.shape, (224, 224, 3))
        self.assertIn(record.category.lower(), self._files()[0])


if __name__ == "__main__":
    unittest.main()
