"""
In-memory collaborators for tests - no camera, models or canvas needed.
"""

from bullseye.models import BoundingBox, Detection, LabelCandidate


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class FakeDetector:
    """Returns scripted detections per call; an Exception entry is raised."""

    def __init__(self, script=None):
        self.script = list(script or [])
        self.calls = 0

    def detect(self, frame):
        self.calls += 1
        result = self.script.pop(0) if self.script else []
        if isinstance(result, Exception):
            raise result
        return result


class FakeClassifier:
    def __init__(self, candidates=None, ready=True, error: Exception | None = None):
        self.candidates = candidates if candidates is not None else []
        self.ready = ready
        self.error = error
        self.images = []

    def classify(self, image):
        self.images.append(image)
        if self.error is not None:
            raise self.error
        return self.candidates


class FakeRasterizer:
    def __init__(self):
        self.calls = []

    def extract(self, frame, bbox, target_size):
        self.calls.append((frame, bbox, target_size))
        return ("still", bbox.as_tuple(), target_size)


class FakeAnnotator:
    def __init__(self):
        self.frames = []
        self.drawn = []
        self.ended = 0

    def begin_frame(self, frame):
        self.frames.append(frame)

    def draw(self, bbox, label_text):
        self.drawn.append((bbox, label_text))

    def end_frame(self):
        self.ended += 1


class FakeFrameSource:
    """Yields ``count`` frames then reports end of stream."""

    def __init__(self, count: int):
        self.remaining = count
        self.reads = 0

    def read(self):
        self.reads += 1
        if self.remaining <= 0:
            return False, None
        self.remaining -= 1
        return True, f"frame-{self.reads}"


class RecordingObserver:
    def __init__(self):
        self.records = []
        self.rankings = []
        self.counts = []

    def on_capture_recorded(self, record):
        self.records.append(record)

    def on_leaderboard_changed(self, ranked):
        self.rankings.append(ranked)

    def on_global_count_changed(self, count):
        self.counts.append(count)


def cow(score: float = 0.75, bbox=(10, 10, 50, 50), object_class: str = "cow") -> Detection:
    return Detection(object_class=object_class, score=score, bbox=BoundingBox(*bbox))


def candidates(*pairs) -> list[LabelCandidate]:
    return [LabelCandidate(label=label, probability=prob) for label, prob in pairs]
