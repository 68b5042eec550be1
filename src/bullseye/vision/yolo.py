"""
Ultralytics adapters - YOLO detection and classification capabilities.

Classifiers load in the background so the camera can start immediately;
until a classifier reports ``ready`` the pipeline records detection-only
captures.
"""

import logging
import threading

import numpy as np
import torch
from ultralytics import YOLO

from ..models import BoundingBox, Detection, LabelCandidate
from ..utils.constants import CLASSIFIER_TOP_K, DEFAULT_INPUT_SIZE

logger = logging.getLogger(__name__)

# Ultralytics is chatty at INFO
logging.getLogger("ultralytics").setLevel(logging.WARNING)


def select_device() -> str:
    """Use CUDA when available."""
    return "cuda" if torch.cuda.is_available() else "cpu"


class YoloDetector:
    """Detection capability backed by a YOLO detection model."""

    def __init__(self, model_file: str, confidence_threshold: float = 0.25):
        self.device = select_device()
        self.model = YOLO(model_file)
        self.model.to(self.device)
        self.confidence_threshold = confidence_threshold

        logger.info(f"Detector initialized: {model_file}")
        logger.info(f"Device: {self.device}")
        if self.device == "cuda":
            logger.info(f"GPU: {torch.cuda.get_device_name(0)}")
        else:
            logger.warning("Running on CPU - performance will be slow")

    def detect(self, frame: np.ndarray) -> list[Detection]:
        results = self.model.predict(
            source=frame,
            conf=self.confidence_threshold,
            device=self.device,
            verbose=False,
        )
        return detections_from_results(results, self.model.names)


def detections_from_results(results, names: dict) -> list[Detection]:
    """Convert Ultralytics detection results into Detection models."""
    detections = []
    if not results:
        return detections

    boxes = results[0].boxes
    if boxes is None or boxes.cls is None or len(boxes.cls) == 0:
        return detections

    classes = boxes.cls.int().cpu().tolist()
    xyxy = boxes.xyxy.cpu().numpy()
    confs = boxes.conf.cpu().tolist()

    for obj_class, box, conf in zip(classes, xyxy, confs):
        x1, y1, x2, y2 = (float(v) for v in box)
        detections.append(
            Detection(
                object_class=names.get(obj_class, str(obj_class)),
                score=float(conf),
                bbox=BoundingBox.from_xyxy(x1, y1, x2, y2),
            )
        )
    return detections


class YoloClassifier:
    """
    Classification capability backed by a YOLO classification model.

    Constructed unloaded; ``load()`` reads the weights and warms the model
    up on a black still. ``ready`` flips to True only after a successful load.
    """

    def __init__(
        self,
        model_file: str,
        top_k: int = CLASSIFIER_TOP_K,
        input_size: int = DEFAULT_INPUT_SIZE,
    ):
        self.model_file = model_file
        self.top_k = top_k
        self.input_size = input_size
        self.device: str | None = None
        self.model: YOLO | None = None
        self._ready = threading.Event()

    @property
    def ready(self) -> bool:
        return self._ready.is_set()

    def load(self) -> None:
        """
        Load and warm up the model.

        Raises:
            Exception: Whatever Ultralytics raises for a missing or bad model
        """
        logger.info(f"Loading classifier: {self.model_file}")
        self.device = select_device()
        self.model = YOLO(self.model_file)

        warmup = np.zeros((self.input_size, self.input_size, 3), dtype=np.uint8)
        self.model(warmup, device=self.device, verbose=False)

        self._ready.set()
        logger.info(f"Classifier ready: {self.model_file} ({self.device})")

    def classify(self, image: np.ndarray) -> list[LabelCandidate]:
        if self.model is None:
            raise RuntimeError(f"Classifier not loaded: {self.model_file}")

        results = self.model(image, device=self.device, verbose=False)
        return candidates_from_results(results, self.model.names, self.top_k)


def candidates_from_results(results, names: dict, top_k: int) -> list[LabelCandidate]:
    """Convert Ultralytics classification results into best-first candidates."""
    if not results:
        return []

    probs = getattr(results[0], "probs", None)
    if probs is None:
        return []

    scores = probs.data.cpu().numpy()
    order = np.argsort(scores)[::-1][:top_k]
    return [
        LabelCandidate(label=str(names.get(int(i), i)), probability=float(scores[i]))
        for i in order
    ]


def load_classifiers(
    primary: YoloClassifier | None, fallback: YoloClassifier | None
) -> None:
    """
    Load the primary classifier, falling back to the secondary on failure.

    Leaves both unready when neither loads; the pipeline then records
    detection-only captures.
    """
    if primary is not None:
        try:
            primary.load()
            return
        except Exception as e:
            logger.error(f"Primary classifier load failed: {e}", exc_info=True)
            logger.warning("Trying fallback classifier")

    if fallback is None:
        logger.warning("No classifier available")
        return

    try:
        fallback.load()
    except Exception as e:
        logger.error(f"Fallback classifier load failed: {e}", exc_info=True)
        logger.warning("Classifier load failed - captures will be unclassified")


def start_classifier_loader(
    primary: YoloClassifier | None, fallback: YoloClassifier | None
) -> threading.Thread:
    """Load classifiers on a daemon thread so detection can start right away."""
    thread = threading.Thread(
        target=load_classifiers,
        args=(primary, fallback),
        name="ClassifierLoader",
        daemon=True,
    )
    thread.start()
    return thread
