"""
Concrete collaborators built on OpenCV and Ultralytics.

Model adapters live in ``vision.yolo`` and are imported explicitly so
that loading this package does not pull in torch.
"""

from .camera import initialize_camera
from .drawing import CropRasterizer, FrameAnnotator
from .gallery import GalleryWriter

__all__ = [
    "CropRasterizer",
    "FrameAnnotator",
    "GalleryWriter",
    "initialize_camera",
]
