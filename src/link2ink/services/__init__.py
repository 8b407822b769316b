"""Services extracted from the orchestrator.

- ProgressManager: per-request stage tracking and event logging
- OutputService: saving images, briefs and citations to disk
"""

from .progress import ProgressManager, ProgressCallback
from .output import OutputService, decode_image, slugify

__all__ = [
    "ProgressManager",
    "ProgressCallback",
    "OutputService",
    "decode_image",
    "slugify",
]
