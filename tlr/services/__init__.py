"""Services layer: the release pipeline and its failure types."""

from .release import ReleasePipeline
from .release_errors import BuildFailure, ReleaseError, StripFailure

__all__ = [
    "BuildFailure",
    "ReleaseError",
    "ReleasePipeline",
    "StripFailure",
]
