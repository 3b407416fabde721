"""
seatmap transform - cabin/view mapping and gesture adapters.
"""

from .context import RenderingContext, aspect_fit_scale
from .gestures import (
    RedrawSink,
    ViewTransformState,
    PanGesture,
    PinchGesture,
    PanAdapter,
    PinchAdapter,
)

__all__ = [
    "RenderingContext",
    "aspect_fit_scale",
    "RedrawSink",
    "ViewTransformState",
    "PanGesture",
    "PinchGesture",
    "PanAdapter",
    "PinchAdapter",
]
