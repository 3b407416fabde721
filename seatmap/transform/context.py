"""
context.py - Cabin/view coordinate transform v1.0

A RenderingContext is recomputed on every layout pass from the cabin
bounds, the viewport size and the current zoom and pan. It maps cabin
meters to view pixels and back.

    base      = min(0.8 * view_w / cabin_w, 0.9 * view_h / cabin_l)
    effective = base * scale
    view.x    = view_w / 2   + tx + cabin.x * effective
    view.y    = 0.05 * view_h + ty + cabin.y * effective
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

import numpy as np

from seatmap.core.constants import (
    VIEW_HEIGHT_FILL,
    VIEW_TOP_MARGIN,
    VIEW_WIDTH_FILL,
    clamp_zoom,
)
from seatmap.geometry.cabin import CabinBounds, FuselageGeometry
from seatmap.geometry.primitives import AffineTransform, CabinCoordinate, Rect, ViewPoint, ViewSize

__all__ = [
    'RenderingContext',
    'aspect_fit_scale',
]

logger = logging.getLogger("seatmap.transform")


def aspect_fit_scale(view_size: ViewSize, width: float, length: float) -> float:
    """Largest scale that fits width x length in the viewport with margins."""
    scale_x = (view_size.width * VIEW_WIDTH_FILL) / width
    scale_y = (view_size.height * VIEW_HEIGHT_FILL) / length
    return min(scale_x, scale_y)


@dataclass(frozen=True)
class RenderingContext:
    """
    Transient transform parameters for one layout pass.

    Use create() rather than the constructor: it returns None for a
    degenerate viewport, which callers treat as "not yet renderable".
    """

    bounds: CabinBounds
    view_size: ViewSize
    scale: float
    translation: ViewPoint

    @classmethod
    def create(
        cls,
        bounds: CabinBounds,
        view_size: ViewSize,
        scale: float = 1.0,
        translation: Optional[ViewPoint] = None,
    ) -> Optional["RenderingContext"]:
        if view_size.is_degenerate:
            logger.debug(f"Skipping transform for degenerate viewport {view_size}")
            return None
        return cls(
            bounds=bounds,
            view_size=view_size,
            scale=clamp_zoom(scale),
            translation=translation or ViewPoint.zero(),
        )

    # -------------------------------------------------------------------------
    # Scale and origin
    # -------------------------------------------------------------------------

    @property
    def base_scale(self) -> float:
        return aspect_fit_scale(self.view_size, self.bounds.width, self.bounds.length)

    @property
    def effective_scale(self) -> float:
        """Pixels per meter."""
        return self.base_scale * self.scale

    @property
    def origin(self) -> ViewPoint:
        """View position of the cabin origin (centerline at the nose)."""
        return ViewPoint(
            self.view_size.width / 2 + self.translation.x,
            self.view_size.height * VIEW_TOP_MARGIN + self.translation.y,
        )

    # -------------------------------------------------------------------------
    # Point mapping
    # -------------------------------------------------------------------------

    def to_view(self, cabin: CabinCoordinate) -> ViewPoint:
        """Map cabin meters to view pixels."""
        s = self.effective_scale
        o = self.origin
        return ViewPoint(o.x + cabin.x * s, o.y + cabin.y * s)

    def to_cabin(self, point: ViewPoint) -> CabinCoordinate:
        """Map view pixels to cabin meters (inverse of to_view)."""
        s = self.effective_scale
        adjusted = point - self.translation
        return CabinCoordinate(
            (adjusted.x - self.view_size.width / 2) / s,
            (adjusted.y - self.view_size.height * VIEW_TOP_MARGIN) / s,
        )

    def to_view_rect(self, rect: Rect) -> Rect:
        s = self.effective_scale
        top_left = self.to_view(CabinCoordinate(rect.x, rect.y))
        return Rect(top_left.x, top_left.y, rect.width * s, rect.height * s)

    def to_cabin_rect(self, rect: Rect) -> Rect:
        s = self.effective_scale
        top_left = self.to_cabin(ViewPoint(rect.x, rect.y))
        return Rect(top_left.x, top_left.y, rect.width / s, rect.height / s)

    # -------------------------------------------------------------------------
    # Matrix forms
    # -------------------------------------------------------------------------

    def as_affine(self) -> AffineTransform:
        """The cabin -> view mapping as a scale followed by a translation."""
        o = self.origin
        return AffineTransform.scaling(self.effective_scale).then(AffineTransform.translation(o.x, o.y))

    def inverse_affine(self) -> AffineTransform:
        return self.as_affine().inverse()

    def fuselage_transform(self, fuselage: FuselageGeometry) -> AffineTransform:
        """
        Transform for drawing the fuselage outline.

        The outline is fitted on the fuselage dimensions rather than the
        cabin's, so it is scaled independently of the seats.
        """
        base = aspect_fit_scale(self.view_size, fuselage.width, fuselage.length)
        o = self.origin
        return AffineTransform.scaling(base * self.scale).then(AffineTransform.translation(o.x, o.y))

    def project_many(self, coords: Iterable[CabinCoordinate]) -> np.ndarray:
        """Map many cabin coordinates at once, returning an (N, 2) array of view pixels."""
        pts = [(c.x, c.y) for c in coords]
        if not pts:
            return np.empty((0, 2), dtype=float)
        return self.as_affine().apply_many(pts)

    def project_outline(self, points: Sequence[Tuple[float, float]], fuselage: FuselageGeometry) -> List[Tuple[float, float]]:
        """Map fuselage outline vertices to view space."""
        if not points:
            return []
        mapped = self.fuselage_transform(fuselage).apply_many(points)
        return [(float(x), float(y)) for x, y in mapped]
