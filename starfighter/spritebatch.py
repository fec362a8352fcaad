"""Batched sprite and text drawing with sorting and blending options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from starfighter.region import Region
from starfighter.resources import Texture
from starfighter.vector2 import Vector2

WHITE = (1.0, 1.0, 1.0, 1.0)


class TextAlign(Enum):
    """Horizontal alignment of drawn text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class SpriteSortMode(Enum):
    """How queued sprites are ordered before rendering."""

    BACK_TO_FRONT = auto()
    DEFERRED = auto()
    FRONT_TO_BACK = auto()
    IMMEDIATE = auto()
    TEXTURE = auto()


class BlendState(Enum):
    """How overlapping sprites are blended."""

    ALPHA = auto()
    ADDITIVE = auto()


@dataclass
class Drawable:
    """One queued sprite or piece of text."""

    is_bitmap: bool
    color: Any
    x: int
    y: int
    depth: float = 0.0
    font: Any = None
    text: str = ""
    align: TextAlign = TextAlign.LEFT
    bitmap: Any = None
    rotation: float = 0.0
    cx: int = 0
    cy: int = 0
    sx: int = 0
    sy: int = 0
    sw: int = 0
    sh: int = 0
    scx: float = 1.0
    scy: float = 1.0
    resource_id: int = 0


class RecordingRenderer:
    """A rendering back end that records every call it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def set_blender(self, blend_state: BlendState) -> None:
        self.calls.append(("set_blender", blend_state))

    def use_transform(self, transform: Any) -> None:
        """Apply a transform; None stands for the identity."""
        self.calls.append(("use_transform", transform))

    def hold_drawing(self, hold: bool) -> None:
        self.calls.append(("hold_drawing", hold))

    def draw_bitmap(self, drawable: Drawable) -> None:
        self.calls.append(("draw_bitmap", drawable))

    def draw_text(self, drawable: Drawable) -> None:
        self.calls.append(("draw_text", drawable))


class SpriteBatch:
    """Collects sprites between begin() and end() and renders them together."""

    def __init__(self, renderer: Any = None) -> None:
        self.renderer = renderer if renderer is not None else RecordingRenderer()
        self._drawables: list[Drawable] = []
        self._sort_mode = SpriteSortMode.DEFERRED
        self._blend_state = BlendState.ALPHA
        self._transform: Any = None
        self._started = False

    @property
    def is_started(self) -> bool:
        return self._started

    def begin(
        self,
        sort_mode: SpriteSortMode = SpriteSortMode.DEFERRED,
        blend_state: BlendState = BlendState.ALPHA,
        transform: Any = None,
    ) -> None:
        """Start a batch with the given sort mode, blending and transform."""
        self._started = True
        self._sort_mode = sort_mode
        if sort_mode is SpriteSortMode.IMMEDIATE:
            if transform is not None:
                self.renderer.use_transform(transform)
        else:
            self._transform = transform
        self._blend_state = blend_state
        self.renderer.set_blender(blend_state)

    def end(self) -> None:
        """Render the queued sprites and restore the identity transform."""
        if self._sort_mode is not SpriteSortMode.IMMEDIATE:
            if self._transform is not None:
                self.renderer.use_transform(self._transform)
            if self._sort_mode is SpriteSortMode.BACK_TO_FRONT:
                self._drawables.sort(key=lambda drawable: drawable.depth)
            elif self._sort_mode is SpriteSortMode.FRONT_TO_BACK:
                self._drawables.sort(key=lambda drawable: drawable.depth, reverse=True)
            elif self._sort_mode is SpriteSortMode.TEXTURE:
                self.renderer.hold_drawing(True)
            for drawable in self._drawables:
                self._render(drawable)
        self._drawables.clear()
        if self._sort_mode is SpriteSortMode.TEXTURE:
            self.renderer.hold_drawing(False)
        self.renderer.use_transform(None)
        self._started = False

    def _require_started(self) -> None:
        if not self._started:
            raise RuntimeError("begin() must be called before drawing")

    def _render(self, drawable: Drawable) -> None:
        if drawable.is_bitmap:
            self.renderer.draw_bitmap(drawable)
        else:
            self.renderer.draw_text(drawable)

    def _submit(self, drawable: Drawable) -> None:
        if self._sort_mode is SpriteSortMode.IMMEDIATE:
            self._render(drawable)
        else:
            self._drawables.append(drawable)

    def draw_string(
        self,
        font: Any,
        text: str,
        position: Vector2,
        color: Any = WHITE,
        alignment: TextAlign = TextAlign.LEFT,
        depth: float = 0.0,
    ) -> None:
        """Queue a piece of text."""
        self._require_started()
        self._submit(
            Drawable(
                is_bitmap=False,
                color=color,
                x=int(position.x),
                y=int(position.y),
                depth=depth,
                font=font,
                text=text,
                align=alignment,
            )
        )

    def _bitmap(
        self,
        texture: Texture,
        position: Vector2,
        source: tuple[int, int, int, int],
        color: Any,
        origin: Vector2 | None,
        scale: Vector2 | None,
        rotation: float,
        depth: float,
    ) -> None:
        self._require_started()
        origin = origin if origin is not None else Vector2.ZERO
        scale = scale if scale is not None else Vector2.ONE
        sx, sy, sw, sh = source
        self._submit(
            Drawable(
                is_bitmap=True,
                color=color,
                x=int(position.x),
                y=int(position.y),
                depth=depth,
                bitmap=texture.image,
                rotation=rotation,
                cx=int(origin.x),
                cy=int(origin.y),
                sx=sx,
                sy=sy,
                sw=sw,
                sh=sh,
                scx=scale.x,
                scy=scale.y,
                resource_id=texture.resource_id,
            )
        )

    def draw(
        self,
        texture: Texture,
        position: Vector2,
        color: Any = WHITE,
        origin: Vector2 | None = None,
        scale: Vector2 | None = None,
        rotation: float = 0.0,
        depth: float = 0.0,
    ) -> None:
        """Queue a whole texture."""
        self._bitmap(
            texture,
            position,
            (0, 0, texture.width, texture.height),
            color,
            origin,
            scale,
            rotation,
            depth,
        )

    def draw_region(
        self,
        texture: Texture,
        position: Vector2,
        region: Region,
        color: Any = WHITE,
        origin: Vector2 | None = None,
        scale: Vector2 | None = None,
        rotation: float = 0.0,
        depth: float = 0.0,
    ) -> None:
        """Queue the given region of a texture."""
        self._bitmap(
            texture,
            position,
            (region.x, region.y, region.width, region.height),
            color,
            origin,
            scale,
            rotation,
            depth,
        )

    def batch_settings(self) -> tuple[SpriteSortMode, BlendState, Any]:
        """Return the sort mode, blend state and transform of the running batch."""
        if not self._started:
            raise RuntimeError("begin() must be called before reading the settings")
        return self._sort_mode, self._blend_state, self._transform