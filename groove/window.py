"""Application window and a text overlay drawn on top of the scene."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .logger import logger

_CLEAR_COLOR = (0.1, 0.1, 0.1, 1.0)


class Window:
    """A fixed-size OpenGL window that tracks the cursor in top-left pixels.

    A pyglet window with an OpenGL 4.5 context and vsync is created;
    ``Window.wrap`` adopts an existing window object instead.
    """

    def __init__(self, width: int, height: int, title: str) -> None:
        self._setup(width, height, title, None)

    @classmethod
    def wrap(cls, native, width: int, height: int, title: str) -> "Window":
        """Build a window around an already created native window."""
        window = cls.__new__(cls)
        window._setup(width, height, title, native)
        return window

    def _setup(self, width: int, height: int, title: str, native) -> None:
        self.width = int(width)
        self.height = int(height)
        self.title = title
        self._cursor: Tuple[float, float] = (0.0, 0.0)
        self._closed = False
        logger.info(f"Creating window: {title}")
        self.native = native if native is not None else self._create_native()
        self.native.push_handlers(
            on_mouse_motion=self._track_cursor,
            on_mouse_drag=self._track_cursor,
            on_mouse_press=self._track_cursor,
            on_mouse_release=self._track_cursor,
        )

    def _create_native(self):
        try:
            import pyglet
            from pyglet import gl

            config = gl.Config(
                major_version=4,
                minor_version=5,
                forward_compatible=True,
                double_buffer=True,
                depth_size=24,
            )
            native = pyglet.window.Window(
                width=self.width,
                height=self.height,
                caption=self.title,
                config=config,
                vsync=True,
            )
        except Exception as exc:
            logger.error("Failed to create window!")
            raise RuntimeError(f"failed to create window {self.title!r}") from exc
        gl.glClearColor(*_CLEAR_COLOR)
        native.clear()
        return native

    def _track_cursor(self, x, y, *rest) -> None:
        self._cursor = (float(x), float(self.height) - float(y))

    def cursor_pos(self) -> Tuple[float, float]:
        """Cursor position in pixels from the top-left corner."""
        return self._cursor

    def should_close(self) -> bool:
        return self._closed or bool(getattr(self.native, "has_exit", False))

    def on_update(self) -> None:
        """Handle pending events, present the frame and clear for the next one."""
        self.native.dispatch_events()
        if self.should_close():
            return
        self.native.flip()
        self.native.clear()

    def close(self) -> None:
        """Destroy the window; later calls do nothing."""
        if self._closed:
            return
        self._closed = True
        self.native.close()
        logger.info("Window destroyed.")

    def __enter__(self) -> "Window":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _pyglet_label(**kwargs):
    import pyglet

    return pyglet.text.Label(**kwargs)


class Overlay:
    """A titled panel of text drawn over the 3D scene each frame.

    ``x``, ``top``, ``line_height`` and ``label_factory`` may be changed
    before the first draw.
    """

    def __init__(self, title: str, text: str) -> None:
        self.title = title
        self.text = text
        self.x = 10.0
        self.top = 710.0
        self.line_height = 24.0
        self.label_factory: Callable[..., object] = _pyglet_label
        self._labels: Optional[List[object]] = None

    @property
    def labels(self) -> Tuple[object, ...]:
        """The labels built so far; empty until the first draw."""
        return tuple(self._labels or ())

    def _build(self) -> List[object]:
        return [
            self.label_factory(
                text=self.title, x=float(self.x), y=float(self.top),
                anchor_y="top", bold=True, font_size=14,
            ),
            self.label_factory(
                text=self.text, x=float(self.x), y=float(self.top) - float(self.line_height),
                anchor_y="top", font_size=12,
            ),
        ]

    def draw(self) -> None:
        if self._labels is None:
            self._labels = self._build()
        for label in self._labels:
            label.draw()

    def shutdown(self) -> None:
        """Release the labels; the next draw builds them again."""
        for label in self._labels or ():
            delete = getattr(label, "delete", None)
            if delete is not None:
                delete()
        self._labels = None