"""
Preview Window

Live playback window. The window's render loop is the driver that advances
the Animator once per frame; each frame the figure is rasterized with
FigureRenderer and shown on a fullscreen textured quad.

Controls:
    SPACE: Pause / resume
    R: Rewind to start
    S: Stop (restores the pre-animation pose)
    P: Play the animation again from the start
    UP / DOWN: Speed up / slow down
"""

from __future__ import annotations

import logging
from typing import Optional

import moderngl
import moderngl_window as mglw
import numpy as np
from PIL import Image

from ..animation.animation import Animation
from ..animation.animation_controller import Animator
from ..config.settings import GL_VERSION, RESIZABLE, SPEED_STEP, WINDOW_SIZE, WINDOW_TITLE
from ..figure.stick_figure import StickFigure
from .figure_renderer import FigureRenderer


logger = logging.getLogger(__name__)


class PreviewWindow(mglw.WindowConfig):
    """moderngl-window app that plays one animation on a stick figure."""

    gl_version = GL_VERSION
    title = WINDOW_TITLE
    window_size = WINDOW_SIZE
    aspect_ratio = WINDOW_SIZE[0] / WINDOW_SIZE[1]
    resizable = RESIZABLE

    # Set by launch() before the window is created
    animation: Optional[Animation] = None
    initial_speed: float = 1.0

    QUAD_VERTEX_SHADER = """
    #version 410

    in vec2 in_position;
    in vec2 in_uv;

    out vec2 uv;

    void main() {
        uv = in_uv;
        gl_Position = vec4(in_position, 0.0, 1.0);
    }
    """

    QUAD_FRAGMENT_SHADER = """
    #version 410

    in vec2 uv;

    uniform sampler2D canvas;

    out vec4 out_color;

    void main() {
        out_color = texture(canvas, uv);
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.figure = StickFigure()
        self.animator = Animator(self.figure)
        self.animator.set_speed(self.initial_speed)
        self.renderer = FigureRenderer(size=WINDOW_SIZE)

        self.program = self.ctx.program(
            vertex_shader=self.QUAD_VERTEX_SHADER,
            fragment_shader=self.QUAD_FRAGMENT_SHADER,
        )
        self.canvas_texture = self.ctx.texture(WINDOW_SIZE, components=4, dtype="u1")
        self.canvas_texture.filter = (moderngl.LINEAR, moderngl.LINEAR)
        self._create_fullscreen_quad()

        if self.animation is not None:
            self.animator.play(self.animation)

    def _create_fullscreen_quad(self) -> None:
        vertices = np.array(
            [
                # x, y, u, v
                -1.0, -1.0, 0.0, 0.0,
                1.0, -1.0, 1.0, 0.0,
                -1.0, 1.0, 0.0, 1.0,
                -1.0, 1.0, 0.0, 1.0,
                1.0, -1.0, 1.0, 0.0,
                1.0, 1.0, 1.0, 1.0,
            ],
            dtype="f4",
        )
        self._quad_vbo = self.ctx.buffer(vertices.tobytes())
        self._quad_vao = self.ctx.vertex_array(
            self.program,
            [(self._quad_vbo, "2f 2f", "in_position", "in_uv")],
        )

    def on_render(self, time, frametime):
        """
        Advance playback and draw the current pose.

        Args:
            time: Total elapsed time (seconds)
            frametime: Time since last frame (seconds)
        """
        self.animator.advance(frametime)

        image = self.renderer.render(self.figure.get_pose())
        # Flip vertically so that UV (0, 0) corresponds to the bottom-left in OpenGL.
        self.canvas_texture.write(image.transpose(Image.FLIP_TOP_BOTTOM).tobytes())

        self.ctx.clear(1.0, 1.0, 1.0)
        self.canvas_texture.use(location=0)
        self.program["canvas"].value = 0
        self._quad_vao.render(moderngl.TRIANGLES)

    def on_key_event(self, key, action, modifiers):
        keys = self.wnd.keys
        if action != keys.ACTION_PRESS:
            return

        if key == keys.SPACE:
            if self.animator.is_playing:
                self.animator.pause()
            else:
                self.animator.resume()
        elif key == keys.R:
            self.animator.reset()
        elif key == keys.S:
            self.animator.stop()
        elif key == keys.P and self.animation is not None:
            self.animator.stop()
            self.animator.play(self.animation)
        elif key == keys.UP:
            self.animator.set_speed(self.animator.get_speed() + SPEED_STEP)
            print(f"[Preview] Speed: {self.animator.get_speed():.2f}x")
        elif key == keys.DOWN:
            self.animator.set_speed(self.animator.get_speed() - SPEED_STEP)
            print(f"[Preview] Speed: {self.animator.get_speed():.2f}x")


def launch(animation: Animation, speed: float = 1.0) -> None:
    """Open the preview window and block until it is closed."""
    PreviewWindow.animation = animation
    PreviewWindow.initial_speed = speed
    logger.info("Opening preview for '%s'", animation.name)
    # Explicit args keep moderngl-window from parsing our own command line
    mglw.run_window_config(PreviewWindow, args=["--vsync", "true"])
