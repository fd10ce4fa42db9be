"""A free-flying first-person camera driven by keyboard and mouse state."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

Vec3 = tuple[float, float, float]
Matrix4 = tuple[tuple[float, float, float, float], ...]


class Key(Enum):
    """Keys the camera reacts to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    R = "r"


@dataclass
class Controls:
    """Snapshot of input state: pressed keys, mouse position and cursor mode."""

    pressed: set[Key] = field(default_factory=set)
    mouse_position: tuple[int, int] = (0, 0)
    cursor_visible: bool = True
    window_size: tuple[int, int] = (1280, 720)

    def is_pressed(self, key: Key) -> bool:
        return key in self.pressed

    def center_mouse_position(self) -> None:
        """Warp the mouse to the middle of the window."""
        width, height = self.window_size
        self.mouse_position = (width // 2, height // 2)


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _scale(a: Sequence[float], s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(a: Sequence[float]) -> Vec3:
    length = math.sqrt(_dot(a, a))
    return (a[0] / length, a[1] / length, a[2] / length)


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> Matrix4:
    """Right-handed view matrix, as four rows, looking from eye toward center."""
    f = _normalize(_sub(center, eye))
    s = _normalize(_cross(f, up))
    u = _cross(s, f)
    return (
        (s[0], s[1], s[2], -_dot(s, eye)),
        (u[0], u[1], u[2], -_dot(u, eye)),
        (-f[0], -f[1], -f[2], _dot(f, eye)),
        (0.0, 0.0, 0.0, 1.0),
    )


class Camera:
    """Position and orientation, moved by WASD and turned by the mouse."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        up: Sequence[float] = (0.0, 1.0, 0.0),
        yaw: float = -90.0,
        pitch: float = 0.0,
    ) -> None:
        self.position: Vec3 = (float(position[0]), float(position[1]), float(position[2]))
        self.up: Vec3 = (float(up[0]), float(up[1]), float(up[2]))
        self.front: Vec3 = (0.0, 0.0, -1.0)
        self.right: Vec3 = (1.0, 0.0, 0.0)
        self.yaw = yaw
        self.pitch = pitch
        self.speed = 40.0
        self.sensitivity = 8.0
        self.wireframe_mode = False
        self._first_mouse = True
        self._mouse_last = (0.0, 0.0)
        self._update_vectors()

    def update(self, delta_time: float, controls: Controls) -> None:
        """Apply one frame of keyboard movement and mouse look."""
        self._process_keyboard(delta_time, controls)
        self._process_mouse(controls)

    def view_matrix(self) -> Matrix4:
        return look_at(self.position, _add(self.position, self.front), self.up)

    def _update_vectors(self) -> None:
        yaw, pitch = math.radians(self.yaw), math.radians(self.pitch)
        front = (
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )
        self.front = _normalize(front)
        self.right = _normalize(_cross(self.front, (0.0, 1.0, 0.0)))
        self.up = _normalize(_cross(self.right, self.front))

    def _process_keyboard(self, delta_time: float, controls: Controls) -> None:
        if controls.is_pressed(Key.R):
            self.wireframe_mode = not self.wireframe_mode

        velocity = self.speed * delta_time
        if controls.is_pressed(Key.W):
            self.position = _add(self.position, _scale(self.front, velocity))
        if controls.is_pressed(Key.S):
            self.position = _sub(self.position, _scale(self.front, velocity))
        if controls.is_pressed(Key.A):
            self.position = _sub(self.position, _scale(self.right, velocity))
        if controls.is_pressed(Key.D):
            self.position = _add(self.position, _scale(self.right, velocity))

    def _process_mouse(self, controls: Controls) -> None:
        if controls.cursor_visible:
            return

        xpos, ypos = (float(v) for v in controls.mouse_position)
        if self._first_mouse:
            self._mouse_last = (xpos, ypos)
            self._first_mouse = False

        xoffset = xpos - self._mouse_last[0]
        yoffset = self._mouse_last[1] - ypos

        self.yaw += xoffset * self.sensitivity * 0.01
        self.pitch += yoffset * self.sensitivity * 0.01
        self.pitch = min(max(self.pitch, -89.0), 89.0)

        controls.center_mouse_position()
        self._mouse_last = tuple(float(v) for v in controls.mouse_position)  # type: ignore[assignment]

        self._update_vectors()