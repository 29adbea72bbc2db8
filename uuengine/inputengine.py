"""Turning mouse and wheel input into camera motion and world positions."""

from __future__ import annotations

from enum import Enum

from uuengine.linalg import Matrix4, Quaternion, Vector2, Vector3, Vector4

_WHEEL_STEP = 0.2
_X_AXIS = Vector3(1.0, 0.0, 0.0)
_Y_AXIS = Vector3(0.0, 1.0, 0.0)
_GROUND_NORMAL = Vector3(0.0, 1.0, 0.0)


class InputMode(Enum):
    CAMERA_MOVE = "camera_move"
    MOVE = "move"
    ROTATE = "rotate"
    CREATE = "create"
    EDIT = "edit"


class InputEngine:
    """Tracks the mouse and derives rotation and zoom deltas from it."""

    def __init__(self) -> None:
        self.mouse = Vector2()
        self.rotation_x = Quaternion()
        self.rotation_y = Quaternion()
        self.translation = Vector3()
        self.screen_width = 0
        self.screen_height = 0

    def set_screen_size(self, width: int, height: int) -> None:
        self.screen_width = width
        self.screen_height = height

    def mouse_press(self, x: float, y: float) -> None:
        """Remember where the mouse was pressed."""
        self.mouse = Vector2(x, y)

    def mouse_move(self, x: float, y: float, right_button: bool = False) -> None:
        """Turn mouse motion into rotations; ignored for the right button."""
        if right_button:
            return
        position = Vector2(x, y)
        delta = position - self.mouse
        self.mouse = position
        self.rotation_x = Quaternion.from_axis_and_angle(_X_AXIS, delta.y / 2.0)
        self.rotation_y = Quaternion.from_axis_and_angle(_Y_AXIS, delta.x / 2.0)

    def wheel(self, delta: float) -> None:
        """Step towards or away from the scene; a zero delta changes nothing."""
        if delta > 0:
            self.translation = Vector3(0.0, 0.0, _WHEEL_STEP)
        elif delta < 0:
            self.translation = Vector3(0.0, 0.0, -_WHEEL_STEP)

    def world_coordinates(self, projection: Matrix4, view: Matrix4) -> Vector3:
        """Point on the ground plane (y = 0) under the last mouse position."""
        if self.screen_width == 0 or self.screen_height == 0:
            raise ValueError("screen size is not set")

        ndc = Vector4(2.0 * self.mouse.x / self.screen_width - 1.0,
                      -2.0 * self.mouse.y / self.screen_height + 1.0,
                      -1.0, 1.0)
        eye = projection.inverted().transform(ndc)
        eye_direction = Vector4(eye.x, eye.y, -1.0, 0.0)
        inverse_view = view.inverted()
        direction = inverse_view.transform(eye_direction).to_vector3().normalized()
        camera_position = inverse_view.map(Vector3())

        denominator = direction.dot(_GROUND_NORMAL)
        if abs(denominator) < 1e-12:
            raise ValueError("view ray is parallel to the ground plane")
        t = -camera_position.dot(_GROUND_NORMAL) / denominator
        return camera_position + direction * t