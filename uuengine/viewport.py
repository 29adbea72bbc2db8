"""Editor viewport state: projection, the editor camera and light matrices."""

from __future__ import annotations

from uuengine.entities import Camera, Lighting
from uuengine.linalg import Matrix4, Quaternion, Vector3
from uuengine.scene import Scene

FIELD_OF_VIEW = 45.0
NEAR_PLANE = 0.01
FAR_PLANE = 1000.0

SHADOW_MAP_SIZE = 1024
LIGHT_VOLUME = 40.0
LIGHT_ROTATE_X = 40.0
LIGHT_ROTATE_Y = 50.0

_X_AXIS = Vector3(1.0, 0.0, 0.0)
_Y_AXIS = Vector3(0.0, 1.0, 0.0)


def _ortho(left: float, right: float, bottom: float, top: float,
           near: float, far: float) -> Matrix4:
    width, height, depth = right - left, top - bottom, far - near
    return Matrix4((
        2.0 / width, 0.0, 0.0, -(left + right) / width,
        0.0, 2.0 / height, 0.0, -(top + bottom) / height,
        0.0, 0.0, -2.0 / depth, -(near + far) / depth,
        0.0, 0.0, 0.0, 1.0,
    ))


def _rotation(axis: Vector3, angle: float) -> Quaternion:
    return Quaternion.from_axis_and_angle(axis, angle)


class Viewport:
    """What the renderer needs to know to draw the current scene."""

    def __init__(self) -> None:
        self.engine_camera = Camera()
        self.engine_lighting = Lighting()
        self.current_scene: Scene | None = None
        self.game_running = False
        self.width = 0
        self.height = 0
        self.projection_matrix = Matrix4.identity()
        self.shadow_map_size = SHADOW_MAP_SIZE

        volume = LIGHT_VOLUME
        self.light_projection_matrix = _ortho(-volume, volume, -volume, volume,
                                              -volume, volume)
        self.shadow_light_matrix = (Matrix4.identity()
                                    .rotated(_rotation(_X_AXIS, LIGHT_ROTATE_X))
                                    .rotated(_rotation(_Y_AXIS, LIGHT_ROTATE_Y)))
        self.light_matrix = (Matrix4.identity()
                             .rotated(_rotation(_Y_AXIS, -LIGHT_ROTATE_Y))
                             .rotated(_rotation(_X_AXIS, -LIGHT_ROTATE_X)))

    def resize(self, width: int, height: int) -> Matrix4:
        """Adopt a new window size and rebuild the perspective projection."""
        if height == 0:
            raise ValueError("viewport height must not be zero")
        self.width = width
        self.height = height
        aspect = width / float(height)
        self.projection_matrix = Matrix4.identity().perspective(
            FIELD_OF_VIEW, aspect, NEAR_PLANE, FAR_PLANE)
        return self.projection_matrix

    def camera_view_matrix(self) -> Matrix4:
        """View matrix of the editor camera."""
        return self.engine_camera.model_matrix()

    def rotate_camera(self, rotation_x: Quaternion, rotation_y: Quaternion) -> None:
        """Turn the editor camera by the given pitch and yaw rotations."""
        self.engine_camera.rotate_x(rotation_x)
        self.engine_camera.rotate_y(rotation_y)

    def translate_camera(self, translation: Vector3) -> None:
        """Move the editor camera."""
        self.engine_camera.translate(translation)

    def set_current_scene(self, scene: Scene | None) -> None:
        self.current_scene = scene

    def toggle_game_status(self) -> bool:
        """Switch between editing and playing; returns the new state."""
        self.game_running = not self.game_running
        return self.game_running

    def active_camera(self) -> Camera | None:
        """The editor camera while editing, the scene's camera while playing."""
        if not self.game_running:
            return self.engine_camera
        if self.current_scene is None:
            raise RuntimeError("the game is running without a scene")
        return self.current_scene.current_camera