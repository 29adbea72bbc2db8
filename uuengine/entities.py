"""Objects that live in a scene: game objects, cameras, lights, skyboxes."""

from __future__ import annotations

from enum import Enum

from uuengine.linalg import Matrix4, Quaternion, Vector3
from uuengine.models import Model, SimpleModel


class ObjectType(Enum):
    GAME_OBJECT = "game_object"
    CAMERA = "camera"
    LIGHTING = "lighting"


class BaseEngineObject:
    """Position, rotation and scale shared by all scene objects."""

    def __init__(self, object_type: ObjectType) -> None:
        self.object_type = object_type
        self.coordinates = Vector3()
        self.scale = 1.0
        self._rotation = Quaternion()
        self._rotation_x = Quaternion()
        self._rotation_y = Quaternion()
        self._locked = False

    @property
    def is_locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        self._locked = False

    @property
    def rotation(self) -> Quaternion:
        return self._rotation

    @property
    def rotation_x(self) -> Quaternion:
        return self._rotation_x

    @property
    def rotation_y(self) -> Quaternion:
        return self._rotation_y

    def translate(self, translation: Vector3) -> None:
        """Move relative to the current position."""
        self.coordinates = self.coordinates + translation

    def rotate(self, rotation: Quaternion) -> None:
        """Compose ``rotation`` onto the current overall rotation."""
        self._rotation = self._rotation * rotation

    def rotate_x(self, rotation: Quaternion) -> None:
        self._rotation_x = rotation * self._rotation_x
        self._rotation = self._rotation_x * self._rotation_y

    def rotate_y(self, rotation: Quaternion) -> None:
        self._rotation_y = rotation * self._rotation_y
        self._rotation = self._rotation_x * self._rotation_y

    def grow(self, amount: float) -> None:
        """Change the scale relative to its current value."""
        self.scale += amount

    def model_matrix(self) -> Matrix4:
        return (Matrix4.identity()
                .translated(self.coordinates)
                .rotated(self._rotation)
                .scaled(self.scale))


class GameObject(BaseEngineObject):
    """A visible object carrying a model."""

    def __init__(self, model: Model | None) -> None:
        super().__init__(ObjectType.GAME_OBJECT)
        self.model = model


class Camera(BaseEngineObject):
    """A viewpoint; its model matrix serves as the view matrix."""

    def __init__(self) -> None:
        super().__init__(ObjectType.CAMERA)


class Lighting(BaseEngineObject):
    """A light source."""

    def __init__(self) -> None:
        super().__init__(ObjectType.LIGHTING)
        self.light_power = 5.0
        self.dynamic = False


class SkyBox(GameObject):
    """The textured box that surrounds a scene."""

    def __init__(self, model: SimpleModel | None) -> None:
        super().__init__(model)