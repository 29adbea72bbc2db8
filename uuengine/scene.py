"""Scenes and the folder of scenes that makes up a project."""

from __future__ import annotations

from uuengine.entities import Camera, GameObject, Lighting, SkyBox
from uuengine.models import Model, SimpleModel

DEFAULT_CAMERA = "DefaultCamera"
DEFAULT_LIGHT = "DefaultLight"


class Scene:
    """Named game objects, cameras and lights, plus an optional skybox."""

    def __init__(
        self,
        game_objects: dict[str, GameObject] | None = None,
        lightings: dict[str, Lighting] | None = None,
        cameras: dict[str, Camera] | None = None,
        skybox: SkyBox | None = None,
    ) -> None:
        self.game_objects: dict[str, GameObject] = dict(game_objects or {})
        self.lightings: dict[str, Lighting] = dict(lightings or {})
        self.cameras: dict[str, Camera] = dict(cameras or {})
        self.skybox = skybox
        self.current_camera: Camera | None = None

    def add_game_object(self, name: str, model: Model | None) -> bool:
        """Add a game object; False if the name is already taken."""
        if name in self.game_objects:
            return False
        self.game_objects[name] = GameObject(model)
        return True

    def add_lighting(self, name: str) -> bool:
        """Add a light; False if the name is already taken."""
        if name in self.lightings:
            return False
        self.lightings[name] = Lighting()
        return True

    def add_camera(self, name: str) -> bool:
        """Add a camera; False if the name is already taken."""
        if name in self.cameras:
            return False
        self.cameras[name] = Camera()
        return True

    def delete_game_object(self, name: str) -> bool:
        """Remove a game object; False if there was none."""
        return self.game_objects.pop(name, None) is not None

    def delete_lighting(self, name: str) -> bool:
        """Remove a light; False if there was none."""
        return self.lightings.pop(name, None) is not None

    def delete_camera(self, name: str) -> bool:
        """Remove a camera; False if there was none."""
        camera = self.cameras.pop(name, None)
        if camera is None:
            return False
        if camera is self.current_camera:
            self.current_camera = None
        return True

    def set_skybox(self, model: SimpleModel | None) -> SkyBox:
        """Replace the skybox with one built around ``model``."""
        self.skybox = SkyBox(model)
        return self.skybox

    def set_current_camera(self, name: str) -> None:
        """Make the named camera current; an unknown name clears it."""
        self.current_camera = self.cameras.get(name)

    def game_object(self, name: str) -> GameObject | None:
        return self.game_objects.get(name)

    def camera(self, name: str) -> Camera | None:
        return self.cameras.get(name)

    def lighting(self, name: str) -> Lighting | None:
        return self.lightings.get(name)


class SceneFolder:
    """All scenes of a project and the one currently edited."""

    def __init__(self) -> None:
        self.scenes: dict[str, Scene] = {}
        self.current_scene: Scene | None = None

    def create_scene(self, name: str) -> bool:
        """Create a scene with a default camera and light and make it current."""
        if name in self.scenes:
            return False
        scene = Scene()
        scene.add_camera(DEFAULT_CAMERA)
        scene.add_lighting(DEFAULT_LIGHT)
        scene.set_current_camera(DEFAULT_CAMERA)
        self.scenes[name] = scene
        self.current_scene = scene
        return True

    def set_current_scene(self, name: str) -> Scene | None:
        """Switch to the named scene; an unknown name leaves no current scene."""
        self.current_scene = self.scenes.get(name)
        return self.current_scene

    def set_scenes(self, scenes: dict[str, Scene]) -> None:
        """Replace all scenes; the first one becomes current."""
        self.clear()
        self.scenes = dict(scenes)
        if self.scenes:
            self.current_scene = next(iter(self.scenes.values()))

    def clear(self) -> None:
        """Drop every scene."""
        if self.scenes:
            self.scenes = {}
            self.current_scene = None