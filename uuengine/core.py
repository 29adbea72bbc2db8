"""The engine facade tying scenes, folders, input, viewport and projects together."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from uuengine.entities import GameObject
from uuengine.folders import ModelFolder, ScriptFolder, TextureFolder
from uuengine.inputengine import InputEngine
from uuengine.linalg import Quaternion, Vector3
from uuengine.modelbuilder import create_cube, create_skybox, create_sphere
from uuengine.modelloader import ModelLoader, ObjModelFactory
from uuengine.models import SimpleModel
from uuengine.projectinfo import TEXTURES_DIR, ProjectInfo
from uuengine.projectprocessor import SKYBOX_NAME, ProjectProcessor
from uuengine.scene import Scene, SceneFolder
from uuengine.viewport import Viewport

Listener = Callable[["EngineEvent", Any], None]


class EngineEvent(Enum):
    """Notifications sent to subscribers of the engine."""

    UPDATE_GRAPHICS = "update_graphics"
    DISABLED_STATE = "disabled_state"


def _num(value: float) -> str:
    return format(value, "g")


def _basename(path: str) -> str:
    return path.split("/")[-1]


class EngineCore:
    """Editing operations on the open project and its current scene."""

    def __init__(self) -> None:
        self.project = ProjectInfo()
        self.model_folder = ModelFolder()
        self.script_folder = ScriptFolder()
        self.texture_folder = TextureFolder()
        self.scene_folder = SceneFolder()
        self.processor = ProjectProcessor(
            self.project, self.model_folder, self.script_folder, self.texture_folder)
        self.viewport = Viewport()
        self.input = InputEngine()
        self.game_running = False
        self._listeners: list[Listener] = []

    # notifications

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """Register ``callback(event, payload)``; returns a function that unregisters it."""
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _emit(self, event: EngineEvent, payload: Any = None) -> None:
        for listener in list(self._listeners):
            listener(event, payload)

    def _update(self) -> None:
        self._emit(EngineEvent.UPDATE_GRAPHICS)

    # scene access

    @property
    def current_scene(self) -> Scene | None:
        return self.scene_folder.current_scene

    def _scene(self) -> Scene:
        scene = self.scene_folder.current_scene
        if scene is None:
            raise RuntimeError("no scene is open")
        return scene

    def _object(self, name: str) -> GameObject:
        obj = self._scene().game_object(name)
        if obj is None:
            raise KeyError(name)
        return obj

    # viewport

    def resize_scene(self, width: int, height: int) -> None:
        self.viewport.resize(width, height)
        self.input.set_screen_size(width, height)

    def create_scene(self, name: str) -> bool:
        created = self.scene_folder.create_scene(name)
        self.viewport.set_current_scene(self.current_scene)
        return created

    def select_current_scene(self, name: str) -> Scene | None:
        scene = self.scene_folder.set_current_scene(name)
        self.viewport.set_current_scene(scene)
        self._update()
        return scene

    # object editing

    def translate_object(self, name: str, translation: Vector3) -> None:
        """Move the object so that it ends up at ``translation``."""
        obj = self._object(name)
        obj.translate(translation - obj.coordinates)

    def rotate_x_object(self, name: str, rotation: Quaternion) -> None:
        obj = self._object(name)
        obj.rotate_x(rotation - obj.rotation_x)

    def rotate_y_object(self, name: str, rotation: Quaternion) -> None:
        obj = self._object(name)
        obj.rotate_y(rotation - obj.rotation_y)

    def scale_object(self, name: str, scale: float) -> None:
        """Reduce the object's scale by ``scale``."""
        obj = self._object(name)
        obj.scale = obj.scale - scale

    def delete_object(self, name: str) -> bool:
        deleted = self._scene().delete_game_object(name)
        self._update()
        return deleted

    def _simple_particle(self, name: str):
        model = self._object(name).model
        if not isinstance(model, SimpleModel) or model.particle is None:
            return None
        return model.particle

    def set_normal_texture(self, name: str, path: str) -> None:
        """Use an image as normal map of a simple model; custom models are left alone."""
        particle = self._simple_particle(name)
        if particle is None:
            return
        particle.set_normal_map(path)
        self.load_texture(name, path)

    def set_diffuse_texture(self, name: str, path: str) -> None:
        """Use an image as diffuse map of a simple model; custom models are left alone."""
        particle = self._simple_particle(name)
        if particle is None:
            return
        particle.set_diffuse_map(path)
        self.load_texture(name, path)

    # object creation

    def create_obj_model(self, name: str, path: str) -> bool:
        """Load an OBJ file as a new game object; False if the name is taken."""
        loader = ModelLoader(ObjModelFactory(self.project))
        if not self._scene().add_game_object(name, loader.create_model(path)):
            return False
        self.model_folder.append(name, _basename(path))
        self.place_object_at_mouse(name)
        return True

    def _mouse_world_position(self) -> Vector3:
        return self.input.world_coordinates(self.viewport.projection_matrix,
                                            self.viewport.camera_view_matrix())

    def create_camera(self, name: str) -> None:
        scene = self._scene()
        scene.add_camera(name)
        scene.cameras[name].coordinates = self._mouse_world_position()
        self._update()

    def create_lighting(self, name: str) -> None:
        scene = self._scene()
        scene.add_lighting(name)
        scene.lightings[name].coordinates = self._mouse_world_position()
        self._update()

    def set_skybox(self, size: float, path: str) -> None:
        self._scene().set_skybox(create_skybox(size, path))
        self.load_texture(SKYBOX_NAME, path)
        self._update()

    def create_cube(self, name: str, width: float = 1.0, height: float = 1.0,
                    depth: float = 1.0) -> bool:
        if not self._scene().add_game_object(name, create_cube(width, height, depth)):
            return False
        self.model_folder.replace(name, f"CUBE({_num(width)} {_num(height)} {_num(depth)})")
        self.place_object_at_mouse(name)
        return True

    def create_sphere(self, name: str, radius: float = 1.0, rings: int = 20,
                      sectors: int = 20) -> bool:
        if not self._scene().add_game_object(name, create_sphere(radius, rings, sectors)):
            return False
        self.model_folder.replace(name, f"SPHERE({_num(radius)} {rings} {sectors})")
        self.place_object_at_mouse(name)
        return True

    def change_cube(self, name: str, width: float, height: float, depth: float) -> None:
        self._object(name).model = create_cube(width, height, depth)
        self.model_folder.replace(name, f"CUBE({_num(width)} {_num(height)} {_num(depth)})")
        self._update()

    def change_sphere(self, name: str, radius: float = 1.0, rings: int = 20,
                      sectors: int = 20) -> None:
        self._object(name).model = create_sphere(radius, rings, sectors)
        self.model_folder.replace(name, f"SPHERE({_num(radius)} {rings} {sectors})")
        self._update()

    # input

    def mouse_press(self, x: float, y: float) -> None:
        self.input.mouse_press(x, y)
        self._update()

    def mouse_move(self, x: float, y: float, right_button: bool = False) -> None:
        self.input.mouse_move(x, y, right_button)
        self.viewport.rotate_camera(self.input.rotation_x, self.input.rotation_y)
        self._update()

    def wheel(self, delta: float) -> None:
        self.input.wheel(delta)
        self.viewport.translate_camera(self.input.translation)
        self._update()

    def place_object_at_mouse(self, name: str) -> None:
        """Put the object where the mouse ray meets the ground plane."""
        self._object(name).coordinates = self._mouse_world_position()

    def toggle_game_status(self) -> bool:
        """Start playing (saving the project first) or stop and restore the saved state."""
        self.game_running = not self.game_running
        if self.game_running:
            self.processor.save_project(self.scene_folder.scenes)
        else:
            self.scene_folder.set_scenes(self.processor.load_project(self.project.path))
            self.viewport.set_current_scene(self.current_scene)
        return self.game_running

    # projects

    def create_project(self, path: str, name: str) -> None:
        self.processor.create_project(path, name)
        self.scene_folder.create_scene(name)
        self.viewport.set_current_scene(self.current_scene)
        self._emit(EngineEvent.DISABLED_STATE, False)

    def load_project(self, path: str) -> None:
        self.scene_folder.set_scenes(self.processor.load_project(path))
        self.viewport.set_current_scene(self.current_scene)
        self._emit(EngineEvent.DISABLED_STATE, False)

    def save_project(self, path: str = "") -> None:
        """Save to the open project file, or to ``path`` if given."""
        scenes = self.scene_folder.scenes
        if not path and self.project.path and scenes:
            self.processor.save_project(scenes)
        else:
            self.processor.save_project(scenes, path)

    def close_project(self) -> None:
        self.processor.close_project(self.scene_folder.scenes)
        self.scene_folder.clear()
        self._update()
        self._emit(EngineEvent.DISABLED_STATE, True)

    # folders

    def load_model(self, name: str, path: str) -> None:
        self.model_folder.replace(name, path)

    def load_texture(self, name: str, path: str) -> None:
        self.texture_folder.replace(
            name, f"{self.project.folder}/{TEXTURES_DIR}/{_basename(path)}")
        self.project.copy_to_textures(path)

    def load_script(self, name: str, path: str) -> None:
        self.script_folder.add_script(name, _basename(path))
        self.project.copy_to_scripts(path)

    def model_description(self, name: str) -> str:
        return self.model_folder.model(name)

    def scripts(self, name: str) -> list[str]:
        return self.script_folder.scripts(name)