"""Reading and writing project files.

A project file holds one line per scene::

    #NAME SKYBOX<map|null> CAMERAS+name|params|scripts... LIGHTINGS+...
    BASE3DGAMEOBJECT+name|params|KIND|model|scripts...

where ``params`` is ``x y z angleX axisX angleY axisY scale`` and the model
of a simple object is ``SHAPE(args),MATERIAL(a$a$a$d$d$d$s$s$s$diffuse$normal$shininess)``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, Mapping

from uuengine.entities import BaseEngineObject, Camera, GameObject, Lighting, SkyBox
from uuengine.folders import ModelFolder, ScriptFolder, TextureFolder
from uuengine.linalg import Quaternion, Vector3
from uuengine.material import NO_MAP, Material
from uuengine.modelbuilder import create_cube, create_skybox, create_sphere
from uuengine.modelloader import ModelLoader, ObjModelFactory
from uuengine.models import Model, ModelType, SimpleModel
from uuengine.projectinfo import MODELS_DIR, SCRIPTS_DIR, TEXTURES_DIR, ProjectInfo
from uuengine.scene import Scene

PROJECT_SUFFIX = ".uupj"
SKYBOX_NAME = "Skybox"
SKYBOX_SIZE = 100.0
CUSTOM_MODEL = "CUSTOM_MODEL"
SIMPLE_MODEL = "SIMPLE_MODEL"

_SCENE_PATTERN = re.compile(
    r"#(.+) SKYBOX(.*) CAMERAS(.*) LIGHTINGS(.*) BASE3DGAMEOBJECT(.*)"
)
_SHAPE_PATTERN = re.compile(r"(\w*)\((.*?)\)")
_BASE_PARAM_COUNT = 12
_MATERIAL_PARAM_COUNT = 12


def _num(value: float) -> str:
    return format(value, "g")


def _floats(texts: list[str]) -> list[float]:
    try:
        return [float(text) for text in texts]
    except ValueError:
        raise ValueError(f"expected numbers, got {texts!r}") from None


def _entries(section: str) -> Iterator[str]:
    """Entries of a section; text before the first '+' is ignored."""
    return (entry for entry in section.split("+")[1:] if entry)


class ProjectProcessor:
    """Creates, saves, loads and closes project files."""

    def __init__(
        self,
        project: ProjectInfo | None = None,
        models: ModelFolder | None = None,
        scripts: ScriptFolder | None = None,
        textures: TextureFolder | None = None,
    ) -> None:
        self.project = project if project is not None else ProjectInfo()
        self.models = models if models is not None else ModelFolder()
        self.scripts = scripts if scripts is not None else ScriptFolder()
        self.textures = textures if textures is not None else TextureFolder()
        self._loader = ModelLoader(ObjModelFactory())

    # project files

    def create_project(self, path: str, name: str) -> Path:
        """Create the project folder with its asset folders and an empty project file."""
        folder = Path(path) / name
        folder.mkdir(exist_ok=True)
        for subdir in (MODELS_DIR, TEXTURES_DIR, SCRIPTS_DIR):
            (folder / subdir).mkdir(exist_ok=True)

        self.project.name = name
        self.project.folder = f"{path}/{name}"
        self.project.path = f"{path}/{name}/{name}{PROJECT_SUFFIX}"
        project_file = Path(self.project.path)
        project_file.write_text("", encoding="utf-8")
        return project_file

    def _adopt_path(self, path: str) -> None:
        parts = path.split("/")
        self.project.path = path
        self.project.folder = "/".join(parts[:-1])
        self.project.name = parts[-1].split(".")[0]

    def save_project(self, scenes: Mapping[str, Scene], path: str = "") -> None:
        """Write all scenes; a non-empty ``path`` becomes the project file."""
        if path:
            self._adopt_path(path)
        if not self.project.path:
            raise ValueError("no project file to save to")
        text = "\n".join(self.dump_scene(name, scene) for name, scene in scenes.items())
        with open(self.project.path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)

    def load_project(self, path: str) -> dict[str, Scene]:
        """Read the scenes of a project file; reading stops at the first empty line."""
        self._adopt_path(path)
        with open(path, encoding="utf-8") as handle:
            text = handle.read()

        scenes: dict[str, Scene] = {}
        for line in text.split("\n"):
            if not line:
                break
            name, scene = self.parse_scene(line)
            scenes[name] = scene
        return scenes

    def close_project(self, scenes: Mapping[str, Scene]) -> None:
        """Save the open project, if any, and forget it."""
        try:
            if self.project.path:
                self.save_project(scenes)
        finally:
            self.project.reset()

    # writing

    def dump_scene(self, name: str, scene: Scene) -> str:
        """One line of the project file describing ``scene``."""
        return (
            "#" + name
            + self._dump_skybox(scene.skybox)
            + self._dump_section(" CAMERAS", scene.cameras)
            + self._dump_section(" LIGHTINGS", scene.lightings)
            + self._dump_game_objects(scene.game_objects)
        )

    def _dump_scripts(self, name: str) -> str:
        return " ".join(self.scripts.scripts(name))

    def _dump_skybox(self, skybox: SkyBox | None) -> str:
        if skybox is None:
            return " SKYBOX" + NO_MAP
        material = self._material_of(skybox.model)
        return " SKYBOX" + material.diffuse_map_path + self._dump_scripts(SKYBOX_NAME)

    def _dump_section(self, header: str, objects: Mapping[str, BaseEngineObject]) -> str:
        return header + "".join(
            "+" + name + "|" + self._dump_base_params(obj) + self._dump_scripts(name)
            for name, obj in objects.items()
        )

    def _dump_game_objects(self, game_objects: Mapping[str, GameObject]) -> str:
        return " BASE3DGAMEOBJECT" + "".join(
            "+" + name + "|"
            + self._dump_base_params(obj)
            + self._dump_model(name, obj)
            + self._dump_scripts(name)
            for name, obj in game_objects.items()
        )

    @staticmethod
    def _dump_base_params(obj: BaseEngineObject) -> str:
        axis_x, angle_x = obj.rotation_x.axis_and_angle()
        axis_y, angle_y = obj.rotation_y.axis_and_angle()
        values = [*obj.coordinates, angle_x, *axis_x, angle_y, *axis_y, obj.scale]
        return " ".join(_num(value) for value in values) + "|"

    @staticmethod
    def _material_of(model: Model | None) -> Material:
        if not isinstance(model, SimpleModel) or model.particle is None:
            raise ValueError("object has no simple model to describe")
        if model.particle.material is None:
            raise ValueError("model has no material")
        return model.particle.material

    def _dump_model(self, name: str, obj: GameObject) -> str:
        if obj.model is None:
            raise ValueError(f"game object '{name}' has no model")
        description = self.models.model(name)
        if obj.model.model_type is ModelType.CUSTOM:
            return f"{CUSTOM_MODEL}|{description}|"
        material = self._dump_material(self._material_of(obj.model))
        return f"{SIMPLE_MODEL}|{description},MATERIAL({material})|"

    @staticmethod
    def _dump_material(material: Material) -> str:
        colors = [*material.ambience_color, *material.diffuse_color, *material.specular_color]
        fields = [_num(value) for value in colors]
        fields += [material.diffuse_map_path, material.normal_map_path, _num(material.shininess)]
        return "$".join(fields)

    # reading

    def parse_scene(self, line: str) -> tuple[str, Scene]:
        """Name and scene described by one line of a project file."""
        match = _SCENE_PATTERN.search(line)
        if match is None:
            raise ValueError(f"malformed scene line: {line!r}")
        name, skybox, cameras, lightings, objects = match.groups()
        game_objects = self._parse_game_objects(objects)
        lighting_objects = self._parse_section(lightings, Lighting)
        camera_objects = self._parse_section(cameras, Camera)
        return name, Scene(game_objects, lighting_objects, camera_objects,
                           self._parse_skybox(skybox))

    @staticmethod
    def _parse_skybox(text: str) -> SkyBox | None:
        if text in ("", NO_MAP):
            return None
        return SkyBox(create_skybox(SKYBOX_SIZE, text))

    def _parse_section(self, section: str, kind: type) -> dict:
        objects = {}
        for entry in _entries(section):
            params = entry.split("|")
            if len(params) < 3:
                raise ValueError(f"malformed entry: {entry!r}")
            obj = kind()
            self._apply_base_params(params[1], obj)
            objects[params[0]] = obj
            self._load_scripts(params[0], params[2])
        return objects

    def _parse_game_objects(self, section: str) -> dict[str, GameObject]:
        objects: dict[str, GameObject] = {}
        for entry in _entries(section):
            params = entry.split("|")
            if len(params) < 5:
                raise ValueError(f"malformed game object entry: {entry!r}")
            name = params[0]
            obj = GameObject(self._parse_model(name, params[2], params[3]))
            self._apply_base_params(params[1], obj)
            objects[name] = obj
            self._load_scripts(name, params[4])
        return objects

    def _parse_model(self, name: str, kind: str, description: str) -> Model:
        if kind == CUSTOM_MODEL:
            self.models.append(name, description)
            return self._loader.create_model(f"{self.project.folder}/{MODELS_DIR}/{description}")

        matches = _SHAPE_PATTERN.finditer(description)
        shape = next(matches, None)
        if shape is None:
            raise ValueError(f"malformed model description: {description!r}")
        self.models.append(name, shape.group(0))
        model = self._build_shape(shape.group(1), shape.group(2).split(" "))

        material = next(matches, None)
        if material is None:
            raise ValueError(f"model description without material: {description!r}")
        particle = model.particle
        if particle is None:
            raise ValueError(f"model '{shape.group(1)}' has no mesh")
        particle.set_material(self._parse_material(name, material.group(2)))
        return model

    @staticmethod
    def _build_shape(shape: str, args: list[str]) -> SimpleModel:
        try:
            if shape == "CUBE":
                width, height, depth = _floats(args[:3])
                if len(args) < 3:
                    raise IndexError
                return create_cube(width, height, depth)
            if shape == "SPHERE":
                radius = float(args[0])
                return create_sphere(radius, int(args[1]), int(args[2]))
        except (IndexError, ValueError):
            raise ValueError(f"bad parameters for {shape}: {args!r}") from None
        raise ValueError(f"unsupported shape: {shape!r}")

    def _parse_material(self, name: str, text: str) -> Material:
        params = text.split("$")
        if len(params) < _MATERIAL_PARAM_COUNT:
            raise ValueError(f"malformed material: {text!r}")
        colors = _floats(params[:9])
        material = Material(
            ambience_color=Vector3(*colors[0:3]),
            diffuse_color=Vector3(*colors[3:6]),
            specular_color=Vector3(*colors[6:9]),
        )
        if params[9] != NO_MAP:
            self.textures.append(name, params[9])
            material.set_diffuse_map(params[9])
        if params[10] != NO_MAP:
            self.textures.append(name, params[10])
            material.set_normal_map(params[10])
        material.shininess = _floats([params[11]])[0]
        return material

    @staticmethod
    def _apply_base_params(text: str, obj: BaseEngineObject) -> None:
        params = text.split(" ")
        if len(params) < _BASE_PARAM_COUNT:
            raise ValueError(f"malformed object parameters: {text!r}")
        values = _floats(params[:_BASE_PARAM_COUNT])
        obj.coordinates = Vector3(*values[0:3])
        obj.rotate_x(Quaternion.from_axis_and_angle(Vector3(*values[4:7]), values[3]))
        obj.rotate_y(Quaternion.from_axis_and_angle(Vector3(*values[8:11]), values[7]))
        obj.scale = values[11]

    def _load_scripts(self, name: str, scripts: str) -> None:
        for script in scripts.split(" "):
            if script:
                self.scripts.add_script(name, script)