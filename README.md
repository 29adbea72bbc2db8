# uuengine

The editing core of a small 3D game engine: scenes and the objects in them,
procedural and loaded meshes, materials, editor camera input, and a plain-text
project file format. It has no dependencies outside the standard library.

## What is in it

- `uuengine.linalg` – `Vector2`, `Vector3`, `Vector4`, `Quaternion` and an
  immutable row-major `Matrix4` (translate, rotate, scale, perspective,
  inverse, `transform`, `map`). Quaternion angles are in degrees.
- `uuengine.material` – `Material`: diffuse, ambience and specular colours,
  shininess and the paths of a diffuse and a normal map (`"null"` when unset).
- `uuengine.models` – `VertexData`, `ModelParticle` (one mesh with one material;
  tangents and bitangents are computed per vertex triple), `SimpleModel`
  (one particle) and `CustomModel` (several particles), tagged by `ModelType`.
- `uuengine.entities` – `BaseEngineObject` with position, separate X and Y
  rotations, scale and `model_matrix()`; `GameObject`, `Camera`, `Lighting`
  and `SkyBox`.
- `uuengine.scene` – `Scene` holds game objects, cameras and lightings by name
  plus an optional skybox; `SceneFolder` holds the scenes of a project. A new
  scene gets a `DefaultCamera` (made current) and a `DefaultLight`.
- `uuengine.folders` – `ModelFolder`, `ScriptFolder` and `TextureFolder` record
  which model description, script file and texture belong to each object name.
- `uuengine.projectinfo` – `ProjectInfo` (name, project file path, folder) with
  atomic copying of assets into the project's `Models/`, `Textures/` and
  `Scripts/` folders, and `can_create_project(path, name)`.
- `uuengine.materiallib` – `MaterialLibrary`, read from a Wavefront `.mtl` file
  (`newmtl`, `Ns`, `Ka`, `Kd`, `Ks`, `map_Kd`, `map_Bump`).
- `uuengine.modelloader` – `ModelLoader` with an `ObjModelFactory` that reads
  Wavefront `.obj` files (`v`, `vt`, `vn`, `f` with `v/vt/vn` triples,
  `mtllib`, `usemtl`). Each `usemtl` after some geometry starts a new particle.
  A missing file gives an empty `CustomModel`.
- `uuengine.modelbuilder` – `create_cube`, `create_sphere` and `create_skybox`.
- `uuengine.inputengine` – `InputEngine` turns mouse drags into pitch and yaw
  rotations, wheel steps into a ±0.2 move along z, and finds the point on the
  ground plane (y = 0) under the mouse.
- `uuengine.viewport` – `Viewport`: window size, perspective projection
  (45°, 0.01–1000), the editor camera and the fixed shadow light matrices.
- `uuengine.projectprocessor` – `ProjectProcessor` creates, saves, loads and
  closes `.uupj` project files, one line per scene.
- `uuengine.core` – `EngineCore`, which ties all of the above together.

## Install

```
pip install .
```

Requires Python 3.10 or later.

## Example

```python
from uuengine.core import EngineCore, EngineEvent

engine = EngineCore()
engine.subscribe(lambda event, payload: print(event, payload))

engine.resize_scene(800, 600)
engine.create_project("/tmp", "Demo")      # /tmp/Demo/{Models,Textures,Scripts}, Demo.uupj
engine.create_cube("Cube1", 1.0, 2.0, 1.0)
engine.create_sphere("Sphere1", 1.0, 20, 20)

print(engine.model_description("Cube1"))   # CUBE(1 2 1)

engine.save_project()                      # writes /tmp/Demo/Demo.uupj
engine.close_project()
engine.load_project("/tmp/Demo/Demo.uupj")
print(sorted(engine.current_scene.game_objects))   # ['Cube1', 'Sphere1']
```

New objects are placed where the ray under the last mouse position meets the
ground plane, so `resize_scene` must be called before creating them.
Subscribers receive `EngineEvent.UPDATE_GRAPHICS` when the view should be
redrawn and `EngineEvent.DISABLED_STATE` (with `True` or `False`) when a
project is closed or opened.

`EngineCore.toggle_game_status()` saves the project when play starts and
reloads it from the project file when play stops, restoring the edited state.

## Project file format

Each line describes one scene:

```
#NAME SKYBOX<map|null> CAMERAS+name|params|scripts... LIGHTINGS+... BASE3DGAMEOBJECT+name|params|KIND|model|scripts...
```

`params` is `x y z angleX axisX angleY axisY scale`. `KIND` is
`CUSTOM_MODEL` (the model is an `.obj` file name in `Models/`) or
`SIMPLE_MODEL` (the model is `CUBE(w h d)` or `SPHERE(r rings sectors)`
followed by `,MATERIAL(...)` with twelve `$`-separated fields: ambience,
diffuse and specular colours, diffuse map, normal map, shininess).
Reading stops at the first empty line.

## What it does not do

- It draws nothing: there is no renderer, no shader handling and no window
  or editor screen. `Viewport` only keeps the matrices a renderer would use.
- Objects cannot be picked with the mouse.
- Scripts attached to objects are recorded and copied into the project's
  `Scripts/` folder, but nothing runs them.
- Only cubes, spheres and skyboxes can be built; `SimpleModelType` lists
  other shapes, but loading a project that uses them raises `ValueError`.
- Only Wavefront `.obj` models can be loaded.
- There is no command-line tool.

## Tests

```
pip install .[test]
pytest
```