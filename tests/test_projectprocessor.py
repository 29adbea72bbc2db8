from pathlib import Path

import pytest

from uuengine.linalg import Quaternion, Vector3
from uuengine.modelbuilder import create_cube, create_skybox, create_sphere
from uuengine.models import CustomModel, ModelType
from uuengine.projectprocessor import ProjectProcessor
from uuengine.scene import Scene, SceneFolder


@pytest.fixture
def processor(tmp_path):
    proc = ProjectProcessor()
    proc.create_project(tmp_path.as_posix(), "Proj")
    return proc


def _scene_with_cube(proc, description="CUBE(2 1 1)"):
    folder = SceneFolder()
    folder.create_scene("Main")
    scene = folder.current_scene
    scene.add_game_object("Box", create_cube(2.0, 1.0, 1.0))
    proc.models.replace("Box", description)
    return folder.scenes


def test_create_project_builds_layout(tmp_path):
    proc = ProjectProcessor()
    project_file = proc.create_project(tmp_path.as_posix(), "Proj")
    root = tmp_path / "Proj"
    assert all((root / sub).is_dir() for sub in ("Models", "Textures", "Scripts"))
    assert project_file == root / "Proj.uupj"
    assert project_file.read_text() == ""
    assert proc.project.name == "Proj"
    assert proc.project.folder == root.as_posix()
    assert proc.project.path == project_file.as_posix()


def test_create_project_in_missing_directory_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        ProjectProcessor().create_project((tmp_path / "missing").as_posix(), "Proj")


def test_dump_scene_format():
    scene = Scene()
    scene.add_camera("Cam")
    line = ProjectProcessor().dump_scene("S", scene)
    assert line == "#S SKYBOXnull CAMERAS+Cam|0 0 0 0 0 0 0 0 0 0 0 1| LIGHTINGS BASE3DGAMEOBJECT"


def test_parse_dumped_scene_round_trip():
    scene = Scene()
    scene.add_camera("Cam")
    scene.camera("Cam").coordinates = Vector3(1.5, 0.0, -2.0)
    proc = ProjectProcessor()
    name, loaded = proc.parse_scene(proc.dump_scene("S", scene))
    assert name == "S"
    assert list(loaded.cameras) == ["Cam"]
    assert loaded.camera("Cam").coordinates == Vector3(1.5, 0.0, -2.0)
    assert loaded.game_objects == {}
    assert loaded.skybox is None


def test_parse_scene_rejects_garbage():
    with pytest.raises(ValueError):
        ProjectProcessor().parse_scene("not a scene")


def test_parse_scene_rejects_short_game_object():
    with pytest.raises(ValueError):
        ProjectProcessor().parse_scene("#S SKYBOXnull CAMERAS LIGHTINGS BASE3DGAMEOBJECT+Box|0 0 0")


def test_parse_scene_rejects_unsupported_shape():
    base = "0 0 0 0 0 0 0 0 0 0 0 1"
    material = "1$1$1$1$1$1$1$1$1$null$null$100"
    line = (f"#S SKYBOXnull CAMERAS LIGHTINGS BASE3DGAMEOBJECT+P|{base}|SIMPLE_MODEL|"
            f"PYRAMID(1 1),MATERIAL({material})|")
    with pytest.raises(ValueError):
        ProjectProcessor().parse_scene(line)


def test_save_and_load_cube(processor):
    scenes = _scene_with_cube(processor)
    box = scenes["Main"].game_object("Box")
    box.coordinates = Vector3(1.5, 0.0, -2.0)
    box.scale = 2.5
    processor.save_project(scenes)

    loader = ProjectProcessor()
    loaded = loader.load_project(processor.project.path)
    assert list(loaded) == ["Main"]
    loaded_box = loaded["Main"].game_object("Box")
    assert loaded_box.coordinates == Vector3(1.5, 0.0, -2.0)
    assert loaded_box.scale == 2.5
    assert loaded_box.model.model_type is ModelType.SIMPLE
    assert loader.models.model("Box") == "CUBE(2 1 1)"
    original = box.model.particle.material
    restored = loaded_box.model.particle.material
    assert restored.diffuse_color == original.diffuse_color
    assert restored.shininess == original.shininess
    assert set(loaded["Main"].cameras) == set(scenes["Main"].cameras)
    assert set(loaded["Main"].lightings) == set(scenes["Main"].lightings)


def test_rotation_round_trip(processor):
    scenes = _scene_with_cube(processor)
    box = scenes["Main"].game_object("Box")
    box.rotate_x(Quaternion.from_axis_and_angle(Vector3(1.0, 0.0, 0.0), 30.0))
    processor.save_project(scenes)

    loaded = ProjectProcessor().load_project(processor.project.path)
    restored = loaded["Main"].game_object("Box").rotation_x
    assert tuple(restored) == pytest.approx(tuple(box.rotation_x), abs=1e-6)


def test_sphere_round_trip(processor):
    folder = SceneFolder()
    folder.create_scene("Main")
    folder.current_scene.add_game_object("Ball", create_sphere(1.0, 4, 6))
    processor.models.replace("Ball", "SPHERE(1 4 6)")
    processor.save_project(folder.scenes)

    loader = ProjectProcessor()
    loaded = loader.load_project(processor.project.path)
    ball = loaded["Main"].game_object("Ball")
    original = folder.current_scene.game_object("Ball")
    assert len(ball.model.particle.vertices) == len(original.model.particle.vertices)
    assert loader.models.model("Ball") == "SPHERE(1 4 6)"


def test_texture_maps_round_trip(processor):
    scenes = _scene_with_cube(processor)
    scenes["Main"].game_object("Box").model.particle.set_diffuse_map("wood.png")
    processor.save_project(scenes)

    loader = ProjectProcessor()
    loaded = loader.load_project(processor.project.path)
    material = loaded["Main"].game_object("Box").model.particle.material
    assert material.uses_diffuse_map
    assert material.diffuse_map_path == "wood.png"
    assert not material.uses_normal_map
    assert loader.textures.textures("Box") == ["wood.png"]


def test_skybox_round_trip(processor):
    folder = SceneFolder()
    folder.create_scene("Main")
    folder.current_scene.set_skybox(create_skybox(100.0, "sky.png"))
    processor.save_project(folder.scenes)

    loaded = ProjectProcessor().load_project(processor.project.path)
    skybox = loaded["Main"].skybox
    assert skybox.model.particle.material.diffuse_map_path == "sky.png"


def test_scripts_round_trip(processor):
    folder = SceneFolder()
    folder.create_scene("Main")
    processor.scripts.add_script("DefaultCamera", "move.so")
    processor.save_project(folder.scenes)

    loader = ProjectProcessor()
    loader.load_project(processor.project.path)
    assert loader.scripts.scripts("DefaultCamera") == ["move.so"]
    assert loader.scripts.scripts("DefaultLight") == []


def test_custom_model_is_loaded_from_models_folder(processor):
    models_dir = Path(processor.project.folder) / "Models"
    (models_dir / "tri.obj").write_text(
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0 0\nvt 1 0\nvt 0 1\nvn 0 0 1\n"
        "f 1/1/1 2/2/1 3/3/1\n"
    )
    folder = SceneFolder()
    folder.create_scene("Main")
    folder.current_scene.add_game_object("Tri", CustomModel())
    processor.models.append("Tri", "tri.obj")
    processor.save_project(folder.scenes)

    loader = ProjectProcessor()
    loaded = loader.load_project(processor.project.path)
    model = loaded["Main"].game_object("Tri").model
    assert model.model_type is ModelType.CUSTOM
    assert len(model.particles) == 1
    assert len(model.particle(0).vertices) == 3
    assert loader.models.model("Tri") == "tri.obj"


def test_load_stops_at_empty_line(processor):
    scene = Scene()
    scene.add_camera("Cam")
    text = processor.dump_scene("First", scene) + "\n\n#broken"
    Path(processor.project.path).write_text(text)
    loaded = ProjectProcessor().load_project(processor.project.path)
    assert list(loaded) == ["First"]


def test_load_sets_project_info(processor):
    loader = ProjectProcessor()
    loader.load_project(processor.project.path)
    assert loader.project.name == "Proj"
    assert loader.project.folder == processor.project.folder
    assert loader.project.path == processor.project.path


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ProjectProcessor().load_project((tmp_path / "none.uupj").as_posix())


def test_save_to_explicit_path_adopts_it(tmp_path):
    proc = ProjectProcessor()
    target = tmp_path / "Game.uupj"
    proc.save_project({}, target.as_posix())
    assert target.exists()
    assert proc.project.name == "Game"
    assert proc.project.folder == tmp_path.as_posix()


def test_save_without_project_raises():
    with pytest.raises(ValueError):
        ProjectProcessor().save_project({})


def test_close_project_saves_and_resets(processor):
    scenes = _scene_with_cube(processor)
    path = processor.project.path
    processor.close_project(scenes)
    assert processor.project.path == ""
    assert processor.project.name == ""
    assert Path(path).read_text() == processor.dump_scene("Main", scenes["Main"])


def test_multiple_scenes_saved_on_separate_lines(processor):
    folder = SceneFolder()
    folder.create_scene("One")
    folder.create_scene("Two")
    processor.save_project(folder.scenes)
    lines = Path(processor.project.path).read_text().split("\n")
    assert len(lines) == 2
    loaded = ProjectProcessor().load_project(processor.project.path)
    assert set(loaded) == {"One", "Two"}