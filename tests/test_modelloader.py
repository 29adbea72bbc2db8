from pathlib import Path

import pytest

from uuengine.linalg import Vector2, Vector3
from uuengine.modelloader import ModelFactory, ModelLoader, ObjModelFactory
from uuengine.models import ModelType
from uuengine.projectinfo import ProjectInfo

OBJ_TEXT = "\n".join([
    "mtllib box.mtl",
    "v 0 0 0",
    "v 1 0 0",
    "v 0 1 0",
    "vt 0 0",
    "vt 1 0",
    "vt 0 1",
    "vn 0 0 1",
    "usemtl red",
    "f 1/1/1 2/2/1 3/3/1",
    "usemtl blue",
    "f 3/3/1 2/2/1 1/1/1",
])

MTL_TEXT = "\n".join([
    "newmtl red",
    "Kd 1 0 0",
    "newmtl blue",
    "Kd 0 0 1",
])


@pytest.fixture
def obj_file(tmp_path):
    source = tmp_path / "source"
    source.mkdir()
    (source / "box.mtl").write_text(MTL_TEXT, encoding="utf-8")
    path = source / "box.obj"
    path.write_text(OBJ_TEXT, encoding="utf-8")
    return path


def test_obj_splits_particles_by_material(obj_file):
    model = ObjModelFactory().create_model(str(obj_file))
    assert model.model_type is ModelType.CUSTOM
    assert [p.material.name for p in model.particles] == ["red", "blue"]
    assert model.particle(1).material.diffuse_color == Vector3(0.0, 0.0, 1.0)


def test_obj_vertex_data(obj_file):
    model = ObjModelFactory().create_model(str(obj_file))
    first, second = model.particles
    assert [v.position for v in first.vertices] == [
        Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0)]
    assert first.vertices[1].texture == Vector2(1.0, 0.0)
    assert all(v.normal == Vector3(0.0, 0.0, 1.0) for v in first.vertices)
    assert first.indices == [0, 1, 2]
    assert second.indices == [0, 1, 2]
    assert second.vertices[0].position == first.vertices[2].position


def test_missing_file_gives_empty_model(tmp_path):
    model = ObjModelFactory().create_model(str(tmp_path / "nothing.obj"))
    assert model.particles == []


def test_obj_copies_into_project(obj_file, tmp_path):
    project_dir = tmp_path / "project"
    (project_dir / "Models").mkdir(parents=True)
    project = ProjectInfo(name="project", folder=project_dir.as_posix())
    ObjModelFactory(project).create_model(obj_file.as_posix())
    copied = project_dir / "Models"
    assert (copied / "box.obj").read_text(encoding="utf-8") == OBJ_TEXT
    assert (copied / "box.mtl").read_text(encoding="utf-8") == MTL_TEXT


def test_obj_without_materials(tmp_path):
    path = tmp_path / "plain.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0 0\nvn 0 0 1\n"
                    "f 1/1/1 2/1/1 3/1/1\n", encoding="utf-8")
    model = ObjModelFactory().create_model(str(path))
    assert len(model.particles) == 1
    assert model.particle(0).material is None
    assert model.particle(0).indices == [0, 1, 2]


def test_bad_face_index_raises(tmp_path):
    path = tmp_path / "broken.obj"
    path.write_text("v 0 0 0\nvt 0 0\nvn 0 0 1\nf 5/1/1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ObjModelFactory().create_model(str(path))


def test_loader_delegates_to_factory(obj_file):
    loader = ModelLoader(ObjModelFactory())
    model = loader.create_model(str(obj_file))
    assert len(model.particles) == 2


def test_loader_without_factory_raises(obj_file):
    with pytest.raises(RuntimeError):
        ModelLoader().create_model(str(obj_file))


def test_factory_is_abstract():
    with pytest.raises(TypeError):
        ModelFactory()