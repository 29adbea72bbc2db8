from uuengine.linalg import Vector3
from uuengine.material import Material


def test_defaults():
    m = Material()
    assert m.diffuse_color == Vector3(0.7, 0.7, 0.7)
    assert m.ambience_color == Vector3(1.0, 1.0, 1.0)
    assert m.specular_color == Vector3(1.0, 1.0, 1.0)
    assert m.shininess == 100.0
    assert m.diffuse_map_path == "null"
    assert m.normal_map_path == "null"
    assert not m.uses_diffuse_map
    assert not m.uses_normal_map


def test_set_diffuse_map():
    m = Material()
    m.set_diffuse_map("textures/wall.png")
    assert m.diffuse_map_path == "textures/wall.png"
    assert m.uses_diffuse_map
    assert not m.uses_normal_map


def test_set_normal_map():
    m = Material()
    m.set_normal_map("textures/wall_n.png")
    assert m.normal_map_path == "textures/wall_n.png"
    assert m.uses_normal_map
    assert m.diffuse_map_path == "null"


def test_instances_do_not_share_colours():
    a = Material()
    b = Material()
    a.diffuse_color = Vector3(0.1, 0.2, 0.3)
    assert b.diffuse_color == Vector3(0.7, 0.7, 0.7)