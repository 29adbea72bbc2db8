import pytest

from uuengine.entities import Camera, GameObject, Lighting, ObjectType, SkyBox
from uuengine.linalg import Quaternion, Vector3
from uuengine.models import CustomModel, SimpleModel


def approx(values):
    return pytest.approx(tuple(values), abs=1e-9)


def test_defaults():
    obj = GameObject(None)
    assert obj.coordinates == Vector3()
    assert obj.scale == 1.0
    assert obj.rotation == Quaternion()
    assert not obj.is_locked


def test_lock_and_unlock():
    obj = Camera()
    obj.lock()
    assert obj.is_locked
    obj.unlock()
    assert not obj.is_locked


def test_translate_accumulates():
    obj = Camera()
    a, b = Vector3(1.0, 2.0, 3.0), Vector3(-0.5, 4.0, 1.0)
    obj.translate(a)
    obj.translate(b)
    assert obj.coordinates == a + b


def test_grow_adds_to_scale():
    obj = Lighting()
    obj.grow(0.5)
    obj.grow(0.25)
    assert obj.scale == 1.75


def test_rotation_combines_axis_rotations():
    obj = Camera()
    rx = Quaternion.from_axis_and_angle(Vector3(1.0, 0.0, 0.0), 30.0)
    ry = Quaternion.from_axis_and_angle(Vector3(0.0, 1.0, 0.0), 45.0)
    obj.rotate_x(rx)
    obj.rotate_y(ry)
    obj.rotate_x(rx)
    assert tuple(obj.rotation_x) == approx(rx * rx)
    assert tuple(obj.rotation_y) == approx(ry)
    assert tuple(obj.rotation) == approx(obj.rotation_x * obj.rotation_y)


def test_rotate_composes_onto_rotation():
    obj = Camera()
    q = Quaternion.from_axis_and_angle(Vector3(0.0, 0.0, 1.0), 20.0)
    obj.rotate(q)
    obj.rotate(q)
    assert tuple(obj.rotation) == approx(q * q)


def test_model_matrix_places_origin_at_coordinates():
    obj = GameObject(None)
    obj.coordinates = Vector3(3.0, -1.0, 2.0)
    obj.rotate_y(Quaternion.from_axis_and_angle(Vector3(0.0, 1.0, 0.0), 70.0))
    assert tuple(obj.model_matrix().map(Vector3())) == approx((3.0, -1.0, 2.0))


def test_model_matrix_applies_scale_and_rotation():
    obj = GameObject(None)
    obj.coordinates = Vector3(1.0, 1.0, 1.0)
    obj.scale = 2.0
    q = Quaternion.from_axis_and_angle(Vector3(0.0, 0.0, 1.0), 40.0)
    obj.rotate(q)
    point = Vector3(1.0, 0.0, 0.0)
    expected = obj.coordinates + q.rotate_vector(point * 2.0)
    assert tuple(obj.model_matrix().map(point)) == approx(expected)


def test_object_types():
    assert GameObject(None).object_type is ObjectType.GAME_OBJECT
    assert Camera().object_type is ObjectType.CAMERA
    assert Lighting().object_type is ObjectType.LIGHTING
    assert SkyBox(SimpleModel()).object_type is ObjectType.GAME_OBJECT


def test_lighting_defaults():
    light = Lighting()
    assert light.light_power == 5.0
    assert light.dynamic is False


def test_game_object_model_can_be_replaced():
    first, second = SimpleModel(), CustomModel()
    obj = GameObject(first)
    assert obj.model is first
    obj.model = second
    assert obj.model is second