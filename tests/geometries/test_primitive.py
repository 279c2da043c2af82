import numpy as np
import pytest

from meshgen import Primitive, Topology


def test_different_data_types():
    # Nested lists are flattened
    p = Primitive(positions=[[1, 2, 3], [4, 5, 6]])
    assert p.positions.dtype == np.float32
    assert p.positions.tolist() == [1, 2, 3, 4, 5, 6]

    # Numpy arrays of other dtypes are converted, and copied
    a = np.zeros((4, 3), np.float64)
    p = Primitive(positions=a)
    assert p.positions.dtype == np.float32
    assert p.positions.shape == (12,)
    a[0, 0] = 9
    assert p.positions[0] == 0

    # Indices are always uint32
    p = Primitive(indices=[[0, 1, 2], [2, 1, 3]])
    assert p.indices.dtype == np.uint32
    assert p.indices.tolist() == [0, 1, 2, 2, 1, 3]


def test_check_component_counts():
    Primitive(positions=np.zeros(9))
    with pytest.raises(ValueError):
        Primitive(positions=np.zeros(8))

    Primitive(colors=np.zeros(9))
    Primitive(colors=np.zeros(8))
    with pytest.raises(ValueError):
        Primitive(colors=np.zeros(10))

    Primitive(texcoords=np.zeros(4))
    with pytest.raises(ValueError):
        Primitive(texcoords=np.zeros(3))

    Primitive(normals=np.zeros(6))
    with pytest.raises(ValueError):
        Primitive(normals=np.zeros(4))

    with pytest.raises(ValueError):
        Primitive(indices=[0, -1, 2])


def test_topology():
    p = Primitive()
    assert p.topology == "triangle-list"
    assert p.topology == Topology.triangle_list

    p = Primitive(topology="triangle-strip")
    assert p.topology == Topology.triangle_strip

    with pytest.raises(ValueError):
        Primitive(topology="line-list")


def test_optional_attributes():
    p = Primitive(positions=np.zeros(9), normals=[])

    # Absent
    assert not p.has("texcoords")
    assert "texcoords" not in p
    assert p.texcoords is None

    # Present but empty
    assert p.has("normals")
    assert "normals" in p
    assert p.normals is not None
    assert len(p.normals) == 0

    assert dir(p) == ["normals", "positions"]
    assert "Primitive(" in repr(p)


def test_aliases():
    p = Primitive(positions=[1, 2, 3], texcoords=[0.5, 0.25])
    assert p.vertices is p.positions
    assert p.texture_coords is p.texcoords


def test_vertex_count_and_color_size():
    p = Primitive()
    assert p.vertex_count == 0
    assert p.color_size == 0

    p = Primitive(positions=np.zeros(12), colors=np.ones(16))
    assert p.vertex_count == 4
    assert p.color_size == 4


def test_check():
    positions = np.zeros(12)
    Primitive(positions=positions, colors=np.ones(12), indices=[0, 1, 3]).check()
    Primitive(positions=positions, colors=np.ones(16), normals=[]).check()

    with pytest.raises(ValueError):
        Primitive(positions=positions, colors=np.ones(9)).check()
    with pytest.raises(ValueError):
        Primitive(positions=positions, texcoords=np.ones(6)).check()
    with pytest.raises(ValueError):
        Primitive(positions=positions, indices=[0, 1, 4]).check()


def test_triangles_from_list():
    p = Primitive(positions=np.zeros(12), indices=[0, 1, 2, 1, 3, 2])
    assert p.triangles().tolist() == [[0, 1, 2], [1, 3, 2]]

    p = Primitive(positions=np.zeros(12), indices=[0, 1, 2, 1])
    with pytest.raises(ValueError):
        p.triangles()


def test_triangles_from_strip():
    # A plain strip alternates the winding, which is undone
    p = Primitive(
        positions=np.zeros(15), indices=[0, 1, 2, 3, 4], topology="triangle-strip"
    )
    assert p.triangles().tolist() == [[0, 1, 2], [2, 1, 3], [2, 3, 4]]

    # Degenerate triangles are dropped
    p = Primitive(
        positions=np.zeros(15),
        indices=[0, 1, 2, 2, 3, 3, 4],
        topology="triangle-strip",
    )
    assert p.triangles().tolist() == [[0, 1, 2]]

    # Too short
    p = Primitive(positions=np.zeros(15), indices=[0, 1], topology="triangle-strip")
    assert p.triangles().shape == (0, 3)


def test_bounding_box():
    p = Primitive(positions=[0, 0, 0, 1, 1, 1, 3, 3, 3])
    assert p.get_bounding_box().tolist() == [[0, 0, 0], [3, 3, 3]]

    p = Primitive(positions=[0, 1, 3, 3, 0, 1, 1, 3, 0])
    assert p.get_bounding_box().tolist() == [[0, 0, 0], [3, 3, 3]]

    p = Primitive(positions=[0, 0, np.nan, 1, 1, 1, 2, 2, 2])
    assert p.get_bounding_box().tolist() == [[1, 1, 1], [2, 2, 2]]

    # No positions at all
    assert Primitive().get_bounding_box() is None
    assert Primitive(positions=[]).get_bounding_box() is None
    assert Primitive().get_bounding_sphere() is None


def test_bounding_sphere():
    p = Primitive(positions=[-1, -1, -1, 1, 1, 1])
    sphere = p.get_bounding_sphere()
    assert np.allclose(sphere, [0, 0, 0, 3**0.5])
