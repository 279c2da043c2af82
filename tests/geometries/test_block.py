import numpy as np

from meshgen import block_geometry


def test_block_vertices():
    block1 = block_geometry(1, 2, 3, 4, 5, 6)
    assert len(block1.vertices) == 24
    assert block1.vertex_count == 8
    assert block1.vertices[3] == 5

    block2 = block_geometry(1, 2, 3, 4, 5, 6, shared_vertices=False)
    assert len(block2.vertices) == 72
    assert block2.vertex_count == 24
    assert block2.vertices[7] == 3


def test_block_corners():
    for shared_vertices in (True, False):
        block = block_geometry(1, 2, 3, 4, 5, 6, shared_vertices=shared_vertices)
        positions = block.positions.reshape(-1, 3)

        # All vertices are at a corner of the block
        assert np.all(np.abs(positions - (4, 5, 6)) == (1, 2, 3))
        assert len({tuple(p) for p in positions.tolist()}) == 8

    aabb = block_geometry(1, 2, 3, 4, 5, 6).get_bounding_box()
    assert aabb.tolist() == [[3, 3, 3], [5, 7, 9]]


def test_block_unshared_faces_are_flat():
    block = block_geometry(1, 2, 3, 4, 5, 6, shared_vertices=False)
    positions = block.positions.reshape(6, 4, 3)

    # Each face lies on one side of the block, so one coordinate is constant
    sides = set()
    for face in positions:
        constant = np.flatnonzero(np.all(face == face[0], axis=0))
        assert len(constant) == 1
        axis = constant[0]
        sides.add((axis, float(face[0, axis])))
    assert len(sides) == 6


def test_block_colors():
    block1 = block_geometry(1, 2, 3, 4, 5, 6)
    assert len(block1.colors) == 24
    assert block1.colors[5] == 1

    block2 = block_geometry(1, 2, 3, 4, 5, 6, shared_vertices=False)
    assert len(block2.colors) == 72
    assert block2.colors[6] == 0
    # The bottom face is gray
    assert np.allclose(block2.colors[48:60], 0.2)

    block3 = block_geometry(1, 2, 3, 4, 5, 6, color=[0.3, 0.5, 0.7, 0.1])
    assert len(block3.colors) == 32
    assert block3.color_size == 4
    assert np.allclose(block3.colors[4:8], [0.3, 0.5, 0.7, 0.1])

    block4 = block_geometry(
        1, 2, 3, 4, 5, 6, color=[1, 0.5, 0], shared_vertices=False
    )
    assert len(block4.colors) == 72
    assert block4.colors[3:6].tolist() == [1, 0.5, 0]


def test_block_texcoords_and_normals():
    block1 = block_geometry(1, 2, 3, 4, 5, 6)
    assert block1.texcoords is None
    assert block1.normals is None
    assert not block1.has("texcoords")
    assert not block1.has("normals")

    block2 = block_geometry(1, 2, 3, 4, 5, 6, shared_vertices=False)
    assert len(block2.texture_coords) == 48
    assert block2.texcoords[:8].tolist() == [0, 0, 1, 0, 0, 1, 1, 1]
    assert block2.texcoords[40:48].tolist() == [0, 0, 1, 0, 0, 1, 1, 1]

    # Present, but not computed
    assert block2.has("normals")
    assert len(block2.normals) == 0


def test_block_indices():
    block1 = block_geometry(1, 2, 3, 4, 5, 6)
    assert len(block1.indices) == 36
    assert block1.indices[35] == 5
    assert block1.topology == "triangle-list"
    assert set(block1.indices.tolist()) == set(range(8))

    block2 = block_geometry(1, 2, 3, 4, 5, 6, shared_vertices=False)
    assert len(block2.indices) == 36
    assert block2.indices[35] == 22
    assert set(block2.indices.tolist()) == set(range(24))

    block1.check()
    block2.check()


def test_block_default_args():
    block = block_geometry()
    assert block.get_bounding_box().tolist() == [[-1, -1, -1], [1, 1, 1]]
    assert block.positions.dtype == np.float32
    assert block.indices.dtype == np.uint32


def test_blocks_do_not_share_buffers():
    block1 = block_geometry()
    block1.colors[:] = 0
    block1.indices[:] = 0

    block2 = block_geometry()
    assert block2.colors.max() == 1
    assert block2.indices.max() == 7
