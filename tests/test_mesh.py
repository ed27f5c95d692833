from candela.mesh import Mesh


def _quad():
    return Mesh(
        number=3,
        vertices=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)],
        indices=[0, 1, 2, 0, 2, 3],
    )


def test_counts_follow_geometry():
    mesh = _quad()
    assert mesh.vertex_count == len(mesh.vertices)
    assert mesh.indices_count == len(mesh.indices)
    assert mesh.triangle_count == len(mesh.indices) // 3
    assert mesh.indexed is True


def test_empty_mesh_is_not_indexed():
    mesh = Mesh(number=0)
    assert mesh.indexed is False
    assert mesh.vertex_count == 0
    assert mesh.triangle_count == 0


def test_counts_update_when_geometry_grows():
    mesh = _quad()
    mesh.vertices.append((2.0, 2.0, 2.0))
    mesh.indices.extend([1, 2, 4])
    assert mesh.vertex_count == 5
    assert mesh.triangle_count == 3


def test_texture_path_lists_are_independent():
    first = Mesh(number=1)
    second = Mesh(number=2)
    first.texture_paths[0] = "albedo.png"
    assert second.texture_paths == [""] * 6
    assert len(first.raw_texture_paths) == 6


def test_partial_triangle_is_not_counted():
    mesh = Mesh(number=1, vertices=[(0, 0, 0)] * 3, indices=[0, 1, 2, 0])
    assert mesh.triangle_count == 1
    assert mesh.indices_count == 4