from types import SimpleNamespace

import numpy as np
import pytest

from hazelcore.renderer2d import Renderer2D, Statistics, Texture, quad_indices


@pytest.fixture
def recorded():
    batches = []
    return batches, Renderer2D(on_flush=batches.append)


def test_quad_indices_pattern():
    assert list(quad_indices(2)) == [0, 1, 2, 2, 3, 0, 4, 5, 6, 6, 7, 4]
    assert len(quad_indices(10)) == 60


def test_quad_indices_negative_raises():
    with pytest.raises(ValueError):
        quad_indices(-1)


def test_identity_quad_vertices(recorded):
    batches, renderer = recorded
    renderer.begin_scene(np.eye(4))
    renderer.draw_quad(np.eye(4), (1.0, 0.0, 0.0, 1.0))
    batch = renderer.end_scene()
    assert batches == [batch]
    positions = [v.position for v in batch.vertices]
    assert positions == [(-0.5, -0.5, 0.0), (0.5, -0.5, 0.0), (0.5, 0.5, 0.0), (-0.5, 0.5, 0.0)]
    assert [v.tex_coord for v in batch.vertices] == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    assert all(v.tex_index == 0.0 and v.entity_id == -1 for v in batch.vertices)
    assert batch.index_count == 6


def test_empty_flush_draws_nothing(recorded):
    batches, renderer = recorded
    renderer.begin_scene(np.eye(4))
    assert renderer.end_scene() is None
    assert batches == []
    assert renderer.stats.draw_calls == 0


def test_batch_overflow_splits_draw_calls():
    batches = []
    renderer = Renderer2D(max_quads=2, on_flush=batches.append)
    renderer.begin_scene(np.eye(4))
    for _ in range(3):
        renderer.draw_quad(np.eye(4), (1.0, 1.0, 1.0, 1.0))
    renderer.end_scene()
    assert [b.index_count for b in batches] == [12, 6]
    stats = renderer.stats
    assert stats.draw_calls == 2
    assert stats.quad_count == 3
    assert stats.total_vertex_count == stats.quad_count * 4
    assert stats.total_index_count == stats.quad_count * 6


def test_texture_slots_are_reused(recorded):
    _, renderer = recorded
    grass, stone = Texture(4, 4), Texture(4, 4)
    renderer.begin_scene(np.eye(4))
    renderer.draw_textured_quad(np.eye(4), grass)
    renderer.draw_textured_quad(np.eye(4), grass)
    renderer.draw_textured_quad(np.eye(4), stone)
    batch = renderer.end_scene()
    indices = [batch.vertices[i * 4].tex_index for i in range(3)]
    assert indices == [1.0, 1.0, 2.0]
    assert batch.textures == (renderer.white_texture, grass, stone)


def test_texture_slot_overflow_starts_new_batch():
    batches = []
    renderer = Renderer2D(max_texture_slots=2, on_flush=batches.append)
    grass, stone = Texture(2, 2), Texture(2, 2)
    renderer.begin_scene(np.eye(4))
    renderer.draw_textured_quad(np.eye(4), grass)
    renderer.draw_textured_quad(np.eye(4), stone)
    renderer.end_scene()
    assert len(batches) == 2
    assert batches[0].textures[1] == grass
    assert batches[1].textures[1] == stone
    assert batches[1].vertices[0].tex_index == 1.0


def test_quad_at_is_centred_on_position(recorded):
    _, renderer = recorded
    renderer.begin_scene(np.eye(4))
    renderer.draw_quad_at((1.0, 2.0), (3.0, 4.0), (1.0, 1.0, 1.0, 1.0))
    batch = renderer.end_scene()
    positions = np.array([v.position for v in batch.vertices])
    assert np.allclose(positions.mean(axis=0), [1.0, 2.0, 0.0])
    extent = positions.max(axis=0) - positions.min(axis=0)
    assert np.allclose(extent[:2], [3.0, 4.0])


def test_square_rotated_quarter_turn_keeps_corners(recorded):
    _, renderer = recorded
    renderer.begin_scene(np.eye(4))
    renderer.draw_quad_at((0.0, 0.0, 0.0), (2.0, 2.0), (1.0, 1.0, 1.0, 1.0))
    renderer.draw_rotated_quad((0.0, 0.0, 0.0), (2.0, 2.0), 90.0, (1.0, 1.0, 1.0, 1.0))
    batch = renderer.end_scene()
    plain = np.array(sorted(np.round([v.position for v in batch.vertices[:4]], 6).tolist()))
    turned = np.array(sorted(np.round([v.position for v in batch.vertices[4:]], 6).tolist()))
    assert np.allclose(plain, turned)


def test_rotated_textured_quad_uses_tint(recorded):
    _, renderer = recorded
    texture = Texture(1, 1)
    renderer.begin_scene(np.eye(4))
    renderer.draw_rotated_textured_quad((0.0, 0.0), (1.0, 1.0), 45.0, texture, 2.0, (0.5, 0.5, 0.5, 1.0))
    batch = renderer.end_scene()
    assert all(v.color == (0.5, 0.5, 0.5, 1.0) for v in batch.vertices)
    assert all(v.tiling_factor == 2.0 for v in batch.vertices)


def test_draw_sprite_uses_color_and_entity(recorded):
    _, renderer = recorded
    sprite = SimpleNamespace(color=(0.2, 0.4, 0.6, 1.0))
    renderer.begin_scene(np.eye(4))
    renderer.draw_sprite(np.eye(4), sprite, 7)
    batch = renderer.end_scene()
    assert all(v.color == (0.2, 0.4, 0.6, 1.0) for v in batch.vertices)
    assert all(v.entity_id == 7 for v in batch.vertices)


def test_begin_scene_keeps_view_projection(recorded):
    _, renderer = recorded
    matrix = np.arange(16.0).reshape(4, 4)
    renderer.begin_scene(matrix)
    renderer.draw_quad(np.eye(4), (1.0, 1.0, 1.0, 1.0))
    batch = renderer.end_scene()
    assert np.array_equal(batch.view_projection, matrix)


def test_reset_stats(recorded):
    _, renderer = recorded
    renderer.begin_scene(np.eye(4))
    renderer.draw_quad(np.eye(4), (1.0, 1.0, 1.0, 1.0))
    renderer.end_scene()
    renderer.reset_stats()
    assert renderer.stats == Statistics()


def test_texture_identity_and_data():
    first, second = Texture(2, 2), Texture(2, 2)
    assert first == first
    assert not first == second
    with pytest.raises(ValueError):
        first.set_data(b"\x00" * 3)
    first.set_data(b"\x01" * 16)
    assert first.data == b"\x01" * 16


def test_invalid_limits_raise():
    with pytest.raises(ValueError):
        Renderer2D(max_quads=0)
    with pytest.raises(ValueError):
        Renderer2D(max_texture_slots=1)