# hazelcore

The core of a small 2D game engine in plain Python on top of numpy. It holds
the parts of an engine that do not depend on a window or a graphics API:

- `hazelcore.codes`: `Key` and `Mouse` code enumerations (GLFW values).
- `hazelcore.timing`: `Timestep` (seconds, with `seconds` and `milliseconds`) and `Timer` (`reset`, `elapsed`, `elapsed_millis`).
- `hazelcore.layers`: `Layer`, with overridable hooks, and `LayerStack`. Regular layers always sit below overlays. `pop_layer` and `pop_overlay` detach what they remove, and `clear` (or leaving a `with` block) detaches everything.
- `hazelcore.log`: `init(log_file="Hazel.log")` sets up the `HAZEL` and `APP` loggers, which write to stdout and to a truncated log file at a `TRACE` level. `core_logger()` and `client_logger()` return them and raise `RuntimeError` before `init`.
- `hazelcore.transforms`: 4×4 helpers (`identity`, `translation`, `rotation`, `scaling`, `perspective`, `ortho`), quaternions (`quat_from_euler`, `quat_to_mat4`, `quat_rotate`) and `decompose_transform`, which returns translation, Euler rotation and scale.
- `hazelcore.buffer`: `ShaderDataType`, `shader_data_type_size`, `BufferElement` and `BufferLayout`, which computes element offsets and the stride.
- `hazelcore.camera`: `Camera`, which holds a projection, and `OrthographicCamera`, which has a position and a rotation in degrees.
- `hazelcore.scene_camera`: `SceneCamera`, which switches between perspective and orthographic projection and follows the viewport's aspect ratio.
- `hazelcore.shader`: `Shader`, which holds source text and uniform values, and `ShaderLibrary`, which stores shaders under unique names.
- `hazelcore.renderer2d`: `Renderer2D`, a batching quad renderer, with `Texture`, `QuadVertex`, `Statistics`, `Batch` and `quad_indices`.

## Install

```
pip install .
```

## Example

```python
from hazelcore.camera import OrthographicCamera
from hazelcore.renderer2d import Renderer2D, Texture

camera = OrthographicCamera(-1.6, 1.6, -0.9, 0.9)
renderer = Renderer2D(on_flush=lambda batch: print(len(batch.vertices), "vertices"))

renderer.begin_scene(camera.view_projection_matrix)
renderer.draw_quad_at((0.0, 0.0), (1.0, 1.0), (0.2, 0.8, 0.3, 1.0))
renderer.draw_rotated_quad((0.5, 0.5, 0.1), (0.5, 0.5), 45.0, (0.8, 0.2, 0.3, 1.0))
renderer.draw_rotated_textured_quad((0.0, 0.0), (2.0, 2.0), 0.0, Texture(16, 16), 4.0)
batch = renderer.end_scene()

print(renderer.stats.quad_count, renderer.stats.draw_calls)
print(batch.index_count, len(batch.textures))
```

The renderer does not draw to a screen. It builds the vertex data, texture
slots and index counts that a graphics back end would upload. A batch is
flushed when the quad limit or the texture slot limit is reached, and again
at `end_scene`. `stats` counts quads and draw calls until `reset_stats`.

```python
from hazelcore.layers import Layer, LayerStack
from hazelcore.timing import Timestep

with LayerStack() as stack:
    stack.push_overlay(Layer("UI"))
    stack.push_layer(Layer("Game"))
    for layer in stack:
        layer.on_update(Timestep(1 / 60))
    print([layer.name for layer in reversed(stack)])  # ['UI', 'Game']
```

## What it does not do

The package has no window, no graphics back end and no application loop.
It does not read keyboard or mouse state: `Key` and `Mouse` are codes only.
It has no editor camera or camera controller driven by input, no entity
scene or components, and it does not save or load scene files.

## Tests

```
pip install .[test]
pytest
```