"""Layers and the ordered stack that holds them (layers below overlays)."""

from __future__ import annotations

from collections.abc import Iterator


class Layer:
    """A unit of application behaviour; override the hooks you need.

    The base hooks keep a little bookkeeping: whether the layer is attached,
    the last timestep and event it saw, and how many UI frames it rendered.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_timestep = None
        self.last_event = None
        self.frames_rendered = 0

    def on_attach(self) -> None:
        self.attached = True

    def on_detach(self) -> None:
        self.attached = False

    def on_update(self, ts) -> None:
        self.last_timestep = ts

    def on_imgui_render(self) -> None:
        self.frames_rendered += 1

    def on_event(self, event) -> None:
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Ordered layers; regular layers always come before overlays."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove ``layer`` if it is among the regular layers."""
        for index, candidate in enumerate(self._layers[: self._insert_index]):
            if candidate is layer:
                layer.on_detach()
                del self._layers[index]
                self._insert_index -= 1
                return

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove ``overlay`` if it is among the overlays."""
        start = self._insert_index
        for offset, candidate in enumerate(self._layers[start:]):
            if candidate is overlay:
                overlay.on_detach()
                del self._layers[start + offset]
                return

    def clear(self) -> None:
        """Detach every layer and empty the stack."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info) -> None:
        self.clear()

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)