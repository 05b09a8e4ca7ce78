"""Shader programs held as source text plus their uniform values, and a named library."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np


@dataclass(eq=False)
class Shader:
    """A named shader program with its sources and the uniforms set on it."""

    name: str
    vertex_src: str = ""
    fragment_src: str = ""
    source: str = ""
    path: Path | None = None
    uniforms: dict = field(default_factory=dict)
    bound: bool = False

    @classmethod
    def from_file(cls, filepath) -> Shader:
        """Read a shader file; its name is the file name without extension."""
        path = Path(filepath)
        text = path.read_text(encoding="utf-8")
        return cls(name=path.stem, source=text, path=path)

    def bind(self) -> None:
        self.bound = True

    def unbind(self) -> None:
        self.bound = False

    def set_int(self, name: str, value: int) -> None:
        self.uniforms[name] = int(value)

    def set_int_array(self, name: str, values) -> None:
        self.uniforms[name] = np.array(values, dtype=np.int32)

    def set_float(self, name: str, value: float) -> None:
        self.uniforms[name] = float(value)

    def _set_vector(self, name: str, value, size: int) -> None:
        vec = np.array(value, dtype=float)
        if vec.shape != (size,):
            raise ValueError(f"uniform {name!r} expects {size} components, got shape {vec.shape}")
        self.uniforms[name] = vec

    def set_float2(self, name: str, value) -> None:
        self._set_vector(name, value, 2)

    def set_float3(self, name: str, value) -> None:
        self._set_vector(name, value, 3)

    def set_float4(self, name: str, value) -> None:
        self._set_vector(name, value, 4)

    def set_mat4(self, name: str, value) -> None:
        matrix = np.array(value, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError(f"uniform {name!r} expects a 4x4 matrix, got shape {matrix.shape}")
        self.uniforms[name] = matrix


class ShaderLibrary:
    """Shaders stored under unique names."""

    def __init__(self) -> None:
        self._shaders: dict[str, Shader] = {}

    def add(self, shader: Shader, name: str | None = None) -> None:
        """Store ``shader`` under ``name`` (default: its own name)."""
        key = shader.name if name is None else name
        if key in self._shaders:
            raise ValueError(f"shader already exists: {key!r}")
        self._shaders[key] = shader

    def load(self, filepath, name: str | None = None) -> Shader:
        """Read a shader from ``filepath`` and add it."""
        shader = Shader.from_file(filepath)
        self.add(shader, name)
        return shader

    def get(self, name: str) -> Shader:
        try:
            return self._shaders[name]
        except KeyError:
            raise KeyError(f"shader not found: {name!r}") from None

    def exists(self, name: str) -> bool:
        return name in self._shaders

    def __contains__(self, name: object) -> bool:
        return name in self._shaders