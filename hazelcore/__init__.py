"""Engine core for 2D games: codes, timing, layers, logging, transforms, buffer layouts, cameras, shaders and 2D batching."""

__version__ = "0.1.0"