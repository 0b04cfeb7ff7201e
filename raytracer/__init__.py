"""Path tracer for sphere scenes with diffuse, metal and glass materials, writing PPM images."""

__version__ = "1.0.0"