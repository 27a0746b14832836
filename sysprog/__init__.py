"""Small systems tools: line templates, expression trees, images, source stats, a shell, servers and a text viewer."""

__version__ = "0.1.0"