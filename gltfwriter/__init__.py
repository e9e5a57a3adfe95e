"""Build glTF 2.0 assets in memory and write them as .gltf or .glb files."""

__version__ = "0.1.0"