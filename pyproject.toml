[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gltfwriter"
version = "0.1.0"
description = "Build glTF 2.0 assets in memory and write them as .gltf JSON or binary .glb files."
requires-python = ">=3.10"
dependencies = []
keywords = ["gltf", "glb", "3d", "mesh", "export"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gltfwriter"]

[tool.pytest.ini_options]
addopts = "-ra"
