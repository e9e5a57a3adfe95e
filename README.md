# gltfwriter

`gltfwriter` builds glTF 2.0 assets in memory and writes them out as a
`.gltf` JSON document or as a single binary `.glb` file. It uses only the
standard library.

## Installation

```
pip install gltfwriter
```

## Concepts

You create every element of a glTF file through an `Asset`
(`gltfwriter.asset`). The asset gives each element its index and keeps it
in a list:

- `create_scene`, `create_node`, `create_mesh_node`, `create_camera_node`,
  `create_skin_node`
- `create_mesh`, `create_skin`, `create_camera`, `create_animation`
- `create_buffer`, `create_accessor`
- `create_material`, `create_sampler`, `create_image`,
  `create_image_from_buffer_view`
- `create_texture`, `create_texture_from_uri`, `create_texture_from_file`,
  `create_texture_from_buffer_view`

When the asset is serialised, elements refer to one another by those
indices.

Binary data goes into a `Buffer` (`gltfwriter.buffer`). Each block of data
you add to a buffer gets a new `BufferView`, which the asset also tracks.
An `Accessor` (`gltfwriter.accessor`) describes how the data in a buffer
view is read. It has an element type (`AccessorType`) and a component type
(`AccessorComponent`), both defined in `gltfwriter.constants`.

## Example

```python
from gltfwriter.asset import Asset
from gltfwriter.constants import AccessorType, AccessorComponent, PrimitiveMode

asset = Asset()
asset.set_generator("my exporter")

buffer = asset.create_buffer()

positions = asset.create_accessor(AccessorType.VEC3, AccessorComponent.FLOAT)
positions.add_vertex_data(buffer, [0.0, 0.0, 0.0,  1.0, 0.0, 0.0,  0.0, 1.0, 0.0])
positions.update_bounds()

indices = asset.create_accessor(AccessorType.SCALAR, AccessorComponent.UNSIGNED_SHORT)
indices.add_index_data(buffer, [0, 1, 2])

mesh = asset.create_mesh("triangle")
primitive = mesh.create_primitive(PrimitiveMode.TRIANGLES)
primitive.add_positions(positions)
primitive.set_indices(indices)

node = asset.create_mesh_node(mesh, "triangle")
scene = asset.create_scene()
scene.add_node(node)
asset.set_main_scene(scene)

asset.save_glb("triangle.glb")
```

`add_vertex_data` and `add_index_data` take a flat sequence of component
values. They pack the values little-endian into the buffer and set the
accessor's element count. A `ValueError` is raised in two cases: when the
number of values does not make up whole elements, and when a value does not
fit the component type. `update_bounds()` computes the per-component `min`
and `max`. It reads the values back from the buffer, or you can pass them
in. `Accessor.values()` decodes the stored data into a flat list.

To fill a region in place, use `allocate_vertex_data` or
`allocate_index_data`. Each returns a writable `memoryview` on the new
buffer space.

## Writing files

To write a JSON glTF document next to a separate binary file, give the
buffer a URI and save both files:

```python
buffer.uri = "triangle.bin"
buffer.save("triangle.bin")
asset.save_gltf("triangle.gltf", indent=2)
```

`Asset.to_string(indent)` returns the JSON text and `Asset.to_json()`
returns it as a dictionary. A negative indent, which is the default, gives
compact output. Keys are written in sorted order.

`Asset.save_glb` writes one `.glb` container holding the JSON and the
asset's first buffer. If the asset has no buffer, it raises `ValueError`.
`GLBContainer(asset).to_bytes()` (`gltfwriter.glb`) returns the same bytes
without writing a file.

## Nodes

A node's transform is either a 16-value matrix (`set_matrix`) or a
translation, rotation and scale (`set_translation`, `set_rotation`,
`set_scale`, `set_trs`). Rotations are quaternions given as x, y, z, w.
Setting a matrix clears the TRS values, and setting any TRS value clears
the matrix. Use `add_child` to attach children.

## Materials and textures

```python
from gltfwriter.material import PBRMetallicRoughness

texture = asset.create_texture_from_uri("albedo.png", asset.create_sampler())

pbr = PBRMetallicRoughness()
pbr.set_base_color_texture(texture)
pbr.metallic_factor = 0.0

material = asset.create_material("surface")
material.set_pbr_metallic_roughness(pbr)
mesh.set_material(material)
```

`set_pbr_metallic_roughness` stores a copy of the settings it is given.
A `Material` has these setters: `set_normal_texture`,
`set_occlusion_texture` and `set_emissive_texture`. It also has these
attributes: `emissive_factor`, `alpha_mode` (an `AlphaMode`),
`alpha_cutoff` and `double_sided`. A property is written out only when it
differs from the glTF default.

`create_texture_from_file(buffer, path)` embeds an image file in a buffer.
Files ending in `.png` or `.PNG` are marked `image/png`; every other file
is marked `image/jpeg`. Samplers take `MagFilter`, `MinFilter` and
`WrapMode` values through `set_filter` and `set_wrap_mode`.

## Cameras

`Asset.create_camera` creates a plain `Camera`, which holds only a
clipping range (`set_z_range`). The `PerspectiveCamera` and
`OrthographicCamera` classes in `gltfwriter.camera` write the full
`perspective` or `orthographic` block. The asset has no factory for them.
To add one, construct it with the next index and append it to
`asset.cameras`:

```python
from gltfwriter.camera import PerspectiveCamera

camera = PerspectiveCamera(len(asset.cameras), "main")
camera.set_perspective(aspect=1.5, yfov=0.8)
asset.cameras.append(camera)
scene.add_node(asset.create_camera_node(camera))
```

## Extensions and extras

Any element can carry extensions and extras: use `add_extension` and
`set_extras`. `Asset.add_extension(extension, is_required)` lists an
extension under `extensionsUsed` and, if it is required, also under
`extensionsRequired`. `DracoExtension` (`gltfwriter.draco`) writes the
`KHR_draco_mesh_compression` block. It refers to a buffer view that
already holds encoded data, plus a list of attribute indices.

## What the package does not do

- It only writes glTF. It cannot read or parse `.gltf` or `.glb` files.
- Skins and animations carry only a name, extensions and extras. There are
  no joints, samplers or channels.
- It does not compress meshes. The Draco extension only describes data
  that was encoded elsewhere.
- It provides no command-line program.

## Other helpers

The package also includes a few small utilities:

- `gltfwriter.bits`: `set_bit`, `clear_bit`, `toggle_bit`, `test_bit`,
  `ceil2`, `ceil4`, `ceil8` and `ceil_pow2`.
- `gltfwriter.result.Result`: a frozen value object holding a
  `ResultState`, a message and an optional value.
- `gltfwriter.singleton`: the `AutoSingleton` and `Singleton` base
  classes, which raise `SingletonError` when misused.