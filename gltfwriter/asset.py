"""The glTF asset: owner and factory of all elements."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from .accessor import Accessor
from .animation import Animation
from .asset_info import AssetInfo
from .buffer import Buffer, BufferView
from .camera import Camera
from .constants import (
    AccessorComponent,
    AccessorType,
    BufferViewTarget,
    GLTFVersion,
    MimeType,
)
from .element import Element, Extension, MainElement, dump_json
from .glb import GLBContainer
from .image import Image
from .material import Material
from .mesh import Mesh
from .node import CameraNode, MeshNode, Node, SkinNode
from .sampler import Sampler
from .scene import Scene
from .skin import Skin
from .texture import Texture

PathLike = Union[str, os.PathLike]


class Asset(Element):
    """A complete glTF document with all its elements."""

    def __init__(self) -> None:
        super().__init__()
        self.info = AssetInfo()
        self.main_scene: Optional[Scene] = None
        self.extensions_used: list[Extension] = []
        self.extensions_required: list[str] = []
        self.scenes: list[Scene] = []
        self.nodes: list[Node] = []
        self.meshes: list[Mesh] = []
        self.skins: list[Skin] = []
        self.cameras: list[Camera] = []
        self._buffers: list[Buffer] = []
        self.buffer_views: list[BufferView] = []
        self.accessors: list[Accessor] = []
        self.materials: list[Material] = []
        self.textures: list[Texture] = []
        self.images: list[Image] = []
        self.samplers: list[Sampler] = []
        self.animations: list[Animation] = []

    # Output

    def save_gltf(self, gltf_file_path: PathLike, indent: int = -1) -> None:
        """Write the asset as a JSON glTF file."""
        Path(gltf_file_path).write_text(self.to_string(indent), encoding="utf-8")

    def save_glb(self, glb_file_path: PathLike) -> None:
        """Write the asset and its first buffer as a GLB file."""
        GLBContainer(self).save(glb_file_path)

    # Settings

    def set_main_scene(self, scene: Optional[Scene]) -> None:
        self.main_scene = scene

    def set_version(
        self, version: GLTFVersion, min_version: GLTFVersion = GLTFVersion.UNDEFINED
    ) -> None:
        self.info.version = GLTFVersion(version)
        self.info.min_version = GLTFVersion(min_version)

    def set_generator(self, generator: str) -> None:
        self.info.generator = generator

    def set_copyright(self, copyright: str) -> None:
        self.info.copyright = copyright

    def add_extension(self, extension: Extension, is_required: bool = False) -> None:
        """Declare an extension as used, and optionally as required."""
        self.extensions_used.append(extension)
        if is_required:
            self.extensions_required.append(extension.name())

    # Factories

    def create_scene(self, name: str = "") -> Scene:
        scene = Scene(len(self.scenes), name)
        self.scenes.append(scene)
        return scene

    def create_node(self, name: str = "") -> Node:
        node = Node(len(self.nodes), name)
        self.nodes.append(node)
        return node

    def create_mesh_node(self, mesh: Mesh, name: str = "") -> MeshNode:
        node = MeshNode(len(self.nodes), mesh, name)
        self.nodes.append(node)
        return node

    def create_skin_node(self, skin: Skin, name: str = "") -> SkinNode:
        node = SkinNode(len(self.nodes), skin, name)
        self.nodes.append(node)
        return node

    def create_camera_node(self, camera: Camera, name: str = "") -> CameraNode:
        node = CameraNode(len(self.nodes), camera, name)
        self.nodes.append(node)
        return node

    def create_mesh(self, name: str = "") -> Mesh:
        mesh = Mesh(len(self.meshes), name)
        self.meshes.append(mesh)
        return mesh

    def create_skin(self, name: str = "") -> Skin:
        skin = Skin(len(self.skins), name)
        self.skins.append(skin)
        return skin

    def create_camera(self, name: str = "") -> Camera:
        camera = Camera(len(self.cameras), name)
        self.cameras.append(camera)
        return camera

    def create_buffer(self, name: str = "") -> Buffer:
        buffer = Buffer(len(self._buffers), name, create_view=self._create_buffer_view)
        self._buffers.append(buffer)
        return buffer

    def create_accessor(
        self, accessor_type: AccessorType, component: AccessorComponent, name: str = ""
    ) -> Accessor:
        accessor = Accessor(len(self.accessors), accessor_type, component, name)
        self.accessors.append(accessor)
        return accessor

    def create_material(self, name: str = "") -> Material:
        material = Material(len(self.materials), name)
        self.materials.append(material)
        return material

    def create_texture(
        self, image: Optional[Image], sampler: Optional[Sampler] = None
    ) -> Texture:
        texture = Texture(len(self.textures))
        texture.set_source(image, sampler)
        self.textures.append(texture)
        return texture

    def create_texture_from_uri(
        self, image_uri: str, sampler: Optional[Sampler] = None
    ) -> Texture:
        return self.create_texture(self.create_image(image_uri), sampler)

    def create_texture_from_file(
        self, buffer: Buffer, image_file_path: PathLike, sampler: Optional[Sampler] = None
    ) -> Texture:
        """Embed an image file in the buffer and create a texture for it.

        Files ending in .png or .PNG are marked as PNG, all others as JPEG.
        """
        view = buffer.add_image(image_file_path)
        view.target = BufferViewTarget.UNDEFINED
        ext = os.fspath(image_file_path).rsplit(".", 1)[-1]
        mime_type = MimeType.IMAGE_PNG if ext in ("png", "PNG") else MimeType.IMAGE_JPEG
        return self.create_texture(self.create_image_from_buffer_view(view, mime_type), sampler)

    def create_texture_from_buffer_view(
        self, buffer_view: BufferView, mime_type: MimeType, sampler: Optional[Sampler] = None
    ) -> Texture:
        image = self.create_image_from_buffer_view(buffer_view, mime_type)
        return self.create_texture(image, sampler)

    def create_image(self, image_uri: str) -> Image:
        image = Image(len(self.images))
        image.set_uri(image_uri)
        self.images.append(image)
        return image

    def create_image_from_buffer_view(
        self, buffer_view: BufferView, mime_type: MimeType
    ) -> Image:
        image = Image(len(self.images))
        image.set_buffer_view(buffer_view, mime_type)
        self.images.append(image)
        return image

    def create_sampler(self) -> Sampler:
        sampler = Sampler(len(self.samplers))
        self.samplers.append(sampler)
        return sampler

    def create_animation(self, name: str = "") -> Animation:
        animation = Animation(len(self.animations), name)
        self.animations.append(animation)
        return animation

    # Queries and serialization

    def buffers(self) -> list[Buffer]:
        """Return the asset's buffers in index order."""
        return list(self._buffers)

    def _create_buffer_view(self) -> BufferView:
        view = BufferView(len(self.buffer_views))
        self.buffer_views.append(view)
        return view

    def to_json(self) -> dict[str, Any]:
        result = super().to_json()
        result["asset"] = self.info.to_json()
        if self.main_scene is not None:
            result["scene"] = self.main_scene.index
        if self.extensions_used:
            result["extensionsUsed"] = [ext.name() for ext in self.extensions_used]
        if self.extensions_required:
            result["extensionsRequired"] = list(self.extensions_required)

        collections: Sequence[tuple[str, Sequence[MainElement]]] = (
            ("scenes", self.scenes),
            ("nodes", self.nodes),
            ("meshes", self.meshes),
            ("skins", self.skins),
            ("cameras", self.cameras),
            ("buffers", self._buffers),
            ("bufferViews", self.buffer_views),
            ("accessors", self.accessors),
            ("materials", self.materials),
            ("textures", self.textures),
            ("images", self.images),
            ("samplers", self.samplers),
            ("animations", self.animations),
        )
        for key, elements in collections:
            if elements:
                result[key] = [element.to_json() for element in elements]
        return result

    def to_string(self, indent: int = -1) -> str:
        return dump_json(self.to_json(), indent)