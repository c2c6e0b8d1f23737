"""Plain descriptions of GPU buffers, pipelines, render passes and material parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Any, Optional


class ShaderStage(IntFlag):
    NONE = 0
    VERTEX = 1 << 0
    FRAGMENT = 1 << 1
    ALL = VERTEX | FRAGMENT


class VertexFormat(Enum):
    FLOAT32X2 = "float32x2"
    FLOAT32X3 = "float32x3"
    FLOAT32X4 = "float32x4"
    UINT32 = "uint32"


class VertexStepMode(Enum):
    VERTEX = "vertex"
    INSTANCE = "instance"


class IndexFormat(Enum):
    UINT16 = "uint16"
    UINT32 = "uint32"


class LoadOp(Enum):
    CLEAR = "clear"
    LOAD = "load"


class StoreOp(Enum):
    STORE = "store"
    DISCARD = "discard"


@dataclass
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0


@dataclass
class UniformBuffer:
    buffer: Any = None
    size: int = 0
    binding: int = 0
    label: str = "Uniform Buffer"


@dataclass
class VertexBuffer:
    buffer: Any = None
    size: int = 0
    slot: int = 0
    label: str = "Vertex Buffer"


@dataclass
class IndexBuffer:
    buffer: Any = None
    size: int = 0
    format: IndexFormat = IndexFormat.UINT32
    label: str = "Index Buffer"


@dataclass
class StorageBuffer:
    buffer: Any = None
    size: int = 0
    binding: int = 0
    label: str = "Storage Buffer"


@dataclass
class VertexAttributeSpec:
    shader_location: int = 0
    format: VertexFormat = VertexFormat.FLOAT32X3
    offset: int = 0


@dataclass
class VertexBufferLayoutSpec:
    stride: int = 0
    step_mode: VertexStepMode = VertexStepMode.VERTEX
    attributes: list[VertexAttributeSpec] = field(default_factory=list)


@dataclass
class UniformBufferSpec:
    binding: int
    size: int
    visibility: ShaderStage


@dataclass
class StorageBufferSpec:
    binding: int
    size: int
    visibility: ShaderStage


@dataclass
class PipelineSpecification:
    shader: Any = None
    surface_format: Any = None
    vertex_buffers: list[VertexBufferLayoutSpec] = field(default_factory=list)
    uniforms: list[UniformBufferSpec] = field(default_factory=list)
    storages: list[StorageBufferSpec] = field(default_factory=list)
    depth_view: Any = None
    depth_format: Any = None


@dataclass
class RenderPassAttachment:
    view: Any = None
    load_op: LoadOp = LoadOp.CLEAR
    store_op: StoreOp = StoreOp.STORE
    clear_color: Color = field(default_factory=lambda: Color(0.0, 0.0, 0.0, 1.0))
    clear_depth: float = 1.0
    clear_stencil: int = 0
    read_only_depth: bool = False


@dataclass
class RenderPassDesc:
    name: str = "UnnamedPass"
    color_attachments: list[RenderPassAttachment] = field(default_factory=list)
    depth_stencil_attachment: RenderPassAttachment = field(
        default_factory=RenderPassAttachment
    )


class MaterialParamType(Enum):
    FLOAT = "float"
    FLOAT2 = "float2"
    FLOAT3 = "float3"
    FLOAT4 = "float4"
    INT = "int"
    INT2 = "int2"
    INT3 = "int3"
    INT4 = "int4"
    MATRIX4X4 = "matrix4x4"
    CUSTOM = "custom"


_SCALAR_SIZE = 4

_COMPONENTS = {
    MaterialParamType.FLOAT: 1,
    MaterialParamType.FLOAT2: 2,
    MaterialParamType.FLOAT3: 3,
    MaterialParamType.FLOAT4: 4,
    MaterialParamType.INT: 1,
    MaterialParamType.INT2: 2,
    MaterialParamType.INT3: 3,
    MaterialParamType.INT4: 4,
    MaterialParamType.MATRIX4X4: 16,
}


def parameter_size(param_type: MaterialParamType) -> int:
    """Byte size of a fixed-size material parameter type."""
    try:
        return _COMPONENTS[MaterialParamType(param_type)] * _SCALAR_SIZE
    except KeyError:
        raise ValueError(f"{param_type} has no fixed size") from None


@dataclass
class MaterialParam:
    type: MaterialParamType
    binding: int
    size: int
    visibility: ShaderStage
    data: Optional[bytearray] = None

    def __post_init__(self) -> None:
        if self.data is None:
            self.data = bytearray()