import pytest

from terra.descriptors import (
    Color,
    IndexBuffer,
    IndexFormat,
    LoadOp,
    MaterialParam,
    MaterialParamType,
    PipelineSpecification,
    RenderPassAttachment,
    RenderPassDesc,
    ShaderStage,
    StorageBuffer,
    StoreOp,
    UniformBuffer,
    VertexAttributeSpec,
    VertexBuffer,
    VertexBufferLayoutSpec,
    VertexFormat,
    VertexStepMode,
    parameter_size,
)


def test_shader_stage_all_is_union():
    assert ShaderStage(1) is ShaderStage.VERTEX
    assert ShaderStage(2) is ShaderStage.FRAGMENT
    assert ShaderStage(3) == ShaderStage.ALL
    assert ShaderStage(0) == ShaderStage.NONE


def test_buffer_default_labels():
    assert UniformBuffer().label == "Uniform Buffer"
    assert VertexBuffer().label == "Vertex Buffer"
    assert IndexBuffer().label == "Index Buffer"
    assert StorageBuffer().label == "Storage Buffer"


def test_index_buffer_default_format():
    assert IndexBuffer().format is IndexFormat.UINT32


def test_vertex_layout_defaults():
    layout = VertexBufferLayoutSpec()
    assert layout.step_mode is VertexStepMode.VERTEX
    assert layout.attributes == []
    assert VertexAttributeSpec().format is VertexFormat.FLOAT32X3


def test_layouts_do_not_share_lists():
    a, b = VertexBufferLayoutSpec(), VertexBufferLayoutSpec()
    a.attributes.append(VertexAttributeSpec(shader_location=1))
    assert b.attributes == []


def test_pipeline_spec_lists_independent():
    a, b = PipelineSpecification(), PipelineSpecification()
    a.uniforms.append(None)
    assert b.uniforms == []


def test_render_pass_attachment_defaults():
    att = RenderPassAttachment()
    assert att.load_op is LoadOp.CLEAR
    assert att.store_op is StoreOp.STORE
    assert att.clear_color == Color(0.0, 0.0, 0.0, 1.0)
    assert att.clear_depth == 1.0
    assert att.read_only_depth is False


def test_render_pass_desc_defaults():
    desc = RenderPassDesc()
    assert desc.name == "UnnamedPass"
    assert desc.color_attachments == []
    assert desc.depth_stencil_attachment.view is None


def test_parameter_size_scalar():
    assert parameter_size(MaterialParamType.FLOAT) == 4


def test_parameter_size_relations():
    scalar = parameter_size(MaterialParamType.FLOAT)
    assert parameter_size(MaterialParamType.INT) == scalar
    assert parameter_size(MaterialParamType.FLOAT2) == 2 * scalar
    assert parameter_size(MaterialParamType.FLOAT3) == 3 * scalar
    assert parameter_size(MaterialParamType.INT4) == parameter_size(MaterialParamType.FLOAT4)
    assert parameter_size(MaterialParamType.MATRIX4X4) == 4 * parameter_size(
        MaterialParamType.FLOAT4
    )


def test_parameter_size_custom_raises():
    with pytest.raises(ValueError):
        parameter_size(MaterialParamType.CUSTOM)


def test_material_param_data_starts_empty():
    param = MaterialParam(MaterialParamType.FLOAT, 2, 4, ShaderStage.FRAGMENT)
    assert param.data == bytearray()
    assert param.binding == 2