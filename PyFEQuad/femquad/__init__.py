# 文件: PyFEQuad/femquad/__init__.py
"""
PyFEQuad 有限元参考单元数值积分

使用方法:
    from femquad import ElementType, build

    rule = build(ElementType.Hexahedron, 1)
    for xi, w in rule:
        ...                    # 在 xi 处计算形函数 / 雅可比，累加 w * f(xi)

    rule.nint                  # 积分点数 8
    rule.accuracy              # 代数精度 4
"""

from .element_type import ElementType
from .quadrature import QuadratureRules, build
from .rules import (
    QuadratureRule,
    RuleData,
    RuleGenerator,
    PointRule,
    LineRule,
    TriangleRule,
    TetrahedronRule,
    TensorProductRule,
    QuadrilateralRule,
    HexahedronRule,
    tensor_product,
)


__all__ = [
    'ElementType',
    'QuadratureRules',
    'QuadratureRule',
    'build',

    # 单元积分表
    'RuleData',
    'RuleGenerator',
    'PointRule',
    'LineRule',
    'TriangleRule',
    'TetrahedronRule',
    'TensorProductRule',
    'QuadrilateralRule',
    'HexahedronRule',
    'tensor_product',
]
