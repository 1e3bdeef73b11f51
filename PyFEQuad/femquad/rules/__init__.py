# 文件: PyFEQuad/femquad/rules/__init__.py
"""
单元积分表

分层结构:
- interfaces.py: 积分规则记录、生成器基类和张量积辅助函数
- point.py: 点单元
- line.py: 一维 Gauss-Legendre
- simplex.py: 三角形、四面体
- tensor.py: 四边形、六面体 (由 line 组合)

扩展指南:
    添加新单元的积分表:
        1. 继承 RuleGenerator，声明 orders 和 fallback_order
        2. 实现 _table(order) 方法
        3. 在 quadrature.py 的生成器表中登记
"""

from .interfaces import (
    QuadratureRule,
    RuleData,
    RuleGenerator,
    pad_points,
    tensor_product,
)
from .point import PointRule
from .line import LineRule
from .simplex import TriangleRule, TetrahedronRule
from .tensor import TensorProductRule, QuadrilateralRule, HexahedronRule


__all__ = [
    # 核心接口
    'QuadratureRule',
    'RuleData',
    'RuleGenerator',
    'pad_points',
    'tensor_product',

    # 单元积分表
    'PointRule',
    'LineRule',
    'TriangleRule',
    'TetrahedronRule',
    'TensorProductRule',
    'QuadrilateralRule',
    'HexahedronRule',
]
