# 文件: PyFEQuad/femquad/rules/tensor.py
"""
张量积单元积分 (四边形、六面体)

积分点由一维 Gauss-Legendre 规则逐轴组合而成，不单独维护常数表:
- 四边形 [-1,1]^2: 2 重笛卡尔积
- 六面体 [-1,1]^3: 3 重笛卡尔积

accuracy 沿用一维规则的精度 (逐轴代数精度)，不做加倍。
"""

from typing import Optional

from .interfaces import RuleGenerator, tensor_product
from .line import LineRule


class TensorProductRule(RuleGenerator):
    """
    由 LineRule 构造的张量积积分

    Args:
        dim: 维数
        line: 一维规则 (默认 LineRule())
    """
    orders = (0, 1, 2)
    fallback_order = 1

    def __init__(self, dim: int, line: Optional[LineRule] = None):
        if dim not in (2, 3):
            raise ValueError(f"Tensor product rules need dim 2 or 3, got {dim}")
        self.dim = dim
        self.line = line or LineRule()

    def _table(self, order):
        w1, x1, accuracy = self.line.abscissae(order)
        weights, coords = tensor_product(w1, x1, self.dim)
        return weights, coords, accuracy

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dim={self.dim}, orders={self.orders})"


class QuadrilateralRule(TensorProductRule):
    """四边形积分: 阶数 0/1/2 对应 1/4/9 个积分点，其他阶数回退到阶数 1"""

    def __init__(self, line: Optional[LineRule] = None):
        super().__init__(dim=2, line=line)


class HexahedronRule(TensorProductRule):
    """六面体积分: 阶数 0/1/2 对应 1/8/27 个积分点，其他阶数回退到阶数 1"""

    def __init__(self, line: Optional[LineRule] = None):
        super().__init__(dim=3, line=line)
