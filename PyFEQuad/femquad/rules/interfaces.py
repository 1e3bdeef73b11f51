# 文件: PyFEQuad/femquad/rules/interfaces.py
"""
积分规则核心接口定义

设计原则:
1. QuadratureRule: 对外返回的不可变积分规则记录
2. RuleData: 单元积分表生成器的原始输出 (权重、积分点、精度、实际使用的表阶数)
3. RuleGenerator: 所有单元积分表的抽象基类，统一处理阶数回退
"""

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from ..element_type import ElementType


def _readonly(a: np.ndarray) -> np.ndarray:
    a.setflags(write=False)
    return a


def pad_points(coords) -> np.ndarray:
    """
    将 (n, d) 局部坐标补齐为 (n, 3)，未使用的分量取 0

    Args:
        coords: 局部坐标，可为一维 (n,) 或二维 (n, d)，d <= 3
    """
    coords = np.asarray(coords, dtype=np.float64)
    if coords.ndim == 1:
        coords = coords.reshape(-1, 1)
    n, d = coords.shape
    if d > 3:
        raise ValueError(f"Points must have at most 3 coordinates, got {d}")
    points = np.zeros((n, 3))
    points[:, :d] = coords
    return points


@dataclass(frozen=True, eq=False)
class QuadratureRule:
    """
    积分规则 (不可变)

    Attributes:
        weights: 积分权重 (nint,)，与 points 按下标一一对应，可能含负值
        points: 积分点局部坐标 (nint, 3)，未使用的分量为 0
        itg_order: 归一化后的积分阶数 (已应用默认值，未应用回退)
        accuracy: 能精确积分的多项式最高次数，点单元为 None
        element_type: 单元类型
        table_order: 实际使用的积分表阶数 (回退后)

    Example:
        rule = build(ElementType.Quadrilateral, 1)
        for xi, w in rule:
            Ke += B(xi).T @ D @ B(xi) * detJ(xi) * w
    """
    weights: np.ndarray
    points: np.ndarray
    itg_order: int
    accuracy: Optional[int]
    element_type: Optional[ElementType] = None
    table_order: Optional[int] = None

    def __post_init__(self):
        weights = np.array(self.weights, dtype=np.float64).reshape(-1)
        points = np.array(self.points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError(f"Points must have shape (n, 3), got {points.shape}")
        if len(weights) != len(points):
            raise ValueError(
                f"Got {len(weights)} weights for {len(points)} points"
            )
        if len(weights) == 0:
            raise ValueError("A quadrature rule needs at least one point")

        # 冻结 dataclass 只能通过 object.__setattr__ 写入
        object.__setattr__(self, 'weights', _readonly(weights))
        object.__setattr__(self, 'points', _readonly(points))
        if self.table_order is None:
            object.__setattr__(self, 'table_order', self.itg_order)

    @property
    def nint(self) -> int:
        """积分点个数"""
        return len(self.weights)

    def as_table(self) -> np.ndarray:
        """
        返回 [weights, points] 组成的 (nint, 4) 表，
        第 0 列为权重，第 1~3 列为局部坐标
        """
        return np.column_stack([self.weights, self.points])

    def __iter__(self) -> Iterator[Tuple[np.ndarray, float]]:
        for i in range(self.nint):
            yield self.points[i], float(self.weights[i])

    def __len__(self) -> int:
        return self.nint

    def __repr__(self) -> str:
        return (
            f"QuadratureRule({self.element_type}, nint={self.nint}, "
            f"itg_order={self.itg_order}, table_order={self.table_order}, "
            f"accuracy={self.accuracy})"
        )


@dataclass
class RuleData:
    """
    积分表生成器的输出

    Attributes:
        weights: 权重 (n,)
        points: 积分点 (n, 3)
        accuracy: 代数精度 (点单元为 None)
        order: 实际使用的表阶数
    """
    weights: np.ndarray
    points: np.ndarray
    accuracy: Optional[int]
    order: int


class RuleGenerator(ABC):
    """
    单元积分表生成器抽象基类

    子类只需声明:
    - orders: 有积分表的阶数
    - fallback_order: 请求阶数不在 orders 中时使用的阶数
    - _table(order): 返回 (weights, points, accuracy)

    注意: 回退目标是固定的阶数，而不是最接近的阶数。
    """
    orders: Tuple[int, ...] = ()
    fallback_order: int = 1

    def has_order(self, order: int) -> bool:
        return order in self.orders

    def resolve_order(self, order: int) -> int:
        """返回实际使用的表阶数"""
        if self.has_order(order):
            return order
        return self.fallback_order

    def generate(self, order: int) -> RuleData:
        """
        生成指定阶数的积分表 (每次调用都返回新分配的数组)

        Args:
            order: 归一化后的积分阶数

        Returns:
            RuleData: 权重、积分点、精度和实际使用的阶数
        """
        table_order = self.resolve_order(order)
        weights, points, accuracy = self._table(table_order)
        return RuleData(
            weights=np.array(weights, dtype=np.float64).reshape(-1),
            points=pad_points(points),
            accuracy=accuracy,
            order=table_order,
        )

    @abstractmethod
    def _table(self, order: int) -> Tuple[Sequence[float], Sequence, Optional[int]]:
        """抽象方法：返回已定义阶数的 (weights, points, accuracy)。"""
        pass


# =============================================================================
# 辅助函数
# =============================================================================

def tensor_product(weights_1d, points_1d, dim: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    由一维规则构造 dim 维张量积规则

    积分点为一维坐标的 dim 重笛卡尔积 (x 变化最快，其次 y，再次 z)，
    权重为对应一维权重之积。

    Args:
        weights_1d: 一维权重 (n,)
        points_1d: 一维坐标 (n,)
        dim: 维数 (1, 2 或 3)

    Returns:
        (weights, coords): 权重 (n^dim,) 和坐标 (n^dim, dim)
    """
    w = np.asarray(weights_1d, dtype=np.float64).reshape(-1)
    x = np.asarray(points_1d, dtype=np.float64).reshape(-1)
    if len(w) != len(x):
        raise ValueError(f"Got {len(w)} weights for {len(x)} points")
    if dim not in (1, 2, 3):
        raise ValueError(f"Tensor product dimension must be 1, 2 or 3, got {dim}")

    # itertools.product 最后一个下标变化最快，翻转后 x 变化最快
    idx = np.array(list(itertools.product(range(len(x)), repeat=dim)), dtype=int)
    idx = idx[:, ::-1]

    coords = x[idx]
    weights = np.prod(w[idx], axis=1)
    return weights, coords
