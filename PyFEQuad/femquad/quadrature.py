# 文件: PyFEQuad/femquad/quadrature.py
"""
数值积分模块

根据单元类型和积分阶数返回参考单元上的积分点和权重。
负责阶数归一化 (默认值 / 回退) 并分派到各单元的积分表。

Example:
    rule = build(ElementType.Quadrilateral, 1)
    rule.as_table()
    # [[ 1.     -0.5774 -0.5774  0.    ]
    #  [ 1.      0.5774 -0.5774  0.    ]
    #  [ 1.     -0.5774  0.5774  0.    ]
    #  [ 1.      0.5774  0.5774  0.    ]]
"""

from types import MappingProxyType
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from .element_type import ElementType
from .rules import (
    QuadratureRule,
    RuleGenerator,
    PointRule,
    LineRule,
    TriangleRule,
    QuadrilateralRule,
    TetrahedronRule,
    HexahedronRule,
)


def _default_generators() -> Dict[ElementType, RuleGenerator]:
    line = LineRule()
    return {
        ElementType.Point: PointRule(),
        ElementType.Line: line,
        ElementType.Triangle: TriangleRule(),
        ElementType.Quadrilateral: QuadrilateralRule(line),
        ElementType.Tetrahedron: TetrahedronRule(),
        ElementType.Hexahedron: HexahedronRule(line),
    }


class QuadratureRules:
    """
    积分规则提供器

    特性：
    1. 未给定或为负的阶数替换为单元默认阶数 (四面体 0，其余 1)
    2. 没有积分表的阶数静默回退到该单元的固定阶数，从不失败
    3. 返回的 QuadratureRule 不可变，每次调用都是新的数组

    itg_order 记录归一化后的请求阶数 (不含回退)，
    实际使用的积分表阶数见 table_order。
    """

    def __init__(self, config=None):
        """
        Args:
            config: 配置字典 (default_order, default_orders, strict)，
                    未给出的键取默认值
        """
        defaults = {
            "default_order": 1,
            "default_orders": {ElementType.Tetrahedron: 0},
            "strict": False,     # True: 没有积分表的阶数抛出 ValueError
        }
        config = dict(config or {})
        unknown = set(config) - set(defaults)
        if unknown:
            raise ValueError(f"Unknown quadrature config keys: {sorted(unknown)}")
        defaults.update(config)

        default_orders = dict(defaults["default_orders"])
        for key, value in default_orders.items():
            if not isinstance(key, ElementType):
                raise ValueError(f"default_orders key must be an ElementType, got {key!r}")
            self._check_default_order(value)
        self._check_default_order(defaults["default_order"])

        # 配置在构造后只读
        defaults["default_orders"] = MappingProxyType(default_orders)
        self.config = MappingProxyType(defaults)

        self._generators = _default_generators()
        self.log_callback: Optional[Callable[[str], None]] = None

    def set_log_callback(self, callback):
        """设置日志回调 (例如 print)，None 表示不输出"""
        self.log_callback = callback

    def _log(self, message: str):
        if self.log_callback is not None:
            self.log_callback(message)

    @staticmethod
    def _check_order_type(order):
        # bool 是 int 的子类，需单独排除
        if isinstance(order, bool) or not isinstance(order, (int, np.integer)):
            raise TypeError(f"Integration order must be an integer, got {order!r}")

    @classmethod
    def _check_default_order(cls, order):
        cls._check_order_type(order)
        if order < 0:
            raise ValueError(f"Default integration order must be non-negative, got {order}")

    def _generator(self, element_type) -> RuleGenerator:
        try:
            generator = self._generators.get(element_type)
        except TypeError:
            generator = None
        if generator is None:
            raise ValueError(f"Element type {element_type!r} not supported.")
        return generator

    def default_order(self, element_type: ElementType) -> int:
        """单元的默认积分阶数"""
        return int(self.config["default_orders"].get(element_type, self.config["default_order"]))

    def normalize_order(self, element_type: ElementType, order=None) -> int:
        """
        阶数归一化：None 或负数替换为默认阶数

        Args:
            element_type: 单元类型
            order: 请求的积分阶数

        Returns:
            int: 归一化后的阶数 (不含回退)
        """
        self._generator(element_type)
        return self._normalize(element_type, order)

    def _normalize(self, element_type, order) -> int:
        if order is None:
            return self.default_order(element_type)
        self._check_order_type(order)
        order = int(order)
        if order < 0:
            return self.default_order(element_type)
        return order

    def available_orders(self, element_type: ElementType) -> Tuple[int, ...]:
        """返回该单元有积分表的阶数 (点单元返回空元组，表示任意阶数)"""
        return tuple(self._generator(element_type).orders)

    def build(self, element_type: ElementType, order=None) -> QuadratureRule:
        """
        构造积分规则

        Args:
            element_type: 单元类型
            order: 积分阶数 (可选)

        Returns:
            QuadratureRule: 权重、积分点、积分点数、阶数和精度

        Raises:
            ValueError: 单元类型不支持，或 strict 模式下阶数没有积分表
            TypeError: 阶数不是整数
        """
        generator = self._generator(element_type)
        itg_order = self._normalize(element_type, order)

        table_order = generator.resolve_order(itg_order)
        if table_order != itg_order:
            if self.config["strict"]:
                raise ValueError(
                    f"Integration order {itg_order} not supported for {element_type}. "
                    f"Available orders: {generator.orders}"
                )
            self._log(
                f"Warning: {element_type} 积分阶数 {itg_order} 无积分表，"
                f"使用阶数 {table_order}"
            )

        data = generator.generate(itg_order)
        return QuadratureRule(
            weights=data.weights,
            points=data.points,
            itg_order=itg_order,
            accuracy=data.accuracy,
            element_type=element_type,
            table_order=data.order,
        )


_DEFAULT_RULES = QuadratureRules()


def build(element_type: ElementType, order=None) -> QuadratureRule:
    """
    使用默认配置构造积分规则

    Example:
        rule = build(ElementType.Line, 1)
        rule.points[:, 0]   # [-0.57735, 0.57735]
        rule.weights        # [1.0, 1.0]
    """
    return _DEFAULT_RULES.build(element_type, order)
