# 文件: PyFEQuad/femquad/rules/point.py
"""
点单元积分

退化情形: 单个积分点位于原点，权重为 1，
点没有多项式代数精度，accuracy 为 None。
"""

from .interfaces import RuleGenerator


class PointRule(RuleGenerator):
    """点单元积分 (忽略阶数)"""

    def resolve_order(self, order: int) -> int:
        return order

    def _table(self, order):
        return (1.0,), ((0.0, 0.0, 0.0),), None

    def __repr__(self) -> str:
        return "PointRule()"
