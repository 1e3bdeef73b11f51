# 文件: PyFEQuad/femquad/rules/line.py
"""
一维 Gauss-Legendre 积分

参考单元 [-1, 1]，长度为 2。
"""

from .interfaces import RuleGenerator


# 1/sqrt(3) = 0.577350269189626
_G2 = 0.577350269189626
# sqrt(3/5) = 0.774596669241483
_G3 = 0.774596669241483
# A = sqrt((15+2*sqrt(30))/35), B = sqrt((15-2*sqrt(30))/35)
_G4A = 0.861136311594053
_G4B = 0.339981043584856
# C = (18-sqrt(30))/36, D = (18+sqrt(30))/36
_W4A = 0.347854845137454
_W4B = 0.652145154862546

# order: (points, weights, accuracy)
LINE_TABLE = {
    0: ((0.0,), (2.0,), 2),
    1: ((-_G2, _G2), (1.0, 1.0), 4),
    2: ((-_G3, 0.0, _G3),
        (0.555555555555556, 0.888888888888889, 0.555555555555556), 6),
    3: ((-_G4A, -_G4B, _G4B, _G4A), (_W4A, _W4B, _W4B, _W4A), 8),
}


class LineRule(RuleGenerator):
    """
    一维 Gauss-Legendre 积分表

    阶数 k 对应 k+1 个积分点 (k = 0, 1, 2, 3)。
    其他阶数一律回退到 2 点规则 (阶数 1)。

    Example:
        data = LineRule().generate(2)
        data.weights    # [5/9, 8/9, 5/9]
    """
    orders = tuple(sorted(LINE_TABLE))
    fallback_order = 1

    def _table(self, order):
        points, weights, accuracy = LINE_TABLE[order]
        return weights, points, accuracy

    def abscissae(self, order: int):
        """
        返回一维 (weights, points, accuracy)，供张量积单元使用

        Args:
            order: 积分阶数 (按本规则的回退策略处理)
        """
        return self._table(self.resolve_order(order))

    def __repr__(self) -> str:
        return f"LineRule(orders={self.orders})"
