# 文件: PyFEQuad/femquad/rules/simplex.py
"""
单纯形单元积分 (三角形、四面体)

对称积分公式 (Hammer-Stroud / Strang-Fix)，
权重已乘以参考单元的测度因子:
- 三角形 (0,0),(1,0),(0,1): 因子 1/2
- 四面体 (0,0,0),(1,0,0),(0,1,0),(0,0,1): 因子 1/6

注意: 部分公式含负权重，调用方不能假设权重为正。
"""

from .interfaces import RuleGenerator


_THIRD = 0.333333333333333
_SIXTH = 0.166666666666667

# nint  O(n) pts pts weight
#    1    1  1/3 1/3 1/2
#    3    2  1/2   0 1/6
#    4    3  0.2 0.2 25/48 (x3), 1/3 1/3 -9/16
#    6    4  a   a   0.109951743655322 (x3), b b 0.223381589678011 (x3)
_TRI_A = 0.091576213509771
_TRI_A2 = 0.816847572980459
_TRI_B = 0.445948490915965
_TRI_B2 = 0.108103018168070

# order: (points, weights, accuracy)，权重已乘 1/2
TRIANGLE_TABLE = {
    0: (((_THIRD, _THIRD),), (0.5,), 1),
    1: (((0.5, 0.0), (0.5, 0.5), (0.0, 0.5)),
        (_SIXTH, _SIXTH, _SIXTH), 2),
    2: (((0.2, 0.2), (0.6, 0.2), (0.2, 0.6), (_THIRD, _THIRD)),
        (0.260416666666667, 0.260416666666667, 0.260416666666667, -0.281250000000000), 3),
    3: (((_TRI_A, _TRI_A), (_TRI_A2, _TRI_A), (_TRI_A, _TRI_A2),
         (_TRI_B, _TRI_B), (_TRI_B, _TRI_B2), (_TRI_B2, _TRI_B)),
        (0.054975871827661, 0.054975871827661, 0.054975871827661,
         0.111690794839005, 0.111690794839005, 0.111690794839005), 4),
}

# alpha = (5-sqrt(5))/20, beta = (5+3*sqrt(5))/20
_TET_A = 0.138196601125011
_TET_B = 0.585410196624969

# order: (points, weights, accuracy)，权重已乘 1/6
TETRAHEDRON_TABLE = {
    0: (((0.25, 0.25, 0.25),), (_SIXTH,), 1),
    1: (((_TET_A, _TET_A, _TET_A), (_TET_B, _TET_A, _TET_A),
         (_TET_A, _TET_B, _TET_A), (_TET_A, _TET_A, _TET_B)),
        (0.041666666666667, 0.041666666666667, 0.041666666666667, 0.041666666666667), 2),
    2: (((_SIXTH, _SIXTH, _SIXTH), (0.5, _SIXTH, _SIXTH),
         (_SIXTH, 0.5, _SIXTH), (_SIXTH, _SIXTH, 0.5), (0.25, 0.25, 0.25)),
        (0.075, 0.075, 0.075, 0.075, -0.133333333333333), 3),
}


class TriangleRule(RuleGenerator):
    """
    三角形积分表

    阶数 0/1/2/3 分别对应 1/3/4/6 个积分点，其他阶数回退到阶数 1。
    """
    orders = tuple(sorted(TRIANGLE_TABLE))
    fallback_order = 1

    def _table(self, order):
        points, weights, accuracy = TRIANGLE_TABLE[order]
        return weights, points, accuracy

    def __repr__(self) -> str:
        return f"TriangleRule(orders={self.orders})"


class TetrahedronRule(RuleGenerator):
    """
    四面体积分表

    阶数 0/1/2 分别对应 1/4/5 个积分点。
    与其他单元不同，未定义的阶数回退到阶数 0 (形心单点积分)。
    """
    orders = tuple(sorted(TETRAHEDRON_TABLE))
    fallback_order = 0

    def _table(self, order):
        points, weights, accuracy = TETRAHEDRON_TABLE[order]
        return weights, points, accuracy

    def __repr__(self) -> str:
        return f"TetrahedronRule(orders={self.orders})"
