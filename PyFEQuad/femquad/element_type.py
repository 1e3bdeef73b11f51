# 文件: PyFEQuad/femquad/element_type.py
from enum import Enum


class ElementType(Enum):
    """
    有限元参考单元类型。

    积分模块只需要对这六个值做相等比较；
    dimension / reference_measure 供调用方和测试校验使用。
    """
    Point = 0
    Line = 1
    Triangle = 2
    Quadrilateral = 3
    Tetrahedron = 4
    Hexahedron = 5

    @property
    def dimension(self) -> int:
        """拓扑维数"""
        return _DIMENSIONS[self]

    @property
    def reference_measure(self) -> float:
        """
        参考单元的测度 (长度 / 面积 / 体积)

        线 [-1,1] 为 2，直角三角形为 1/2，正方形 [-1,1]^2 为 4，
        四面体为 1/6，立方体 [-1,1]^3 为 8，点取 1。
        """
        return _MEASURES[self]

    def __str__(self):
        return self.name


_DIMENSIONS = {
    ElementType.Point: 0,
    ElementType.Line: 1,
    ElementType.Triangle: 2,
    ElementType.Quadrilateral: 2,
    ElementType.Tetrahedron: 3,
    ElementType.Hexahedron: 3,
}

_MEASURES = {
    ElementType.Point: 1.0,
    ElementType.Line: 2.0,
    ElementType.Triangle: 0.5,
    ElementType.Quadrilateral: 4.0,
    ElementType.Tetrahedron: 1.0 / 6.0,
    ElementType.Hexahedron: 8.0,
}
