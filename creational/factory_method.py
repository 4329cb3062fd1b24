import math


class Product:
    def operation(self) -> str:
        raise NotImplementedError


class ConcreteProduct1(Product):
    def operation(self) -> str:
        return "{Result of ConcreteProduct1}"


class ConcreteProduct2(Product):
    def operation(self) -> str:
        return "{Result of ConcreteProduct2}"


class Creator:
    """Declares factory_method(); subclasses decide which Product it returns.

    some_operation() is the creator's real job and only ever sees the Product interface.
    """

    def factory_method(self) -> Product:
        raise NotImplementedError

    def some_operation(self) -> str:
        product = self.factory_method()
        return "Creator: The same creator's code has just worked with " + product.operation()


class ConcreteCreator1(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()


def client_code(creator: Creator) -> str:
    return "Client: I'm not aware of the creator's class, but it still works.\n" + creator.some_operation()


def _polar(rho: float, theta: float):
    return rho * math.cos(theta), rho * math.sin(theta)


class _XY:
    def __init__(self, x: float, y: float):
        self._x = x
        self._y = y

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __str__(self):
        return f"({self._x}, {self._y})"

    def __repr__(self):
        return f"{type(self).__name__}{self}"


# only the named constructors hold this
_FACTORY = object()


class Point(_XY):
    """A 2d point built only through its named constructors, new_cartesian and new_polar."""

    def __init__(self, x: float, y: float, *, _key=None):
        if _key is not _FACTORY:
            raise TypeError("use Point.new_cartesian() or Point.new_polar()")
        super().__init__(x, y)

    @classmethod
    def new_cartesian(cls, x: float, y: float) -> "Point":
        return cls(x, y, _key=_FACTORY)

    @classmethod
    def new_polar(cls, rho: float, theta: float) -> "Point":
        return cls(*_polar(rho, theta), _key=_FACTORY)


class PointWithPublicConstructor(_XY):
    pass


class PointFactory:
    """Separate factory for a point whose constructor anyone may call."""

    @staticmethod
    def new_cartesian(x: float, y: float) -> PointWithPublicConstructor:
        return PointWithPublicConstructor(x, y)

    @staticmethod
    def new_polar(rho: float, theta: float) -> PointWithPublicConstructor:
        return PointWithPublicConstructor(*_polar(rho, theta))


class Point2(_XY):
    """A point whose only way in is the nested Factory."""

    def __init__(self, x: float, y: float, *, _key=None):
        if _key is not _FACTORY:
            raise TypeError("use Point2.Factory")
        super().__init__(x, y)

    class Factory:
        @staticmethod
        def new_cartesian(x: float, y: float) -> "Point2":
            return Point2(x, y, _key=_FACTORY)

        @staticmethod
        def new_polar(rho: float, theta: float) -> "Point2":
            return Point2(*_polar(rho, theta), _key=_FACTORY)
