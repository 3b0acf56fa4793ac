class GeoJSONAssemblerError(Exception):
    pass


class InvalidGeometry(GeoJSONAssemblerError, ValueError):
    """A structural minimum was violated (too few points, rings, ...).

    `path` holds the indices of the enclosing elements, outermost first,
    e.g. `(2, 1)` for the second ring of the third polygon.
    """

    def __init__(self, message: str, path: tuple[int, ...] = ()):
        super().__init__(message)
        self.message = message
        self.path = path

    def at(self, index: int) -> 'InvalidGeometry':
        self.path = (index,) + self.path
        return self

    def __str__(self) -> str:
        if not self.path:
            return self.message
        location = ']['.join(str(i) for i in self.path)
        return f'{self.message} (at [{location}])'


class InvocationContractViolation(GeoJSONAssemblerError, TypeError):
    """A callback does not match one of the supported shapes."""
