class ShapeError(ValueError):
    """ Raised when two matrices (or a matrix and a vector) have dimensions
    that are incompatible with the requested operation
    """
