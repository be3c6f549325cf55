import numpy

from bpnn.core.exception import ShapeError


ROW_ORIENTATION = 'row'
COLUMN_ORIENTATION = 'column'
ORIENTATIONS = (ROW_ORIENTATION, COLUMN_ORIENTATION)


class Matrix(object):
    """ A dense two dimensional array of 64 bit floats

    The shape of a matrix is fixed when it is constructed. The arithmetic
    methods never modify their operands; each returns a new matrix. Cell
    contents may be changed in place only through :meth:`set`.

    Dimension mismatches are always reported by raising
    :class:`bpnn.core.exception.ShapeError`, never by numpy broadcasting.
    """

    def __init__(self, data):
        """ Initialize a matrix from a two dimensional array

        Parameters
        ----------
        data: array-like, shape=(rows, columns)
            The values are copied, so the matrix never shares storage
            with the caller.

        """
        data = numpy.array(data, dtype=numpy.float64)

        if data.ndim != 2:
            msg = "Matrix data must be two dimensional; ndim provided = {}"
            raise ShapeError(msg.format(data.ndim))

        self._data = data

    @classmethod
    def zero(cls, rows, columns):
        """ Create a `rows` by `columns` matrix filled with zeros
        """
        if rows < 0 or columns < 0:
            msg = "Matrix dimensions must be non-negative; got ({}, {})"
            raise ValueError(msg.format(rows, columns))

        return cls(numpy.zeros((rows, columns), dtype=numpy.float64))

    @classmethod
    def from_rows(cls, rows):
        """ Create a matrix from a sequence of equal length rows

        Raises
        ------
        ShapeError
            If `rows` is empty, a row is empty, or the rows do not all
            have the same length.
        """
        rows = [list(row) for row in rows]

        if len(rows) == 0:
            raise ShapeError("Cannot build a matrix from zero rows")

        n_columns = len(rows[0])

        if n_columns == 0:
            raise ShapeError("Cannot build a matrix from empty rows")

        for irow, row in enumerate(rows):
            if len(row) != n_columns:
                msg = "Row {} has length {} but should have length {}"
                raise ShapeError(msg.format(irow, len(row), n_columns))

        return cls(rows)

    @classmethod
    def from_vector(cls, values, orientation=COLUMN_ORIENTATION):
        """ Create a 1 by N (row) or N by 1 (column) matrix from `values`
        """
        if orientation not in ORIENTATIONS:
            msg = "Unknown orientation `{}`; should be one of {}"
            raise ValueError(msg.format(orientation, ORIENTATIONS))

        values = numpy.array(values, dtype=numpy.float64)

        if values.ndim != 1:
            msg = "Vector values must be one dimensional; ndim provided = {}"
            raise ShapeError(msg.format(values.ndim))

        if values.size == 0:
            raise ShapeError("Cannot build a matrix from an empty vector")

        if orientation == ROW_ORIENTATION:
            return cls(values.reshape(1, -1))
        else:
            return cls(values.reshape(-1, 1))

    @classmethod
    def diagonal(cls, values):
        """ Create a square matrix with `values` along the main diagonal
        and zeros elsewhere
        """
        values = numpy.array(values, dtype=numpy.float64)

        if values.ndim != 1 or values.size == 0:
            raise ShapeError("Diagonal values must be a non-empty vector")

        return cls(numpy.diag(values))

    @property
    def rows(self):
        return self._data.shape[0]

    @property
    def columns(self):
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    def __repr__(self):
        return "<Matrix rows=%d, columns=%d>" % (self.rows, self.columns)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.shape == other.shape and
                bool((self._data == other._data).all()))

    def __matmul__(self, other):
        return self.multiply(other)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def _check_same_shape(self, other, operation):
        if self.shape != other.shape:
            msg = "Cannot {} matrices of shape {} and {}"
            raise ShapeError(msg.format(operation, self.shape, other.shape))

    def multiply(self, other):
        """ Standard matrix product `self . other`

        Raises
        ------
        ShapeError
            If `self.columns != other.rows`.
        """
        if self.columns != other.rows:
            msg = ("Cannot multiply matrices of shape {} and {}; "
                   "inner dimensions {} and {} differ")
            raise ShapeError(msg.format(self.shape, other.shape,
                                        self.columns, other.rows))

        return Matrix(numpy.dot(self._data, other._data))

    def add(self, other):
        self._check_same_shape(other, 'add')
        return Matrix(self._data + other._data)

    def subtract(self, other):
        self._check_same_shape(other, 'subtract')
        return Matrix(self._data - other._data)

    def hadamard(self, other):
        """ Element-wise product of two matrices of identical shape
        """
        self._check_same_shape(other, 'element-wise multiply')
        return Matrix(self._data * other._data)

    def scale(self, factor):
        return Matrix(self._data * float(factor))

    def transpose(self):
        return Matrix(self._data.T)

    def apply(self, func):
        """ Return a new matrix with the scalar function `func` applied to
        every cell
        """
        if self._data.size == 0:
            return Matrix(self._data)

        vectorized = numpy.vectorize(func, otypes=[numpy.float64])
        return Matrix(vectorized(self._data))

    def _check_index(self, row, col):
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            msg = "Index ({}, {}) is out of bounds for matrix of shape {}"
            raise IndexError(msg.format(row, col, self.shape))

    def get(self, row, col):
        self._check_index(row, col)
        return float(self._data[row, col])

    def set(self, row, col, value):
        self._check_index(row, col)
        self._data[row, col] = value

    def allclose(self, other, atol=1e-9):
        """ True when `other` has the same shape and every cell agrees
        within the absolute tolerance `atol`
        """
        return (self.shape == other.shape and
                bool(numpy.allclose(self._data, other._data,
                                    rtol=0, atol=atol)))

    def flatten(self):
        """ Returns a copy of the cells as a 1D array in row-major order
        """
        return self._data.flatten()

    def to_array(self):
        return self._data.copy()

    def to_list(self):
        return self._data.tolist()
