# flake8: noqa

from .matrix import (
    COLUMN_ORIENTATION,
    Matrix,
    ROW_ORIENTATION,
)
