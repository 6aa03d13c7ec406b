"""
Constants shared by the partition package
"""
import numpy as np


# Storage dtype of the parent and weight arrays
INDEX_DTYPE = np.intp

INVALID_ELEMENT_MESSAGE = "Invalid set item"
