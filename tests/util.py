import numpy as np

TOLERANCE = 1e-10

def assert_almost_equal(a, b, tolerance=TOLERANCE):
    md = np.abs(np.asarray(a)-np.asarray(b)).max()
    if md <= tolerance:
        return

    raise AssertionError(
            'Arrays differ by a maximum of {0} which is greater than the tolerance of {1}'.
            format(md, tolerance))

def haar():
    """Return the orthonormal length 2 scaling coefficients."""
    return np.array([1, 1]) / np.sqrt(2)
