from rwt.utils import asfarray, as_matrix

def highpass_shape(shape, nlevels):
    """Return the shape of the highpass array holding *nlevels* levels of
    subbands for a signal of shape *shape*. See :py:class:`Pyramid`.

    """
    if len(shape) == 1:
        return (shape[0]*nlevels,)

    rows, cols = shape
    if cols == 1 and rows > 1:
        return (rows, nlevels)
    if rows == 1:
        return (1, cols*nlevels)
    return (rows, 3*cols*nlevels)

class Pyramid(object):
    """A representation of a redundant transform domain signal.

    .. py:attribute:: lowpass

        A NumPy array with the same shape as the transformed signal containing
        the coarsest scale lowpass signal.

    .. py:attribute:: highpass

        A NumPy array holding the highpass subbands for every level, finest
        to coarsest. For a 2D *m* by *n* signal this has shape (m, 3*n*L)
        and level *l* (1-based) occupies columns 3n(l-1) to 3nl as three
        blocks: column highpass/row lowpass, column lowpass/row highpass and
        column highpass/row highpass. For a 1D signal of length *n* there is
        one block of *n* samples per level: the shape is (n*L,) for a 1D
        array, (1, n*L) for a row vector and (n, L) for a column vector.

    .. py:attribute:: nlevels

        The number of levels. If not given it is inferred from the shapes of
        *lowpass* and *highpass*.

    """
    def __init__(self, lowpass, highpass, nlevels=None):
        self.lowpass = asfarray(lowpass)
        self.highpass = asfarray(highpass)

        rows, cols = as_matrix(self.lowpass).shape
        block = 3*rows*cols if rows > 1 else cols
        if block == 0 or self.highpass.size % block != 0:
            raise ValueError('Highpass of shape {0} does not match lowpass of shape {1}'.format(
                self.highpass.shape, self.lowpass.shape))

        inferred = self.highpass.size // block
        if nlevels is not None and nlevels != inferred:
            raise ValueError('Highpass of shape {0} holds {1} level(s), not {2}'.format(
                self.highpass.shape, inferred, nlevels))

        expected = highpass_shape(self.lowpass.shape, inferred)
        if self.highpass.shape != expected:
            raise ValueError('Highpass for lowpass of shape {0} should have shape {1}, not {2}'.format(
                self.lowpass.shape, expected, self.highpass.shape))
        self.nlevels = inferred

    def highpass_matrix(self):
        """Return :py:attr:`highpass` as a matrix with one row per signal row.
        Levels are laid out as consecutive column blocks.

        """
        H = self.highpass
        if self.lowpass.ndim == 2 and self.lowpass.shape[1] == 1 and self.lowpass.shape[0] > 1:
            # Column vector input: one column per level
            return as_matrix(H.T.reshape(-1))
        return as_matrix(H.reshape(-1)) if H.ndim == 1 else H

    def subbands(self, level):
        """Return the highpass subbands at *level* (1-based) as a tuple of
        arrays shaped like the transformed signal. 1D signals have a single
        subband, 2D signals have three.

        """
        if level < 1 or level > self.nlevels:
            raise ValueError('Level must be between 1 and {0}, not {1}'.format(
                self.nlevels, level))

        H = self.highpass_matrix()
        rows, cols = as_matrix(self.lowpass).shape
        if rows > 1:
            offset = 3*cols*(level-1)
            return tuple(H[:, offset + k*cols:offset + (k+1)*cols] for k in range(3))

        block = H[:, cols*(level-1):cols*level]
        return (block.reshape(self.lowpass.shape),)
