"""Function interface to the transforms. These functions are intentionally
similar in name and behaviour to the ``mdwt``, ``midwt``, ``mrdwt`` and
``mirdwt`` functions of the Rice Wavelet Toolbox for MATLAB, and the MATLAB
names are provided as aliases to ease porting of MATLAB scripts.

Unlike the MATLAB functions every function takes its input signal first,
followed by the scaling coefficients and the number of levels. Each returns
its result followed by the number of levels actually used.

"""
from rwt.common import Pyramid
from rwt.redundant import RedundantTransform
from rwt.transform import Transform
from rwt.utils import as_matrix, asfarray, max_levels

__all__ = [
    'dwt',
    'idwt',
    'rdwt',
    'irdwt',

    'mdwt',
    'midwt',
    'mrdwt',
    'mirdwt',
]

def dwt(x, h, L=None):
    """Perform a *L*-level discrete wavelet decomposition of a 1D or 2D
    signal *x*.

    :param x: 1D or 2D real array-like object
    :param h: the scaling coefficients
    :param L: number of levels. If omitted, the largest number of levels for
        which every non-singleton extent of *x* is divisible by 2**L.

    :returns y: Array shaped like *x* holding the packed subbands
    :returns L: The number of levels used

    Example::

        # A 3-level transform with the 4-tap Daubechies filter
        h0, h1 = daubcqf(4)
        y, L = dwt(x, h0, 3)

    """
    x = asfarray(x)
    if L is None:
        L = max_levels(*as_matrix(x).shape)

    trans = Transform(h)
    return trans.forward(x, L), L

def idwt(y, h, L=None):
    """Perform a *L*-level discrete wavelet reconstruction.

    :param y: packed subbands as returned by :py:func:`dwt`
    :param h: the scaling coefficients
    :param L: number of levels. Defaults as for :py:func:`dwt`.

    :returns x: The reconstructed signal
    :returns L: The number of levels used

    """
    y = asfarray(y)
    if L is None:
        L = max_levels(*as_matrix(y).shape)

    trans = Transform(h)
    return trans.inverse(y, L), L

def rdwt(x, h, L=None):
    """Perform a *L*-level redundant discrete wavelet decomposition of a 1D
    or 2D signal *x*.

    :param x: 1D or 2D real array-like object
    :param h: the scaling coefficients
    :param L: number of levels. Defaults as for :py:func:`dwt`.

    :returns yl: The lowpass signal, shaped like *x*
    :returns yh: The highpass subbands for every level. See
        :py:class:`rwt.Pyramid` for their layout.
    :returns L: The number of levels used

    """
    trans = RedundantTransform(h)
    res = trans.forward(x, L)
    return res.lowpass, res.highpass, res.nlevels

def irdwt(yl, yh, h, L=None):
    """Perform a *L*-level redundant discrete wavelet reconstruction.

    :param yl: The lowpass signal
    :param yh: The highpass subbands as returned by :py:func:`rdwt`
    :param h: the scaling coefficients
    :param L: number of levels. If omitted it is inferred from the shapes of
        *yl* and *yh*.

    :returns x: The reconstructed signal
    :returns L: The number of levels used

    """
    trans = RedundantTransform(h)
    pyramid = Pyramid(yl, yh, L)
    return trans.inverse(pyramid), pyramid.nlevels

mdwt = dwt
midwt = idwt
mrdwt = rdwt
mirdwt = irdwt

# vim:sw=4:sts=4:et
