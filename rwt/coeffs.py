import logging
import numbers

import numpy as np

from rwt.defaults import DEFAULT_PHASE, ORTHONORMAL_TOLERANCE
from rwt.utils import asfarray

def daubcqf(N, phase=DEFAULT_PHASE):
    """Compute the Daubechies compactly supported orthonormal scaling filter
    of length *N* and its quadrature mirror highpass filter.

    :param N: the (even) length of the filter
    :param phase: one of 'min', 'max' or 'mid' selecting the minimum phase,
        maximum phase or mixed phase filter
    :returns: a tuple (h0, h1) of the lowpass and highpass filters

    The lowpass filter is normalised so that it sums to sqrt(2). The highpass
    filter is the reversed lowpass filter with every even-indexed value
    negated.

    Example::

        >>> h0, h1 = daubcqf(4)
        >>> h0
        array([ 0.48296291,  0.8365163 ,  0.22414387, -0.12940952])

    :raises ValueError: if *N* is odd, *phase* is unknown or the computation
        is numerically unstable for this *N*.

    """
    if N % 2 != 0:
        raise ValueError('No Daubechies filter exists for odd length {0}'.format(N))
    if phase not in ('min', 'max', 'mid'):
        raise ValueError('Unknown filter phase: {0}'.format(phase))

    K = N // 2
    a = 1.0
    p = np.array([1.0])
    q = np.array([1.0])
    h0 = np.array([1.0, 1.0])
    for j in range(1, K):
        a = -a * 0.25 * (j + K - 1) / j
        h0 = np.hstack((0, h0)) + np.hstack((h0, 0))
        p = np.hstack((0, -p)) + np.hstack((p, 0))
        p = np.hstack((0, -p)) + np.hstack((p, 0))
        q = np.hstack((0, q, 0)) + a*p

    # Sort the roots by magnitude so the first K-1 lie inside the unit circle
    q = np.roots(q)
    q = q[np.lexsort((np.angle(q), np.abs(q)))]

    if phase == 'mid':
        if K % 2 == 1:
            idx = np.hstack((np.arange(0, N-2, 4), np.arange(1, N-2, 4)))
        else:
            idx = np.hstack((
                [0],
                np.arange(3, K-1, 4), np.arange(4, K-1, 4),
                np.arange(N-4, K-2, -4), np.arange(N-5, K-2, -4),
            )).astype(int)
        qt = q[idx]
    else:
        qt = q[:K-1]

    h0 = np.convolve(h0, np.real(np.poly(qt)))
    h0 = np.sqrt(2) * h0 / np.sum(h0)
    if phase == 'max':
        h0 = h0[::-1]

    if abs(np.sum(h0 ** 2) - 1) > ORTHONORMAL_TOLERANCE:
        raise ValueError('Numerically unstable for filter length {0}'.format(N))

    h1 = h0[::-1].copy()
    h1[::2] = -h1[::2]

    return h0, h1

def scaling_coefficients(h):
    """Interpret *h* as a vector of wavelet scaling coefficients.

    If *h* is an integer, it is used as an argument to :py:func:`daubcqf` and
    the minimum phase Daubechies lowpass filter of that length is returned.
    Otherwise it is converted to a 1D double precision array.

    :raises ValueError: if the coefficients are not a vector of even length
        of at least 2.

    """
    if isinstance(h, numbers.Integral):
        return daubcqf(h)[0]

    h = asfarray(h)
    if h.ndim == 2 and 1 in h.shape:
        h = h.ravel()
    if h.ndim != 1:
        raise ValueError('Scaling coefficients must be a vector')
    if h.shape[0] < 2 or h.shape[0] % 2 != 0:
        raise ValueError('Number of scaling coefficients must be even and at least 2, '
                         'not {0}'.format(h.shape[0]))

    energy = np.sum(h ** 2)
    if abs(energy - 1) > ORTHONORMAL_TOLERANCE:
        logging.warning('Scaling coefficients are not orthonormal (sum of squares is {0}); '
                        'reconstruction will not be exact'.format(energy))

    return h

# vim:sw=4:sts=4:et
