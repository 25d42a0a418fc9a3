""" Useful utilities shared by the transform implementations and for testing
them with synthetic signals."""

__all__ = ( 'asfarray', 'as_matrix', 'output_buffer', 'max_levels',
            'check_nlevels', 'makesig', )

import logging

import numpy as np

def asfarray(X):
    """Return *X* as a double precision NumPy array. Arrays which are already
    of type float64 are passed through directly without copying. Integer
    arrays and nested lists are converted.

    """
    return np.asarray(X, dtype=np.float64)

def as_matrix(X, m=None, n=None):
    """Return a two dimensional (rows, columns) view onto the signal buffer
    *X*. Writing to the view writes to *X*.

    If *m* and *n* are given, *X* must be a flat buffer of length m*n holding
    an *m* by *n* matrix in column-major order so that element (i, j) is
    ``X[i + j*m]``.

    Otherwise *X* may have one or two dimensions. One dimensional signals are
    always viewed as a single row: a 1D array of length n and a column vector
    of shape (n, 1) both give a view of shape (1, n).

    :raises ValueError: if *X* cannot be viewed as a matrix.

    """
    X = np.asarray(X)
    if m is not None or n is not None:
        if m is None or n is None:
            raise ValueError('Both m and n must be given for a flat buffer')
        if X.ndim != 1 or X.shape[0] != m*n:
            raise ValueError('A buffer of shape {0} cannot hold a {1}x{2} matrix'.format(
                X.shape, m, n))
        return X.reshape((n, m)).T

    if X.ndim == 1:
        return X.reshape((1, -1))
    elif X.ndim == 2:
        if X.shape[1] == 1:
            return X.T
        return X

    raise ValueError('Signal must be one or two dimensional, not {0}'.format(X.ndim))

def output_buffer(X, out=None):
    """Return a double precision array shaped like *X* holding a copy of *X*.
    If *out* is given, *X* is copied into it and *out* is returned.

    :raises ValueError: if *out* has the wrong shape or is not float64.

    """
    if out is None:
        return np.array(X, dtype=np.float64)

    if out.shape != X.shape:
        raise ValueError('Output has shape {0} but should have shape {1}'.format(
            out.shape, X.shape))
    if out.dtype != np.float64:
        raise ValueError('Output must be of type float64, not {0}'.format(out.dtype))

    out[...] = X
    return out

def max_levels(rows, cols):
    """Return the largest number of levels *L* for which every non-singleton
    extent of a *rows* by *cols* signal is divisible by 2**L.

    """
    nlevels = None
    for extent in (rows, cols):
        if extent <= 1:
            continue
        count = 0
        while extent % 2 == 0:
            extent //= 2
            count += 1
        nlevels = count if nlevels is None else min(nlevels, count)

    return nlevels or 0

def check_nlevels(nlevels, rows, cols, decimated=True):
    """Validate the number of levels for a *rows* by *cols* signal and return
    it. If *nlevels* is None the value from :py:func:`max_levels` is used.

    Decimated transforms need each non-singleton extent to be divisible by
    2**nlevels.

    :raises ValueError: if *nlevels* is not a non-negative integer or is too
        large for the signal.

    """
    if nlevels is None:
        nlevels = max_levels(rows, cols)
        logging.debug('Using {0} level(s) for a {1}x{2} signal'.format(nlevels, rows, cols))
        return nlevels

    if int(nlevels) != nlevels:
        raise ValueError('Number of levels must be an integer, not {0}'.format(nlevels))
    nlevels = int(nlevels)
    if nlevels < 0:
        raise ValueError('Number of levels must be non-negative, not {0}'.format(nlevels))

    if decimated:
        scale = 1 << nlevels
        if (rows > 1 and rows % scale != 0) or cols % scale != 0:
            raise ValueError(
                'A {0}x{1} signal cannot be decomposed over {2} level(s): '
                'extents must be divisible by {3}'.format(rows, cols, nlevels, scale))

    return nlevels

def makesig(name, N=512):
    """Generate the test signal *name* with *N* samples. These are the
    standard signals used to demonstrate wavelet denoising and compression.

    ============= ============================================
    Name          Signal
    ============= ============================================
    HeaviSine     Sine with two jumps.
    Bumps         Sum of sharp bumps.
    Blocks        Piecewise constant.
    Doppler       Sine with increasing period.
    Ramp          Ramp with a jump.
    Cusp          Square root cusp.
    Sing          Isolated singularity.
    HiSine        High frequency sine.
    LoSine        Low frequency sine.
    LinChirp      Linear chirp.
    TwoChirp      Sum of two linear chirps.
    QuadChirp     Quadratic chirp.
    MishMash      QuadChirp + LinChirp + HiSine.
    Leopold       Kronecker delta.
    ============= ============================================

    :raises ValueError: if *name* is not a known signal.

    """
    t = np.arange(1, N+1) / float(N)

    pos = np.array([.1, .13, .15, .23, .25, .40, .44, .65, .76, .78, .81])

    if name == 'HeaviSine':
        y = 4*np.sin(4*np.pi*t) - np.sign(t - .3) - np.sign(.72 - t)
    elif name == 'Bumps':
        hgt = np.array([4, 5, 3, 4, 5, 4.2, 2.1, 4.3, 3.1, 5.1, 4.2])
        wth = np.array([.005, .005, .006, .01, .01, .03, .01, .01, .005, .008, .005])
        y = np.sum(hgt[:,np.newaxis] /
                   (1 + np.abs((t - pos[:,np.newaxis]) / wth[:,np.newaxis]))**4, axis=0)
    elif name == 'Blocks':
        hgt = np.array([4, -5, 3, -4, 5, -4.2, 2.1, 4.3, -3.1, 2.1, -4.2])
        y = np.sum((1 + np.sign(t - pos[:,np.newaxis])) * (hgt[:,np.newaxis]/2), axis=0)
    elif name == 'Doppler':
        y = np.sqrt(t*(1-t)) * np.sin((2*np.pi*1.05) / (t+.05))
    elif name == 'Ramp':
        y = t - (t >= .37)
    elif name == 'Cusp':
        y = np.sqrt(np.abs(t - .37))
    elif name == 'Sing':
        k = np.floor(N * .37)
        y = 1 / np.abs(t - (k+.5)/N)
    elif name == 'HiSine':
        y = np.sin(np.pi * (N * .6902) * t)
    elif name == 'LoSine':
        y = np.sin(np.pi * (N * .3333) * t)
    elif name == 'LinChirp':
        y = np.sin(np.pi * t * ((N * .500) * t))
    elif name == 'TwoChirp':
        y = np.sin(np.pi * t * (N * t)) + np.sin((np.pi/3) * t * (N * t))
    elif name == 'QuadChirp':
        y = np.sin((np.pi/3) * t * (N * t**2))
    elif name == 'MishMash':
        y = (np.sin((np.pi/3) * t * (N * t**2)) +
             np.sin(np.pi * t * ((N * .500) * t)) +
             np.sin(np.pi * (N * .6902) * t))
    elif name == 'Leopold':
        y = (t == np.floor(.37 * N) / N).astype(np.float64)
    else:
        raise ValueError('Unknown signal: {0}'.format(name))

    return y

# vim:sw=4:sts=4:et
