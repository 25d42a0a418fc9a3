__all__ = [
    '__version__',

    'Transform',
    'RedundantTransform',
    'Pyramid',

    'dwt',
    'idwt',
    'rdwt',
    'irdwt',

    'daubcqf',
]

from rwt._version import __version__

from rwt.coeffs import daubcqf
from rwt.common import Pyramid
from rwt.compat import dwt, idwt, rdwt, irdwt
from rwt.redundant import RedundantTransform
from rwt.transform import Transform
