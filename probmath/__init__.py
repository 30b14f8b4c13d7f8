"""
Numerically stable special functions and log-density kernels.

The log-density functions follow the conventions of the Stan modeling language:

.. [Carpenter2017] "Stan: A Probabilistic Programming Language",
   Bob Carpenter et al., Journal of Statistical Software 76(1)
   https://doi.org/10.18637/jss.v076.i01
"""

__version__ = '0.1.0'

import os.path
import logging.config
import yaml
import logging


def setup_logging(path='logging.yml'):
    path = os.path.join(os.path.dirname(__file__), path)
    if os.path.exists(path):
        with open(path, 'rt') as f:
            config = yaml.safe_load(f.read())
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(level=logging.WARNING)


setup_logging()
logger = logging.getLogger('probmath')

from probmath.math import *  # noqa: E402,F401,F403
from probmath.distributions import binomial_log, wishart_log, inv_chi_square_log  # noqa: E402,F401
