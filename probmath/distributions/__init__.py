from probmath.distributions.binomial import binomial_log
from probmath.distributions.wishart import wishart_log
from probmath.distributions.inv_chi_square import inv_chi_square_log

__all__ = ['binomial_log', 'wishart_log', 'inv_chi_square_log']
