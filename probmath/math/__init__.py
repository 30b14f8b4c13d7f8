from probmath.math.special import (
    exp2, log2, fdim, fma, int_step, step, square, if_else, as_bool, value_of,
    lbeta, binomial_coefficient_log, lmgamma, inv_logit, logit, Phi, Phi_approx, inv_cloglog, binary_log_loss,
    softmax, inverse_softmax, log1p, log1m, multiply_log, log1p_exp, log_inv_logit, log1m_inv_logit,
    log_sum_exp, ibeta
)
from probmath.math.logical import (
    logical_negation, logical_or, logical_and, logical_eq, logical_neq,
    logical_lt, logical_lte, logical_gt, logical_gte
)
from probmath.math.matrix import determinant, inverse, multiply, trace

__all__ = [
    'exp2', 'log2', 'fdim', 'fma', 'int_step', 'step', 'square', 'if_else', 'as_bool', 'value_of',
    'lbeta', 'binomial_coefficient_log', 'lmgamma', 'inv_logit', 'logit', 'Phi', 'Phi_approx', 'inv_cloglog',
    'binary_log_loss', 'softmax', 'inverse_softmax', 'log1p', 'log1m', 'multiply_log', 'log1p_exp',
    'log_inv_logit', 'log1m_inv_logit', 'log_sum_exp', 'ibeta',
    'logical_negation', 'logical_or', 'logical_and', 'logical_eq', 'logical_neq',
    'logical_lt', 'logical_lte', 'logical_gt', 'logical_gte',
    'determinant', 'inverse', 'multiply', 'trace',
]
