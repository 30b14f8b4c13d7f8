"""
Dense linear algebra used by the matrix-variate densities.
"""
import numpy as np
import scipy
import scipy.linalg


def determinant(M):
    return scipy.linalg.det(M)


def inverse(M):
    return scipy.linalg.inv(M)


def multiply(A, B):
    return np.dot(A, B)


def trace(M):
    return np.trace(M)


def is_square(M):
    M = np.asarray(M)
    return M.ndim == 2 and M.shape[0] == M.shape[1]


def is_symmetric(M, rtol=1e-8, atol=1e-8):
    """
    Whether a square matrix is equal to its transpose, to within the given tolerances.
    """
    M = np.asarray(M, dtype=float)
    return is_square(M) and np.allclose(M, M.T, rtol=rtol, atol=atol)


def is_pos_definite(M, check_finite=True):
    """
    Whether a symmetric matrix is positive definite.

    The test is whether a Cholesky decomposition of the matrix exists. Only the lower triangle of M is read,
    so M should be checked for symmetry first.

    Parameters
    ----------
    M : ndarray
        A symmetric matrix
    check_finite : bool, optional
        Whether scipy should check that M contains only finite numbers. A matrix with infinities or NaNs is never
        positive definite; disabling the check may give a performance gain.

    Returns
    -------
    bool
        True if M is positive definite
    """
    M = np.asarray(M, dtype=float)
    if not is_square(M):
        return False
    if check_finite and not np.all(np.isfinite(M)):
        return False
    try:
        scipy.linalg.cholesky(M, lower=True, check_finite=False)
    except scipy.linalg.LinAlgError:
        return False
    return True
