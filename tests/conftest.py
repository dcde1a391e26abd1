import numpy as np
import pytest


def generate_noisy_sine(n=200, sigma=0.05, seed=123):
    """
    Generate a noisy sine wave on the unit interval.

    :param n: number of samples
    :type n: int

    :param sigma: standard deviation of the gaussian noise
    :type sigma: float

    :param seed: random seed used in data creation
    :type seed: int

    :returns: x values, noisy y values and the noise-free y values
    :rtype: :obj:`tuple` of 3 :class:`numpy.ndarray`
    """
    np.random.seed(seed)
    x = np.linspace(0.0, 1.0, n)
    truth = np.sin(2 * np.pi * x)
    y = truth + sigma * np.random.standard_normal(n)
    return x, y, truth


@pytest.fixture(scope="session")
def noisy_sine():
    return generate_noisy_sine()


@pytest.fixture(scope="session")
def small_sample():
    x, y, _ = generate_noisy_sine(n=30, sigma=0.1, seed=7)
    # shuffled, so smoothers have to sort themselves
    order = np.random.RandomState(3).permutation(len(x))
    return x[order], y[order]
