import numpy as np

from shoal.ga import Chromosome


def chromosome():
    return Chromosome([0.0, 1.0, 2.0, 3.0])


def test_len():
    assert len(chromosome()) == 4


def test_is_empty():
    assert Chromosome().is_empty()
    assert not Chromosome()
    assert not chromosome().is_empty()


def test_index():
    c = chromosome()
    assert c[0] == 0.0
    assert c[1] == 1.0
    assert c[3] == 3.0


def test_iter():
    assert list(chromosome()) == [0.0, 1.0, 2.0, 3.0]


def test_iter_mut():
    c = chromosome()
    c.genes *= 10
    assert list(c) == [0.0, 10.0, 20.0, 30.0]
    c[0] = -1.5
    assert c[0] == -1.5


def test_from_iterable():
    c = Chromosome.from_iterable(float(n) for n in range(4))
    assert c == chromosome()


def test_equality_is_approximate():
    assert chromosome() == Chromosome([0.0, 1.0 + 1e-12, 2.0, 3.0])
    assert chromosome() != Chromosome([0.0, 1.1, 2.0, 3.0])
    assert chromosome() != Chromosome([0.0, 1.0, 2.0])


def test_copy_is_independent():
    c = chromosome()
    other = c.copy()
    other[0] = 5.0
    assert c[0] == 0.0
    assert isinstance(other.genes, np.ndarray)
