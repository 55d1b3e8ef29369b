"""
test_rng.py
-----------

Unit tests for rng.py (RNG and get_rng).
Covers deterministic behavior, thread safety, reseeding,
the NumPy backend and global seeding.
"""

import threading

import numpy as np
import pytest

import scribble.rng as rng


# ---------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------
@pytest.fixture
def fixed_rng():
    """Provide a deterministic RNG with fixed seed."""
    return rng.RNG(seed=123)


@pytest.fixture(scope="module")
def std_rng():
    """Standard-library RNG backend."""
    return rng.RNG(seed=42, use_numpy=False)


@pytest.fixture(scope="module")
def np_rng():
    """NumPy RNG backend."""
    return rng.RNG(seed=42, use_numpy=True)


# ---------------------------------------------------------------------
# 1. Basic construction and repr
# ---------------------------------------------------------------------
def test_rng_repr(fixed_rng):
    text = repr(fixed_rng)
    assert "RNG" in text
    assert "backend=stdlib" in text
    assert "pid" in text


def test_rng_reseed_changes_sequence(fixed_rng):
    """Reseeding should produce a different random sequence."""
    vals1 = [fixed_rng.uniform(0, 1) for _ in range(5)]
    fixed_rng.seed(999)
    vals2 = [fixed_rng.uniform(0, 1) for _ in range(5)]
    assert vals1 != vals2


# ---------------------------------------------------------------------
# 2. Determinism and reproducibility
# ---------------------------------------------------------------------
@pytest.mark.parametrize("use_numpy", [False, True])
def test_reproducibility_fixed_seed(use_numpy):
    """Same seed => identical sequences."""
    r1 = rng.RNG(seed=42, use_numpy=use_numpy)
    r2 = rng.RNG(seed=42, use_numpy=use_numpy)
    assert [r1.uniform(-1, 1) for _ in range(10)] == [r2.uniform(-1, 1) for _ in range(10)]


def test_zero_is_a_real_seed():
    r1, r2 = rng.RNG(seed=0), rng.RNG(seed=0)
    assert [r1.uniform(0, 1) for _ in range(5)] == [r2.uniform(0, 1) for _ in range(5)]


def test_reseed_restarts_sequence(fixed_rng):
    fixed_rng.seed(7)
    a = [fixed_rng.uniform(0, 1) for _ in range(3)]
    fixed_rng.seed(7)
    b = [fixed_rng.uniform(0, 1) for _ in range(3)]
    assert a == b


# ---------------------------------------------------------------------
# 3. Core methods work and within bounds
# ---------------------------------------------------------------------
def test_uniform_bounds(fixed_rng):
    for _ in range(100):
        y = fixed_rng.uniform(-0.5, 1.0)
        assert -0.5 <= y <= 1.0


def test_uniform_degenerate_range(std_rng, np_rng):
    assert std_rng.uniform(0.0, 0.0) == 0.0
    assert np_rng.uniform(0.0, 0.0) == 0.0


def test_uniform_scalar_types(std_rng, np_rng):
    assert isinstance(std_rng.uniform(0, 1), float)
    assert isinstance(np_rng.uniform(0, 1), float)


def test_uniform_array_numpy(np_rng):
    arr = np_rng.uniform(0, 1, size=(2, 3))
    assert isinstance(arr, np.ndarray)
    assert arr.shape == (2, 3)


# ---------------------------------------------------------------------
# 4. Thread-safety
# ---------------------------------------------------------------------
def test_thread_safety_parallel_invocation():
    """Concurrent access should not raise or produce identical results."""
    r = rng.RNG(seed=999)
    results = []

    def worker(idx):
        results.append((idx, r.uniform(0, 1000)))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(10)]
    [t.start() for t in threads]
    [t.join() for t in threads]

    vals = [v for _, v in results]
    assert len(set(vals)) > 1


# ---------------------------------------------------------------------
# 5. Global and thread-local RNG behavior
# ---------------------------------------------------------------------
def test_get_rng_shared_and_threadlocal():
    global_rng = rng.get_rng(thread_safe=False)
    t_rng_1 = rng.get_rng(thread_safe=True)
    t_rng_2 = rng.get_rng(thread_safe=True)
    assert t_rng_1 is t_rng_2
    assert global_rng is not t_rng_1


def test_thread_local_differs_across_threads():
    seen = []
    t = threading.Thread(target=lambda: seen.append(rng.get_rng(thread_safe=True)))
    t.start()
    t.join()
    assert seen[0] is not rng.get_rng(thread_safe=True)


# ---------------------------------------------------------------------
# 6. Global seeding
# ---------------------------------------------------------------------
def test_set_global_seed_reproducible():
    rng.set_global_seed(321)
    a = [rng.get_rng().uniform(0, 1) for _ in range(3)]
    rng.set_global_seed(321)
    b = [rng.get_rng().uniform(0, 1) for _ in range(3)]
    assert a == b


def test_set_global_seed_reseeds_thread_local():
    rng.set_global_seed(321)
    a = [rng.get_rng(thread_safe=True).uniform(0, 1) for _ in range(3)]
    rng.set_global_seed(321)
    b = [rng.get_rng(thread_safe=True).uniform(0, 1) for _ in range(3)]
    assert a == b


# ---------------------------------------------------------------------
# 7. Performance sanity (quick smoke test)
# ---------------------------------------------------------------------
def test_perf_benchmark(benchmark):
    r = rng.RNG(seed=111)
    result = benchmark(lambda: [r.uniform(-1.0, 2.0) for _ in range(1000)])
    assert isinstance(result, list)
    assert len(result) == 1000
