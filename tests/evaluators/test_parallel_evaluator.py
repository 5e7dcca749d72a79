import importlib
import itertools
from unittest.mock import patch

import pytest
from gmpy2 import mpz

from vdf_engine.errors import InvalidParameters, PrimeSearchExhausted
from vdf_engine.evaluators import ParallelEvaluator
from vdf_engine.parameters import Setup

from conftest import G_12345


parallel_module = importlib.import_module("vdf_engine.evaluators.ParallelEvaluator")


def test_evaluate_reference_scenario(params):
    """Test x=12345 with generator 2, table modulus 101, T=16, kappa=2, gamma=2."""
    y, proof, elapsed = ParallelEvaluator.evaluate(params, mpz(12345))

    # every block is non-zero, so each shard multiplies all five table entries:
    # 2 * 88 * 37 * 19 * 78 = 32 (mod 101), y = g * 32^2 (mod 101)
    assert y == (G_12345 * 32 * 32) % 101 == 90
    # the entry 2 is even, so the proof collapses to 0 modulo G = 2
    assert proof == 0
    assert elapsed >= 0


def test_evaluate_accepts_matching_arguments(params):
    expected = ParallelEvaluator.evaluate(params, mpz(12345))
    actual = ParallelEvaluator.evaluate(params, mpz(12345), 16, 2, 2)
    assert actual[:2] == expected[:2]


@pytest.mark.parametrize("t, kappa, gamma", [(17, None, None), (None, 3, None), (None, None, 4)])
def test_evaluate_rejects_mismatched_arguments(params, t, kappa, gamma):
    with pytest.raises(InvalidParameters):
        ParallelEvaluator.evaluate(params, mpz(12345), t, kappa, gamma)


@pytest.mark.parametrize("j", [0, 1])
def test_run_shard(params, j):
    """Test that each shard accumulates under both moduli."""
    local_y, local_proof = ParallelEvaluator.run_shard(params, mpz(2) ** 16, j)
    assert local_y == 32
    assert local_proof == 0


def test_run_shard_skips_zero_blocks():
    params = Setup.setup(3, 101, 8, 2, 2)
    # t_exp = 0 selects no table entry
    assert ParallelEvaluator.run_shard(params, mpz(0), 0) == (1, 1)


@pytest.mark.parametrize(
    "e, i, kappa, prime_l",
    [(2 ** 16, 0, 2, 101), (2 ** 16, 3, 2, 101), (12345, 2, 3, 1009), (2 ** 40 + 7, 5, 4, 17)],
)
def test_get_block_matches_definition(e, i, kappa, prime_l):
    expected = (2 ** (i * kappa) * e) % (2 ** kappa * prime_l)
    assert ParallelEvaluator.get_block(mpz(e), i, kappa, mpz(prime_l)) == expected


def test_get_block_known_values():
    assert ParallelEvaluator.get_block(mpz(2) ** 16, 0, 2, mpz(101)) == 88
    assert ParallelEvaluator.get_block(mpz(404), 0, 2, mpz(101)) == 0


def test_get_block_truncates_to_signed_64_bits():
    prime_l = mpz(2) ** 70 + 1
    assert ParallelEvaluator.get_block(mpz(2) ** 63, 0, 64, prime_l) == -(2 ** 63)
    assert ParallelEvaluator.get_block(mpz(2) ** 64, 0, 64, prime_l) == 0


def test_aggregate_is_order_independent():
    """Test that permuting shard results never changes (y, proof)."""
    params = Setup.setup(5, 1009, 30, 2, 3)
    g = mpz(123456789)
    results = [(mpz(17), mpz(3)), (mpz(400), mpz(4)), (mpz(1000), mpz(1))]

    outputs = {ParallelEvaluator.aggregate(params, g, list(p)) for p in itertools.permutations(results)}

    assert len(outputs) == 1
    y, proof = outputs.pop()
    assert y == (123456789 * 17 * 400 * 1000) % 1009
    assert proof == (3 * 4 * 1) % 5


def test_evaluate_is_independent_of_completion_order():
    params = Setup.setup(7, 1009, 40, 2, 4)
    expected = ParallelEvaluator.evaluate(params, mpz(42))

    with patch.object(parallel_module, "as_completed", side_effect=lambda fs: list(fs)[::-1]):
        actual = ParallelEvaluator.evaluate(params, mpz(42))

    assert actual[:2] == expected[:2]


def test_evaluate_starts_one_worker_per_shard(params):
    with patch.object(ParallelEvaluator, "run_shard", return_value=(mpz(1), mpz(1))) as mock_shard:
        y, proof, _ = ParallelEvaluator.evaluate(params, mpz(12345))

    assert sorted(call.args[2] for call in mock_shard.call_args_list) == [0, 1]
    assert y == G_12345 % 101
    assert proof == 1


def test_worker_failure_is_fatal(params):
    with patch.object(ParallelEvaluator, "run_shard", side_effect=PrimeSearchExhausted("boom")):
        with pytest.raises(PrimeSearchExhausted):
            ParallelEvaluator.evaluate(params, mpz(12345))
