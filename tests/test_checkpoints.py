import string

import pytest

from zeclight import checkpoints
from zeclight.checkpoints import Checkpoint


@pytest.mark.parametrize(
    "height, expected",
    [
        (9, None),
        (10, 10),
        (11, 10),
        (29, 10),
        (30, 30),
        (40, 40),
        (41, 40),
        (99, 40),
    ],
)
def test_first_lower_than(height, expected):
    assert checkpoints.first_lower_than(height, [10, 30, 40]) == expected


def test_first_lower_than_empty():
    assert checkpoints.first_lower_than(100, []) is None


@pytest.mark.parametrize(
    "height, expected",
    [(600000, 600000), (625000, 600000), (650000, 650000), (655000, 650000)],
)
def test_testnet_checkpoints(height, expected):
    assert checkpoints.test_checkpoint(height).height == expected


def test_testnet_checkpoint_before_first():
    assert checkpoints.test_checkpoint(500000) is None


@pytest.mark.parametrize("height, expected", [(610000, 610000), (625000, 610000)])
def test_main_checkpoints(height, expected):
    assert checkpoints.main_checkpoint(height).height == expected


def test_main_checkpoint_before_first():
    assert checkpoints.main_checkpoint(500000) is None


def test_main_checkpoint_past_last():
    assert checkpoints.main_checkpoint(2_000_000).height == 1370000


def test_main_checkpoint_hash_pinned():
    cp = checkpoints.main_checkpoint(610000)
    assert cp.hash == "000000000218882f481e3b49ca3df819734b8d74aac91f69e848d7499b34b472"
    assert cp.tree.startswith("0192943f1eca6525")


@pytest.mark.parametrize("chain", ["zs", "main"])
def test_closest_checkpoint_main_chains(chain):
    assert checkpoints.closest_checkpoint(chain, 1000500).height == 1000000


def test_closest_checkpoint_testnet():
    cp = checkpoints.closest_checkpoint("ztestsapling", 650001)
    assert cp.hash == "003f7e09a357a75c3742af1b7e1189a9038a360cebb9d55e158af94a1c5aa682"


def test_closest_checkpoint_unknown_chain():
    assert checkpoints.closest_checkpoint("zregtestsapling", 1000000) is None


def test_all_main_checkpoints_sorted_and_well_formed():
    cps = checkpoints.all_main_checkpoints()
    heights = [c.height for c in cps]
    assert len(cps) == 21
    assert heights == sorted(heights)
    assert heights[0] == 610000 and heights[-1] == 1370000
    for cp in cps:
        assert len(cp.hash) == 64
        assert set(cp.hash) <= set(string.hexdigits)
        assert set(cp.tree) <= set(string.hexdigits)


def test_find_checkpoint_unsorted_input():
    cps = [Checkpoint(30, "c", "t3"), Checkpoint(10, "a", "t1"), Checkpoint(20, "b", "t2")]
    assert checkpoints.find_checkpoint(25, cps) == Checkpoint(20, "b", "t2")
    assert checkpoints.find_checkpoint(5, cps) is None
    assert checkpoints.find_checkpoint(100, cps) == Checkpoint(30, "c", "t3")


def test_find_checkpoint_accepts_plain_tuples():
    result = checkpoints.find_checkpoint(15, [(10, "a", "t1")])
    assert result.hash == "a"
    assert result.tree == "t1"