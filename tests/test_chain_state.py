import pytest

from zeclight.chain_state import BlockData, ChainState
from zeclight.config import UNITTEST_NETWORK, LightClientConfig


@pytest.fixture
def config():
    return LightClientConfig.create_unconnected(UNITTEST_NETWORK)


@pytest.fixture
def state(config):
    return ChainState(config)


def _descending(top, bottom):
    return [BlockData(h, f"hash{h}") for h in range(top, bottom - 1, -1)]


def test_empty_chain_defaults(state, config):
    assert state.last_scanned_height() == config.sapling_activation_height - 1
    assert state.last_scanned_hash() == ""
    assert state.target_height() is None
    assert state.target_height_and_anchor_offset() is None
    assert state.anchor_height() == 0


def test_set_initial_block_only_once(state):
    assert state.set_initial_block(10, "abc") is True
    assert state.set_initial_block(20, "def") is False
    assert state.get_blocks() == [BlockData(10, "abc")]
    assert state.last_scanned_height() == 10
    assert state.last_scanned_hash() == "abc"


def test_set_blocks_and_copy(state):
    blocks = _descending(20, 10)
    state.set_blocks(blocks)
    copy = state.get_blocks()
    copy.clear()
    assert state.get_blocks() == blocks
    assert state.last_scanned_height() == 20
    assert state.target_height() == 21


def test_clear_removes_blocks(state, config):
    state.set_blocks(_descending(5, 1))
    state.clear()
    assert state.get_blocks() == []
    assert state.last_scanned_height() == config.sapling_activation_height - 1
    assert state.set_initial_block(3, "x") is True


def test_anchor_offset_with_enough_blocks(state, config):
    state.set_blocks(_descending(20, 10))
    target, offset = state.target_height_and_anchor_offset()
    assert target == state.target_height()
    assert offset == config.anchor_offset[-1]
    assert state.anchor_height() == target - offset - 1


def test_anchor_limited_by_earliest_block(state):
    state.set_blocks([BlockData(10, "h")])
    target, offset = state.target_height_and_anchor_offset()
    assert target - offset == 10
    assert state.anchor_height() == 9


def test_zero_anchor_offset(config):
    config.anchor_offset = (9, 4, 2, 1, 0)
    state = ChainState(config, blocks=_descending(11, 1))
    target, offset = state.target_height_and_anchor_offset()
    assert offset == 0
    assert state.anchor_height() == target - 1


def test_first_tx_block(state, config):
    assert state.first_tx_block([]) == config.sapling_activation_height
    assert state.first_tx_block([50, 30, 40]) == 30
    state.birthday = 77
    assert state.first_tx_block([]) == 77


def test_birthday_for(config):
    unset = ChainState(config)
    assert unset.birthday_for([50, 30]) == 30
    born = ChainState(config, birthday=40)
    assert born.birthday_for([50]) == 40
    assert born.birthday_for([25]) == 25
    assert born.birthday_for([]) == 40


def test_adjust_birthday(config):
    state = ChainState(config, birthday=100)
    state.adjust_birthday(50)
    assert state.birthday == 50
    state.adjust_birthday(200)
    assert state.birthday == 50
    state.adjust_birthday(0)
    assert state.birthday == config.sapling_activation_height


def test_adjust_birthday_unset_stays_unset(config):
    state = ChainState(config)
    state.adjust_birthday(30)
    assert state.birthday == 0