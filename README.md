# zeclight

Building blocks for a Zcash light wallet client.

- `zeclight.checkpoints` holds known Sapling commitment-tree checkpoints for
  mainnet (`"zs"`, `"main"`) and testnet (`"ztestsapling"`). Each is a
  `Checkpoint(height, hash, tree)`. `closest_checkpoint(chain_name, height)`
  returns the highest checkpoint at or below `height`, or `None`.
- `zeclight.config` has `NetworkParams` with the `MAINNET`, `TESTNET`,
  `REGTEST` and `UNITTEST_NETWORK` constants, and `LightClientConfig`: the
  server address, chain name, Sapling activation height, anchor offsets and
  data directory. It works out the data, parameters, wallet and log file
  paths (creating the directories), backs up an existing wallet file, sets up
  a size-rotated log file, normalises server addresses and gives the address
  and key prefixes for each chain.
- `zeclight.wallet_options` has `MemoDownloadOption` and `WalletOptions`,
  which read and write the memo download option in its binary form
  (a little-endian u64 version followed by one byte).
- `zeclight.send_progress` has `SendProgress`, the status of the most recent
  outgoing transaction, with `reset`, `fail` and `succeed`.
- `zeclight.chain_state` has `BlockData` and `ChainState`, which keep the
  recently scanned blocks (highest first) and the wallet birthday, and
  compute the last scanned height, target height and anchor height.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Examples

Find the closest checkpoint:

```python
from zeclight.checkpoints import closest_checkpoint

checkpoint = closest_checkpoint("main", 625000)
print(checkpoint.height)   # 610000
```

Round-trip wallet options:

```python
import io
from zeclight.wallet_options import MemoDownloadOption, WalletOptions

options = WalletOptions(download_memos=MemoDownloadOption.ALL_MEMOS)
buffer = io.BytesIO()
options.write(buffer)
buffer.seek(0)
assert WalletOptions.read(buffer) == options
```

Normalise a server address:

```python
from zeclight.config import LightClientConfig

print(LightClientConfig.server_or_default("lightwalletd.example.com"))
# http://lightwalletd.example.com:443
```

Track the scanned chain:

```python
from zeclight.chain_state import ChainState
from zeclight.config import UNITTEST_NETWORK, LightClientConfig

config = LightClientConfig.create_unconnected(UNITTEST_NETWORK)
state = ChainState(config)
state.set_initial_block(100, "00ab")
print(state.target_height())   # 101
print(state.anchor_height())   # 99
```

Get an initial tree state, falling back to a checkpoint when the server
lookup fails:

```python
def fetch_tree(server, height):
    raise ConnectionError("offline")

config = LightClientConfig.create_unconnected(UNITTEST_NETWORK)
config.chain_name = "main"
print(config.initial_state(625000, fetch_tree).height)   # 610000
```

## What this package does not do

It does not talk to a lightwalletd server: `LightClientConfig.initial_state`
takes the lookup as a `fetch_tree(server, height)` callable supplied by the
caller. It has no keys, addresses, notes or transactions, so it cannot
compute balances, select notes, build, sign or broadcast a transaction, and
it does not read or write a whole wallet file; only `WalletOptions` has a
binary form. There is no command-line program.