"""Light client configuration: network parameters, server address and on-disk locations."""

from __future__ import annotations

import logging
import logging.handlers
import shutil
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path
from urllib.parse import urlsplit

import platformdirs

from zeclight.checkpoints import Checkpoint, closest_checkpoint

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "https://lwdv3.zecwallet.co"
WALLET_NAME = "zecwallet-light-wallet.dat"
LOGFILE_NAME = "zecwallet-light-wallet.debug.log"
ANCHOR_OFFSET: tuple[int, ...] = (4, 0, 0, 0, 0)
MAX_REORG = 100

_MOBILE_PLATFORMS = frozenset({"ios", "android"})
GAP_RULE_UNUSED_ADDRESSES = 0 if sys.platform in _MOBILE_PLATFORMS else 5

_LOG_MAX_BYTES = 5 * 1024 * 1024
_LOG_BACKUPS = 3

_MAIN_CHAINS = frozenset({"zs", "main"})
_CHAIN_SUBDIRS = {"ztestsapling": "testnet3", "zregtestsapling": "regtest"}


def _is_mobile() -> bool:
    return sys.platform in _MOBILE_PLATFORMS


def _uses_app_data_dir() -> bool:
    return sys.platform == "darwin" or sys.platform.startswith("win")


@dataclass(frozen=True)
class NetworkParams:
    """Consensus constants that identify a network's keys and addresses."""

    name: str
    coin_type: int
    hrp_sapling_extended_spending_key: str
    hrp_sapling_extended_full_viewing_key: str
    hrp_sapling_payment_address: str
    b58_pubkey_address_prefix: bytes
    b58_script_address_prefix: bytes
    activation_heights: dict[str, int | None] = field(default_factory=dict)

    def activation_height(self, upgrade: str) -> int | None:
        """Return the activation height of a named network upgrade, if known."""
        return self.activation_heights.get(upgrade)


MAINNET = NetworkParams(
    name="main",
    coin_type=133,
    hrp_sapling_extended_spending_key="secret-extended-key-main",
    hrp_sapling_extended_full_viewing_key="zxviews",
    hrp_sapling_payment_address="zs",
    b58_pubkey_address_prefix=bytes([0x1C, 0xB8]),
    b58_script_address_prefix=bytes([0x1C, 0xBD]),
    activation_heights={
        "overwinter": 347_500,
        "sapling": 419_200,
        "blossom": 653_600,
        "heartwood": 903_000,
        "canopy": 1_046_400,
    },
)

TESTNET = NetworkParams(
    name="test",
    coin_type=1,
    hrp_sapling_extended_spending_key="secret-extended-key-test",
    hrp_sapling_extended_full_viewing_key="zxviewtestsapling",
    hrp_sapling_payment_address="ztestsapling",
    b58_pubkey_address_prefix=bytes([0x1D, 0x25]),
    b58_script_address_prefix=bytes([0x1C, 0xBA]),
    activation_heights={
        "overwinter": 207_500,
        "sapling": 280_000,
        "blossom": 584_000,
        "heartwood": 903_800,
        "canopy": 1_028_500,
    },
)

REGTEST = NetworkParams(
    name="regtest",
    coin_type=1,
    hrp_sapling_extended_spending_key="secret-extended-key-regtest",
    hrp_sapling_extended_full_viewing_key="zxviewregtestsapling",
    hrp_sapling_payment_address="zregtestsapling",
    b58_pubkey_address_prefix=bytes([0x1D, 0x25]),
    b58_script_address_prefix=bytes([0x1C, 0xBA]),
)

# Mainnet key formats with every upgrade active from block 1.
UNITTEST_NETWORK = replace(
    MAINNET,
    name="unittest",
    activation_heights={
        name: 1 for name in ("overwinter", "sapling", "blossom", "heartwood", "canopy", "nu5")
    },
)


@dataclass
class LightClientConfig:
    """Where the wallet talks to and where it keeps its files."""

    server: str
    chain_name: str
    sapling_activation_height: int
    anchor_offset: tuple[int, ...]
    monitor_mempool: bool
    data_dir: str | None
    params: NetworkParams

    @classmethod
    def create_unconnected(cls, params: NetworkParams, data_dir: str | None = None) -> LightClientConfig:
        """Build a config that is not tied to any server, for local wallet work."""
        return cls(
            server="/",
            chain_name=params.hrp_sapling_payment_address,
            sapling_activation_height=1,
            anchor_offset=(4,) * 5,
            monitor_mempool=False,
            data_dir=data_dir,
            params=params,
        )

    def set_data_dir(self, dir_str: str) -> None:
        self.data_dir = dir_str

    def configure_logging(self) -> logging.Handler:
        """Attach a size-rotated log file handler to the root logger and return it."""
        handler = logging.handlers.RotatingFileHandler(
            self.log_path(), maxBytes=_LOG_MAX_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8"
        )
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s::%(message)s"))
        root = logging.getLogger()
        root.setLevel(logging.DEBUG)
        root.addHandler(handler)
        return handler

    def zcash_data_path(self) -> Path:
        """Return (creating it if needed) the directory that holds the wallet."""
        if _is_mobile():
            if self.data_dir is None:
                raise ValueError("A data directory is required on this platform")
            return Path(self.data_dir)

        if self.data_dir is not None:
            location = Path(self.data_dir)
        else:
            if _uses_app_data_dir():
                location = platformdirs.user_data_path(roaming=True) / "Zcash"
            else:
                location = Path.home() / ".zcash"

            if self.chain_name in _CHAIN_SUBDIRS:
                location = location / _CHAIN_SUBDIRS[self.chain_name]
            elif self.chain_name not in _MAIN_CHAINS:
                raise ValueError(f"Unknown chain {self.chain_name}")

        location.mkdir(parents=True, exist_ok=True)
        return location

    def zcash_params_path(self) -> Path:
        """Return (creating it if needed) the directory for the proving parameters."""
        if _is_mobile():
            if self.data_dir is None:
                raise ValueError("A data directory is required on this platform")
            return Path(self.data_dir)

        try:
            Path.home()
        except RuntimeError as exc:
            raise ValueError("Couldn't determine Home Dir") from exc

        params_dir = "ZcashParams" if _uses_app_data_dir() else ".zcash-params"
        location = self.zcash_data_path() / ".." / params_dir
        location.mkdir(parents=True, exist_ok=True)
        return location

    def wallet_path(self) -> Path:
        return self.zcash_data_path() / WALLET_NAME

    def wallet_exists(self) -> bool:
        return self.wallet_path().exists()

    def backup_existing_wallet(self) -> str:
        """Copy the wallet file to a timestamped backup and return the backup's path."""
        if not self.wallet_exists():
            raise FileNotFoundError(
                f"Couldn't find existing wallet to backup. Looked in {self.wallet_path()}"
            )
        backup = self.zcash_data_path() / f"zecwallet-light-wallet.backup.{int(time.time())}.dat"
        shutil.copyfile(self.wallet_path(), backup)
        return str(backup)

    def log_path(self) -> Path:
        return self.zcash_data_path() / LOGFILE_NAME

    def initial_state(
        self, height: int, fetch_tree: Callable[[str, int], tuple[int, str, str]]
    ) -> Checkpoint | None:
        """Return the sapling tree state at ``height``.

        ``fetch_tree(server, height)`` asks the server; if it fails, the closest
        known checkpoint is used instead.
        """
        if height <= self.sapling_activation_height:
            return None

        logger.info("Getting sapling tree from LightwalletD at height %s", height)
        try:
            tree_height, block_hash, tree = fetch_tree(self.server, height)
        except Exception as exc:  # noqa: BLE001 - any server failure falls back
            logger.error("Error getting sapling tree:%s\nWill return checkpoint instead.", exc)
            return closest_checkpoint(self.chain_name, height)
        return Checkpoint(tree_height, block_hash, tree)

    @staticmethod
    def server_or_default(server: str | None) -> str:
        """Normalise a server address, defaulting the scheme and port."""
        if server is None:
            return DEFAULT_SERVER
        address = server if server.startswith("http") else "http://" + server
        parts = urlsplit(address)
        if not parts.hostname:
            raise ValueError(f"Invalid server address: {server!r}")
        if parts.port is None:
            address += ":443"
        return address

    def coin_type(self) -> int:
        return self.params.coin_type

    def hrp_sapling_address(self) -> str:
        return self.params.hrp_sapling_payment_address

    def hrp_sapling_private_key(self) -> str:
        return self.params.hrp_sapling_extended_spending_key

    def hrp_sapling_viewing_key(self) -> str:
        return self.params.hrp_sapling_extended_full_viewing_key

    def base58_pubkey_address(self) -> bytes:
        return self.params.b58_pubkey_address_prefix

    def base58_script_address(self) -> bytes:
        return self.params.b58_script_address_prefix

    def base58_secretkey_prefix(self) -> bytes:
        if self.chain_name in _MAIN_CHAINS:
            return bytes([0x80])
        if self.chain_name in ("ztestsapling", "zregtestsapling"):
            return bytes([0xEF])
        raise ValueError(f"Unknown chain {self.chain_name}")