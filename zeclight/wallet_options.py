"""User-selectable wallet options and their binary serialization."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import BinaryIO

_U64 = struct.Struct("<Q")
_U8 = struct.Struct("<B")


class MemoDownloadOption(IntEnum):
    """Which memos the wallet fetches while syncing."""

    NO_MEMOS = 0
    WALLET_MEMOS = 1
    ALL_MEMOS = 2


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"Expected {size} bytes, got {len(data)}")
    return data


@dataclass
class WalletOptions:
    """Options stored alongside the wallet."""

    download_memos: MemoDownloadOption = MemoDownloadOption.WALLET_MEMOS

    @staticmethod
    def serialized_version() -> int:
        return 1

    @classmethod
    def read(cls, stream: BinaryIO) -> WalletOptions:
        """Read options from ``stream``; an unknown memo option raises ValueError."""
        (_version,) = _U64.unpack(_read_exact(stream, _U64.size))
        (value,) = _U8.unpack(_read_exact(stream, _U8.size))
        try:
            option = MemoDownloadOption(value)
        except ValueError:
            raise ValueError(f"Bad download option {value}") from None
        return cls(download_memos=option)

    def write(self, stream: BinaryIO) -> None:
        """Write the options, version first, to ``stream``."""
        stream.write(_U64.pack(self.serialized_version()))
        stream.write(_U8.pack(int(self.download_memos)))