import io
import struct

import pytest

from zeclight.wallet_options import MemoDownloadOption, WalletOptions


def _serialize(options: WalletOptions) -> bytes:
    buf = io.BytesIO()
    options.write(buf)
    return buf.getvalue()


def test_default_is_wallet_memos():
    assert WalletOptions().download_memos is MemoDownloadOption.WALLET_MEMOS


def test_serialized_version():
    assert WalletOptions.serialized_version() == 1


def test_wire_format_of_default():
    data = _serialize(WalletOptions())
    assert data == struct.pack("<Q", WalletOptions.serialized_version()) + bytes(
        [MemoDownloadOption.WALLET_MEMOS]
    )


@pytest.mark.parametrize("option", list(MemoDownloadOption))
def test_round_trip(option):
    data = _serialize(WalletOptions(download_memos=option))
    restored = WalletOptions.read(io.BytesIO(data))
    assert restored.download_memos is option
    assert restored == WalletOptions(download_memos=option)


def test_option_byte_matches_enum_value():
    data = _serialize(WalletOptions(download_memos=MemoDownloadOption.ALL_MEMOS))
    assert data[-1] == MemoDownloadOption.ALL_MEMOS.value
    assert len(data) == 9


def test_read_ignores_stored_version():
    data = struct.pack("<Q", 77) + bytes([MemoDownloadOption.NO_MEMOS])
    assert WalletOptions.read(io.BytesIO(data)).download_memos is MemoDownloadOption.NO_MEMOS


def test_read_rejects_unknown_option():
    data = struct.pack("<Q", 1) + bytes([3])
    with pytest.raises(ValueError, match="Bad download option 3"):
        WalletOptions.read(io.BytesIO(data))


def test_read_truncated_stream():
    with pytest.raises(EOFError):
        WalletOptions.read(io.BytesIO(struct.pack("<Q", 1)))


def test_read_leaves_trailing_bytes():
    data = _serialize(WalletOptions()) + b"rest"
    stream = io.BytesIO(data)
    WalletOptions.read(stream)
    assert stream.read() == b"rest"