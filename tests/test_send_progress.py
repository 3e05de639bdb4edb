import time

from zeclight.send_progress import SendProgress, now


def test_now_matches_wall_clock():
    before = int(time.time())
    value = now()
    after = int(time.time())
    assert before <= value <= after


def test_new_progress_is_blank():
    progress = SendProgress()
    assert progress.id == 0
    assert progress.is_send_in_progress is False
    assert progress.progress == 0
    assert progress.total == 0
    assert progress.last_error is None
    assert progress.last_txid is None


def test_reset_advances_id_and_clears_state():
    progress = SendProgress(id=7, is_send_in_progress=True, progress=3, total=5,
                            last_error="boom", last_txid="abc")
    progress.reset()
    assert progress == SendProgress(id=8)


def test_reset_repeatedly_counts_up():
    progress = SendProgress()
    for _ in range(3):
        progress.reset()
    assert progress.id == 3


def test_fail_records_error_and_stops():
    progress = SendProgress(id=2, is_send_in_progress=True, progress=1, total=4)
    progress.fail("Insufficient funds")
    assert progress.is_send_in_progress is False
    assert progress.last_error == "Insufficient funds"
    assert progress.last_txid is None
    assert progress.id == 2
    assert progress.progress == 1


def test_succeed_records_txid_and_stops():
    progress = SendProgress(id=4, is_send_in_progress=True, total=2)
    progress.succeed("deadbeef")
    assert progress.is_send_in_progress is False
    assert progress.last_txid == "deadbeef"
    assert progress.last_error is None
    assert progress.total == 2


def test_reset_after_success_drops_previous_txid():
    progress = SendProgress()
    progress.succeed("cafe")
    progress.reset()
    assert progress.last_txid is None
    assert progress.id == 1