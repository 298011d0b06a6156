from unittest.mock import MagicMock

import pytest

from flexpool_api.cli import minerinfo, poolinfo
from flexpool_api.errors import TransportError
from flexpool_api.schemas import (
    Block,
    BlockPage,
    MinerDetails,
    MinerPayment,
    MinerWorker,
    PaymentPage,
    PoolHashrate
)


def make_block(number=1, block_type="block", round_time=21600, total_rewards=2000000000):
    return Block(
        hash="0xhash", number=number, type=block_type, miner="0xminer", difficulty=1,
        timestamp=1600000000, confirmed=True, round_time=round_time, luck=1.0,
        server_name="eu1", block_reward=total_rewards, block_fees=0,
        uncle_inclusion_rewards=0, total_rewards=total_rewards,
    )


def patch_client(monkeypatch, module, name):
    client = MagicMock()
    client_cls = MagicMock()
    client_cls.return_value.__enter__.return_value = client
    monkeypatch.setattr(module, name, client_cls)
    return client


@pytest.fixture
def miner_client(monkeypatch):
    client = patch_client(monkeypatch, minerinfo, "MinerClient")
    client.get_balance.return_value = 50000000
    client.get_details.return_value = MinerDetails(
        min_payout_threshold=10000000000, pool_donation=1.0, max_fee_price=0,
        censored_email="a***@b.com", censored_ip="1.2.3.*", first_joined=1600000000,
    )
    client.get_round_share.return_value = 0.01
    client.get_estimated_daily_revenue.return_value = 12000000
    client.get_total_paid.return_value = 3000000000
    client.get_total_donated.return_value = 30000000
    client.get_workers.return_value = [MinerWorker(
        name="rig1", online=True, duplicate_workers_merged=0, reported_hashrate=100000000,
        effective_hashrate=95000000, valid_shares=900, stale_shares=10, invalid_shares=1,
        last_seen=1600000000,
    )]
    client.get_payments.return_value = PaymentPage(
        data=[MinerPayment(txid="0xtx", amount=100000000, timestamp=1600000000, duration=86400)],
        items_per_page=10, total_items=1, total_pages=1,
    )
    client.get_blocks.return_value = BlockPage(data=[], items_per_page=10, total_items=0, total_pages=0)
    return client


def test_minerinfo_requires_address(capsys):
    with pytest.raises(SystemExit) as exc_info:
        minerinfo.main([])
    assert exc_info.value.code == 1
    assert "No address given" in capsys.readouterr().err


def test_minerinfo_report(miner_client, capsys):
    minerinfo.main(["--address", "0xABC"])

    out = capsys.readouterr().out
    assert "Flexpool Miner '0xABC' Stats" in out
    assert "Unpaid Balance: 0.05000000 eth" in out
    assert "Min Payout Threshold: 10.0000 eth" in out
    assert "rig1 (effective hashrate: 95MH/s)" in out
    assert "(valid: 900, stale: 10, invalid: 1)" in out
    assert "Txn: 0xtx (amount: 0.10000000 eth)" in out
    assert "No blocks mined yet." in out
    miner_client.get_payments.assert_called_once_with("0xABC", 0)


def test_minerinfo_no_workers(miner_client, capsys):
    miner_client.get_workers.return_value = []
    minerinfo.main(["--address", "0xABC"])
    assert "None currently active." in capsys.readouterr().out


def test_minerinfo_exits_on_failure(miner_client, capsys):
    miner_client.get_round_share.side_effect = TransportError("connection refused")

    with pytest.raises(SystemExit) as exc_info:
        minerinfo.main(["--address", "0xABC"])

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "Unable to get round share: connection refused" in captured.err
    assert captured.out == ""
    miner_client.get_total_paid.assert_not_called()


@pytest.fixture
def pool_client(monkeypatch):
    client = patch_client(monkeypatch, poolinfo, "PoolClient")
    client.get_hashrate.return_value = PoolHashrate(**{
        "as": 1 * 10 ** 12, "au": 5 * 10 ** 11, "eu": 4 * 10 ** 12,
        "sa": 5 * 10 ** 11, "us": 4 * 10 ** 12, "total": 10 ** 13,
    })
    client.get_miners_online.return_value = 1200
    client.get_workers_online.return_value = 5400
    client.get_recent_blocks.return_value = [
        make_block(1, "uncle"), make_block(2), make_block(3), make_block(4),
    ]
    return client


def test_poolinfo_report(pool_client, capsys):
    poolinfo.main(["--pages", "3", "--delay", "0"])

    out = capsys.readouterr().out
    assert "Miners: 1200 (Workers: 5400)" in out
    assert "Hashrate: 10000GH/s" in out
    assert "\tEu: 4000GH/s" in out
    assert "PPLNS share window: 00:13:20 (800)" in out
    assert "Uncle rate: 25.00%" in out
    assert "Average blocks per day: 4.00 (average reward: 2.00000000 eth)" in out
    assert "over a 4 block period" in out
    pool_client.get_recent_blocks.assert_called_once_with(pages=3, throttle_seconds=0.0)


def test_poolinfo_exits_on_empty_sample(pool_client, capsys):
    pool_client.get_recent_blocks.return_value = []

    with pytest.raises(SystemExit) as exc_info:
        poolinfo.main([])

    assert exc_info.value.code == 1
    assert "Unable to build pool report" in capsys.readouterr().err


def test_poolinfo_exits_on_api_failure(pool_client, capsys):
    pool_client.get_hashrate.side_effect = TransportError("HTTP 502", status_code=502)

    with pytest.raises(SystemExit) as exc_info:
        poolinfo.main([])

    assert exc_info.value.code == 1
    assert "HTTP 502" in capsys.readouterr().err


def test_seconds_to_hhmmss():
    assert poolinfo.seconds_to_hhmmss(0) == "00:00:00"
    assert poolinfo.seconds_to_hhmmss(3725) == "01:02:05"
    assert poolinfo.seconds_to_hhmmss(90000) == "25:00:00"


@pytest.mark.parametrize("timeout", ["0", "-5", "abc"])
def test_minerinfo_rejects_bad_timeout(miner_client, capsys, timeout):
    with pytest.raises(SystemExit) as exc_info:
        minerinfo.main(["--address", "0xABC", "--timeout", timeout])

    assert exc_info.value.code == 2
    assert "--timeout" in capsys.readouterr().err
    miner_client.get_balance.assert_not_called()


def test_poolinfo_rejects_zero_timeout(pool_client, capsys):
    with pytest.raises(SystemExit) as exc_info:
        poolinfo.main(["--timeout", "0"])

    assert exc_info.value.code == 2
    pool_client.get_hashrate.assert_not_called()


def test_timeout_is_passed_to_client(miner_client):
    minerinfo.main(["--address", "0xABC", "--timeout", "2.5"])
    minerinfo.MinerClient.assert_called_once_with(timeout=2.5)
