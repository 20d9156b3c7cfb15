"""Testes das regras incrementais e da referência em lote."""

import pytest

from analyzers.statistics.market_stats_calculator import compute_batch_stats, update
from domain.entities.market_stats import MarketStats


class TestUpdate:

    def test_first_observation_starts_from_zero_state(self, make_point):
        stats = update(None, make_point(price=12.5, volume=3.0, is_buy=True))

        assert stats.market == 7
        assert stats.total_volume == 3.0
        assert stats.mean_price == 12.5
        assert stats.mean_volume == 3.0
        assert stats.volume_weighted_mean_price == 12.5
        assert stats.percent_buy == 1.0
        assert stats.total_data_points == 1

    def test_none_and_empty_state_are_equivalent(self, make_point):
        point = make_point(price=8.0, volume=1.5, is_buy=False)

        assert update(None, point) == update(MarketStats.empty(7), point)

    def test_two_point_scenario(self, make_point):
        stats = update(None, make_point(price=10.0, volume=2.0, is_buy=True))
        stats = update(stats, make_point(price=20.0, volume=2.0, is_buy=False))

        assert stats.total_volume == 4.0
        assert stats.mean_price == 15.0
        assert stats.mean_volume == 2.0
        assert stats.volume_weighted_mean_price == 15.0
        assert stats.percent_buy == 0.5
        assert stats.total_data_points == 2

    def test_vwap_weights_by_volume(self, make_point):
        stats = update(None, make_point(price=10.0, volume=1.0))
        stats = update(stats, make_point(price=20.0, volume=3.0))

        assert stats.mean_price == 15.0
        assert stats.volume_weighted_mean_price == pytest.approx(17.5)

    def test_zero_volume_first_point_has_zero_vwap(self, make_point):
        stats = update(None, make_point(price=42.0, volume=0.0, is_buy=False))

        assert stats.volume_weighted_mean_price == 0.0
        assert stats.total_volume == 0.0
        assert stats.mean_volume == 0.0
        assert stats.mean_price == 42.0
        assert stats.total_data_points == 1

    def test_vwap_recovers_after_zero_volume_start(self, make_point):
        stats = update(None, make_point(price=42.0, volume=0.0))
        stats = update(stats, make_point(price=10.0, volume=5.0))

        assert stats.volume_weighted_mean_price == 10.0
        assert stats.mean_price == 26.0

    def test_volume_cancelling_back_to_zero_resets_vwap(self, make_point):
        stats = update(None, make_point(price=10.0, volume=2.0))
        stats = update(stats, make_point(price=11.0, volume=-2.0))

        assert stats.total_volume == 0.0
        assert stats.volume_weighted_mean_price == 0.0

    def test_percent_buy_is_fractional(self, make_point):
        stats = None
        for is_buy in (True, False, False):
            stats = update(stats, make_point(is_buy=is_buy))

        assert stats.percent_buy == pytest.approx(1 / 3)

    def test_previous_snapshot_is_not_modified(self, make_point):
        first = update(None, make_point(price=10.0))
        second = update(first, make_point(price=30.0))

        assert first.total_data_points == 1
        assert first.mean_price == 10.0
        assert second is not first

    def test_rejects_point_from_another_market(self, make_point):
        stats = update(None, make_point(market=1))

        with pytest.raises(ValueError):
            update(stats, make_point(market=2))


class TestComputeBatchStats:

    def test_empty_history_is_zero_state(self):
        assert compute_batch_stats(9, []) == MarketStats.empty(9)

    def test_matches_known_values(self, make_point):
        points = [
            make_point(price=10.0, volume=1.0, is_buy=True),
            make_point(price=20.0, volume=3.0, is_buy=False),
            make_point(price=30.0, volume=0.0, is_buy=True),
        ]

        stats = compute_batch_stats(7, points)

        assert stats.total_volume == 4.0
        assert stats.mean_price == pytest.approx(20.0)
        assert stats.mean_volume == pytest.approx(4.0 / 3)
        assert stats.volume_weighted_mean_price == pytest.approx(17.5)
        assert stats.percent_buy == pytest.approx(2 / 3)
        assert stats.total_data_points == 3

    def test_zero_total_volume_gives_zero_vwap(self, make_point):
        stats = compute_batch_stats(7, [make_point(volume=0.0), make_point(volume=0.0)])

        assert stats.volume_weighted_mean_price == 0.0
