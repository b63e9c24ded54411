"""Tests for SubtractiveSource."""

from __future__ import annotations

from randomizer.sources.subtractive import SubtractiveSource


class TestSubtractiveSource:
    """Tests for Knuth's subtractive generator."""

    def test_name_and_width(self) -> None:
        source = SubtractiveSource(seed=1)
        assert source.name == "subtractive"
        assert source.bits == 31
        assert source.span == 2**31 - 1

    def test_not_thread_safe(self) -> None:
        assert SubtractiveSource(seed=1).is_thread_safe is False

    def test_same_seed_same_sequence(self) -> None:
        a = SubtractiveSource(seed=161803)
        b = SubtractiveSource(seed=161803)
        assert [a.next_raw() for _ in range(200)] == [b.next_raw() for _ in range(200)]

    def test_different_seeds_differ(self) -> None:
        a = SubtractiveSource(seed=1)
        b = SubtractiveSource(seed=2)
        assert [a.next_raw() for _ in range(10)] != [b.next_raw() for _ in range(10)]

    def test_negative_seed_folds_to_absolute_value(self) -> None:
        a = SubtractiveSource(seed=-12345)
        b = SubtractiveSource(seed=12345)
        assert a.seed == b.seed == 12345
        assert a.next_raw() == b.next_raw()

    def test_huge_seed_is_reduced(self) -> None:
        source = SubtractiveSource(seed=2**100 + 5)
        assert 0 <= source.seed < source.span

    def test_values_within_span(self) -> None:
        for seed in (0, 1, 161803398, 2**31 - 2):
            source = SubtractiveSource(seed=seed)
            for _ in range(2000):
                assert 0 <= source.next_raw() < source.span

    def test_draw_count(self) -> None:
        source = SubtractiveSource(seed=3)
        for _ in range(17):
            source.next_raw()
        assert source.draw_count == 17

    def test_unseeded_instances_differ(self) -> None:
        a = SubtractiveSource()
        b = SubtractiveSource()
        # Two 32-bit OS seeds collide with negligible probability.
        assert [a.next_raw() for _ in range(4)] != [b.next_raw() for _ in range(4)]

    def test_health_check(self) -> None:
        source = SubtractiveSource(seed=3)
        source.next_raw()
        health = source.health_check()
        assert health == {"source": "subtractive", "bits": 31, "span": 2**31 - 1, "draws": 1}
