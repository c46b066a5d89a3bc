import pytest

from lottostats.profiles import PROFILES, LotteryProfile, get_profile


def test_builtin_profiles_are_valid():
    for key, profile in PROFILES.items():
        assert profile.key == key
        assert profile.draw_size <= profile.total_numbers


def test_get_profile():
    assert get_profile("quina").total_numbers == 80
    with pytest.raises(KeyError, match="mega_sena"):
        get_profile("powerball")


@pytest.mark.parametrize("kwargs", [
    dict(total_numbers=5, draw_size=6, bet_size=5, hot_count=1, cold_count=1),
    dict(total_numbers=25, draw_size=5, bet_size=26, hot_count=1, cold_count=1),
    dict(total_numbers=25, draw_size=5, bet_size=5, hot_count=0, cold_count=1),
    dict(total_numbers=25, draw_size=5, bet_size=5, hot_count=5, cold_count=30),
])
def test_invalid_profiles(kwargs):
    with pytest.raises(ValueError):
        LotteryProfile(key="x", name="X", **kwargs)


def test_profile_is_immutable(profile):
    with pytest.raises(AttributeError):
        profile.draw_size = 6
