import pytest

from core.utils.validators import validate_category, validate_theme, validate_tier


class TestValidateTheme:
    @pytest.mark.parametrize("value", ["all", "halloween", "light", "dark", "colorful"])
    def test_accepts_known_themes(self, value: str) -> None:
        assert validate_theme(value) is True

    @pytest.mark.parametrize("value", ["Halloween", "DARK", "CoLoRfUl", "ALL"])
    def test_ignores_case(self, value: str) -> None:
        assert validate_theme(value) is True

    @pytest.mark.parametrize("value", ["zzz", "", " dark", "spooky"])
    def test_rejects_unknown_themes(self, value: str) -> None:
        assert validate_theme(value) is False

    def test_rejects_non_string(self) -> None:
        assert validate_theme(None) is False
        assert validate_theme(3) is False


class TestValidateTier:
    @pytest.mark.parametrize("value", ["all", "basic", "Premium", "DELUXE"])
    def test_accepts_known_tiers(self, value: str) -> None:
        assert validate_tier(value) is True

    @pytest.mark.parametrize("value", ["gold", "", "basic "])
    def test_rejects_unknown_tiers(self, value: str) -> None:
        assert validate_tier(value) is False


class TestValidateCategory:
    @pytest.mark.parametrize(
        "value",
        [
            "all",
            "upperBody",
            "lowerBody",
            "hat",
            "shoes",
            "accessory",
            "legendary",
            "mythic",
            "epic",
            "rare",
        ],
    )
    def test_accepts_canonical_keys(self, value: str) -> None:
        assert validate_category(value) is True

    @pytest.mark.parametrize("value", ["upperbody", "Hat", "Upper Body", "", "cape"])
    def test_is_case_sensitive_and_rejects_unknown(self, value: str) -> None:
        assert validate_category(value) is False
