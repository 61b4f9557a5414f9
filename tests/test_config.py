import decimal

import pytest

from annuity_calc import config
from annuity_calc.errors import ConfigurationError


class TestCalculationContext:
    def test_defaults(self):
        ctx = config.calculation_context(env={})
        assert ctx.prec == config.DEFAULT_PRECISION == 64
        assert ctx.rounding == decimal.ROUND_HALF_EVEN
        assert ctx.traps[decimal.DivisionByZero]
        assert ctx.traps[decimal.InvalidOperation]
        assert ctx.traps[decimal.Overflow]

    def test_does_not_touch_global_context(self):
        before = decimal.getcontext().prec
        config.calculation_context(env={"ANNUITY_CALC_PRECISION": "12"})
        assert decimal.getcontext().prec == before

    def test_precision_and_rounding_from_env(self):
        ctx = config.calculation_context(
            env={"ANNUITY_CALC_PRECISION": "20", "ANNUITY_CALC_ROUNDING": "half_up"}
        )
        assert ctx.prec == 20
        assert ctx.rounding == decimal.ROUND_HALF_UP

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ANNUITY_CALC_ROUNDING", "ROUND_DOWN")
        assert config.calculation_context().rounding == decimal.ROUND_DOWN

    @pytest.mark.parametrize(
        "env",
        [
            {"ANNUITY_CALC_PRECISION": "many"},
            {"ANNUITY_CALC_PRECISION": "0"},
            {"ANNUITY_CALC_ROUNDING": "ROUND_SIDEWAYS"},
        ],
    )
    def test_invalid_settings(self, env):
        with pytest.raises(ConfigurationError):
            config.calculation_context(env=env)


class TestLoggingSettings:
    def test_defaults(self):
        assert config.get_log_level(env={}) == "WARNING"
        assert config.get_log_json(env={}) is False

    def test_from_env(self):
        env = {"ANNUITY_CALC_LOG_LEVEL": "debug", "ANNUITY_CALC_LOG_JSON": "yes"}
        assert config.get_log_level(env=env) == "DEBUG"
        assert config.get_log_json(env=env) is True
