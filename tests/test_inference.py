import numpy as np
import pytest

from fuel_economy.data import Record, make_record_set
from fuel_economy.exceptions import DegenerateDataError, SchemaMismatchError
from fuel_economy.features import add_quadratic_feature, LINEAR_FEATURES, QUADRATIC_FEATURES
from fuel_economy.inference import coefficient_table
from fuel_economy.models import OLSModel


def make_noisy_data(n_obs=25, seed=4):
    rng = np.random.default_rng(seed=seed)
    displ = np.linspace(1.5, 6.5, n_obs)
    hwy = 0.8 * displ**2 - 8.0 * displ + 40.0 + rng.normal(scale=0.5, size=n_obs)
    return add_quadratic_feature(
        make_record_set(Record(x, 4, y, 2010) for x, y in zip(displ, hwy))
    )


class TestCoefficientTable:
    def test_matches_ols_model(self):
        df = make_noisy_data()
        table = coefficient_table(df, QUADRATIC_FEATURES)
        coef, intercept = OLSModel(features=QUADRATIC_FEATURES).fit(df).get_params()

        assert list(table.index) == ["intercept", "DISPL", "DISPL_SQ"]
        assert list(table.columns) == ["coef", "std_err", "t", "p_value"]
        np.testing.assert_allclose(table.loc["intercept", "coef"], intercept, rtol=1e-8)
        np.testing.assert_allclose(table.loc[["DISPL", "DISPL_SQ"], "coef"].values, coef, rtol=1e-8)

    def test_statistics(self):
        table = coefficient_table(make_noisy_data(), QUADRATIC_FEATURES)
        assert (table["std_err"] > 0).all()
        assert ((table["p_value"] >= 0) & (table["p_value"] <= 1)).all()
        assert 0.0 <= table.attrs["r_squared"] <= 1.0
        assert table.attrs["adj_r_squared"] <= table.attrs["r_squared"]

    def test_degenerate(self):
        df = make_noisy_data(n_obs=2)
        with pytest.raises(DegenerateDataError):
            coefficient_table(df, QUADRATIC_FEATURES)

    def test_missing_column(self):
        df = make_noisy_data().drop(columns=["DISPL_SQ"])
        with pytest.raises(SchemaMismatchError):
            coefficient_table(df, QUADRATIC_FEATURES)

    def test_linear(self):
        table = coefficient_table(make_noisy_data(), LINEAR_FEATURES)
        assert list(table.index) == ["intercept", "DISPL"]
