import numpy as np
import pandas as pd
import pytest
from fuel_economy.data import make_record_set, Record
from fuel_economy.exceptions import DegenerateDataError, SchemaMismatchError
from fuel_economy.features import add_quadratic_feature, LINEAR_FEATURES, QUADRATIC_FEATURES
from fuel_economy.models import OLSModel
from sklearn.linear_model import LinearRegression


def make_linear_data(slope=-3.2, intercept=35.0, n_obs=20, year=2010):
    displ = np.linspace(1.5, 6.5, n_obs)
    hwy = slope * displ + intercept
    cyl = np.where(displ < 3.0, 4, np.where(displ < 4.5, 6, 8))
    return make_record_set(
        Record(x, c, y, year) for x, c, y in zip(displ, cyl, hwy)
    )


def make_quadratic_data(a=0.8, b=-8.0, c=40.0, displ=None, year=2010):
    if displ is None:
        displ = np.linspace(1.5, 6.5, 20)
    hwy = a * displ**2 + b * displ + c
    return make_record_set(Record(x, 4, y, year) for x, y in zip(displ, hwy))


class TestOLSModel:
    def test_fit_recovers_linear_coefficients(self):
        """Noiseless linear data gives back the generating slope and intercept."""
        df = make_linear_data(slope=-3.2, intercept=35.0)

        model = OLSModel(features=LINEAR_FEATURES)
        model.fit(df)
        coef, intercept = model.get_params()

        np.testing.assert_allclose(coef, [-3.2], rtol=1e-10)
        np.testing.assert_allclose(intercept, 35.0, rtol=1e-10)

    def test_predict_reproduces_training_response(self):
        df = make_linear_data()
        model = OLSModel().fit(df)

        predictions = model.predict(df)

        np.testing.assert_allclose(predictions, df["HWY"].values, rtol=1e-10)

    def test_fit_matches_regressor(self):
        """Coefficients agree with fitting the regressor on the feature matrix directly."""
        rng = np.random.default_rng(seed=1)
        df = make_quadratic_data()
        df["HWY"] = df["HWY"] + rng.normal(scale=0.5, size=len(df))
        df = add_quadratic_feature(df)

        model = OLSModel(features=QUADRATIC_FEATURES).fit(df)
        coef, intercept = model.get_params()

        regressor = LinearRegression(fit_intercept=True)
        regressor.fit(df[["DISPL", "DISPL_SQ"]].values, df["HWY"].values)

        np.testing.assert_allclose(coef, regressor.coef_, rtol=1e-10)
        np.testing.assert_allclose(intercept, regressor.intercept_, rtol=1e-10)

    def test_quadratic_model_fits_quadratic_data(self):
        """The quadratic model predicts held-out quadratic data with near-zero residuals."""
        df_train = add_quadratic_feature(make_quadratic_data())
        df_test = add_quadratic_feature(
            make_quadratic_data(displ=np.array([1.8, 2.7, 3.3, 5.0, 6.2]), year=2011)
        )

        model = OLSModel(features=QUADRATIC_FEATURES).fit(df_train)
        residuals = df_test["HWY"].values - model.predict(df_test)

        np.testing.assert_allclose(residuals, 0.0, atol=1e-8)

    def test_linear_model_misses_curvature(self):
        df_train = make_quadratic_data()
        df_test = make_quadratic_data(displ=np.array([1.8, 2.7, 3.3, 5.0, 6.2]), year=2011)

        model = OLSModel(features=LINEAR_FEATURES).fit(df_train)
        residuals = df_test["HWY"].values - model.predict(df_test)

        assert np.max(np.abs(residuals)) > 0.1

    def test_predict_preserves_order(self):
        df = make_linear_data(slope=-2.0, intercept=30.0)
        model = OLSModel().fit(df)

        df_shuffled = df.iloc[[5, 0, 19, 3]]
        predictions = model.predict(df_shuffled)

        np.testing.assert_allclose(predictions, -2.0 * df_shuffled["DISPL"].values + 30.0)

    def test_predict_empty_record_set(self):
        df = make_linear_data()
        model = OLSModel().fit(df)
        assert len(model.predict(df.iloc[:0])) == 0

    def test_fit_does_not_modify_input(self):
        df = make_linear_data()
        df_copy = df.copy()
        OLSModel().fit(df)
        pd.testing.assert_frame_equal(df, df_copy)


class TestOLSModelErrors:
    def test_too_few_records(self):
        """Fewer records than features + 1."""
        df = make_linear_data(n_obs=1)
        with pytest.raises(DegenerateDataError):
            OLSModel(features=LINEAR_FEATURES).fit(df)

    def test_too_few_records_quadratic(self):
        df = add_quadratic_feature(make_linear_data(n_obs=2))
        with pytest.raises(DegenerateDataError):
            OLSModel(features=QUADRATIC_FEATURES).fit(df)

    def test_constant_predictor(self):
        """A constant predictor is collinear with the intercept."""
        df = make_linear_data()
        df["DISPL"] = 2.0
        with pytest.raises(DegenerateDataError):
            OLSModel().fit(df)

    def test_collinear_features(self):
        df = make_linear_data()
        df["DISPL_X2"] = 2.0 * df["DISPL"]
        with pytest.raises(DegenerateDataError):
            OLSModel(features=["DISPL", "DISPL_X2"]).fit(df)

    def test_missing_feature_on_fit(self):
        df = make_linear_data()
        with pytest.raises(SchemaMismatchError):
            OLSModel(features=QUADRATIC_FEATURES).fit(df)

    def test_missing_derived_feature_on_predict(self):
        """A quadratic model cannot predict records lacking the derived column."""
        df_train = add_quadratic_feature(make_quadratic_data())
        df_test = make_quadratic_data(year=2011)

        model = OLSModel(features=QUADRATIC_FEATURES).fit(df_train)
        with pytest.raises(SchemaMismatchError, match="DISPL_SQ"):
            model.predict(df_test)

    def test_errors_are_value_errors(self):
        df = make_linear_data(n_obs=1)
        with pytest.raises(ValueError):
            OLSModel().fit(df)

    def test_predict_before_fit(self):
        with pytest.raises(ValueError, match="fitted"):
            OLSModel().predict(make_linear_data())

    def test_get_params_before_fit(self):
        with pytest.raises(ValueError, match="fitted"):
            OLSModel().get_params()

    def test_no_features(self):
        with pytest.raises(ValueError):
            OLSModel(features=[])


class TestOLSModelWithoutIntercept:
    def test_constant_predictor_identifiable(self):
        """Without an intercept a constant predictor is not collinear with anything."""
        df = make_linear_data()
        df["DISPL"] = 2.0
        model = OLSModel(regressor=LinearRegression(fit_intercept=False)).fit(df)
        coef, intercept = model.get_params()
        np.testing.assert_allclose(coef, [df["HWY"].mean() / 2.0], rtol=1e-10)
        assert intercept == 0.0

    def test_single_record(self):
        df = make_linear_data(n_obs=1)
        model = OLSModel(regressor=LinearRegression(fit_intercept=False)).fit(df)
        np.testing.assert_allclose(model.predict(df), df["HWY"].values, rtol=1e-10)

    def test_collinear_features(self):
        df = make_linear_data()
        df["DISPL_X2"] = 2.0 * df["DISPL"]
        model = OLSModel(features=["DISPL", "DISPL_X2"], regressor=LinearRegression(fit_intercept=False))
        with pytest.raises(DegenerateDataError, match="without an intercept"):
            model.fit(df)
