"""
Tests for splitting record sets by model year.
"""

import pytest
import pandas as pd

from fuel_economy.utils import split_by_year, train_test_split


def make_df():
    return pd.DataFrame({
        'DISPL': [1.8, 3.5, 5.7, 2.4, 4.0],
        'CYL': [4, 6, 8, 4, 6],
        'HWY': [29.0, 25.0, 19.0, 31.0, 24.0],
        'YEAR': [2011, 2010, 2012, 2010, 2011],
    })


class TestSplitByYear:
    def test_years(self):
        partitions = split_by_year(make_df())
        assert list(partitions) == [2010, 2011, 2012]

    def test_order_preserved(self):
        partitions = split_by_year(make_df())
        assert list(partitions[2010]['DISPL']) == [3.5, 2.4]
        assert list(partitions[2010].index) == [0, 1]

    def test_input_unmodified(self):
        df = make_df()
        partitions = split_by_year(df)
        partitions[2011].loc[0, 'HWY'] = 0.0
        assert df.loc[0, 'HWY'] == 29.0


class TestTrainTestSplit:
    def test_split(self):
        df_train, df_test = train_test_split(make_df(), 2010, 2011)
        assert (df_train['YEAR'] == 2010).all()
        assert (df_test['YEAR'] == 2011).all()
        assert len(df_train) == 2
        assert len(df_test) == 2

    def test_unknown_year(self):
        with pytest.raises(ValueError, match='2009'):
            train_test_split(make_df(), 2009, 2011)
