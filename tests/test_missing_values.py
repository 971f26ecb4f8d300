"""
Unit tests for MissingValueHandler.
"""

import numpy as np
import pandas as pd
import pytest

from marine_fish.data_loader import FishDataLoader
from marine_fish.missing_values import MissingValueHandler

from .conftest import fish_frame, fish_row

pytestmark = pytest.mark.unit


@pytest.fixture
def working(raw_frame):
    return FishDataLoader().load_frame(raw_frame)


class TestAudit:
    """Tests for the null audit"""

    def test_one_count_per_column(self, working):
        audit = MissingValueHandler().audit(working)

        assert len(audit) == 1
        assert list(audit.columns) == [
            'Null_Species_Name',
            'Null_Region',
            'Null_Breeding_Season',
            'Null_Fishing_Method',
            'Null_Fish_Population',
            'Null_Average_Size',
            'Null_Overfishing_Risk',
            'Null_Water_Temperature',
            'Null_Water_Pollution_Level',
        ]

    def test_counts(self, working):
        audit = MissingValueHandler().audit(working).iloc[0]

        assert audit['Null_Breeding_Season'] == 1
        assert audit['Null_Fish_Population'] == 1
        assert audit['Null_Water_Pollution_Level'] == 1
        assert audit['Null_Species_Name'] == 0

    def test_audit_does_not_modify(self, working):
        snapshot = working.copy(deep=True)

        MissingValueHandler().audit(working)

        pd.testing.assert_frame_equal(working, snapshot)


class TestRemediate:
    """Tests for the two default substitutions"""

    def test_population_defaults_to_zero(self, working):
        MissingValueHandler().remediate(working)

        assert working['Fish_Population'].isna().sum() == 0
        assert working.loc[3, 'Fish_Population'] == 0

    def test_breeding_season_defaults_to_unknown(self, working):
        MissingValueHandler().remediate(working)

        assert working['Breeding_Season'].isna().sum() == 0
        assert working.loc[3, 'Breeding_Season'] == 'UNKNOWN'

    def test_other_columns_not_filled(self, working):
        MissingValueHandler().remediate(working)

        assert pd.isna(working.loc[4, 'Water_Pollution_Level'])

    def test_fill_counts(self, working):
        filled = MissingValueHandler().remediate(working)

        assert filled == {'Fish_Population': 1, 'Breeding_Season': 1}

    def test_existing_values_kept(self, working):
        MissingValueHandler().remediate(working)

        assert working.loc[0, 'Fish_Population'] == 1200
        assert working.loc[0, 'Breeding_Season'] == 'Winter'

    def test_every_row_filled(self):
        frame = fish_frame([
            fish_row(Fish_Population=None, Breeding_Season=None)
            for _ in range(5)
        ])
        working = FishDataLoader().load_frame(frame)

        MissingValueHandler().remediate(working)

        assert (working['Fish_Population'] == 0).all()
        assert (working['Breeding_Season'] == 'UNKNOWN').all()

    def test_numeric_season_column_takes_text_default(self):
        frame = fish_frame([fish_row(Breeding_Season=np.nan) for _ in range(3)])
        assert frame['Breeding_Season'].dtype == np.float64

        MissingValueHandler().remediate(frame)

        assert frame['Breeding_Season'].tolist() == ['UNKNOWN'] * 3

    def test_nothing_to_fill(self):
        working = FishDataLoader().load_frame(fish_frame([fish_row()]))

        filled = MissingValueHandler().remediate(working)

        assert filled == {'Fish_Population': 0, 'Breeding_Season': 0}
