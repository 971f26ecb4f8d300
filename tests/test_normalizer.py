"""
Unit tests for DataNormalizer.

Includes property-based testing with hypothesis for the trim step.
"""

import logging

import numpy as np
import pandas as pd
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from marine_fish.normalizer import DataNormalizer
from marine_fish.schema import FLOAT_COLUMNS, TEXT_COLUMNS

from .conftest import fish_frame, fish_row

pytestmark = pytest.mark.unit


padded_text = st.one_of(
    st.none(),
    st.text(alphabet=st.sampled_from(list('ab XY\t\n')), max_size=12),
)


class TestTrim:
    """Tests for whitespace trimming"""

    def test_strips_all_text_columns(self):
        frame = fish_frame([fish_row(
            Species_Name='  Atlantic Cod ',
            Region='\tNorth Atlantic',
            Breeding_Season='Winter  ',
            Fishing_Method=' Trawling ',
            Overfishing_Risk=' YES',
            Water_Pollution_Level='Medium\n',
        )])

        DataNormalizer().trim_text_columns(frame)

        row = frame.iloc[0]
        assert row['Species_Name'] == 'Atlantic Cod'
        assert row['Region'] == 'North Atlantic'
        assert row['Breeding_Season'] == 'Winter'
        assert row['Fishing_Method'] == 'Trawling'
        assert row['Overfishing_Risk'] == 'YES'
        assert row['Water_Pollution_Level'] == 'Medium'

    def test_inner_whitespace_kept(self):
        frame = fish_frame([fish_row(Fishing_Method='  Hook and Line ')])

        DataNormalizer().trim_text_columns(frame)

        assert frame.loc[0, 'Fishing_Method'] == 'Hook and Line'

    def test_nulls_pass_through(self):
        frame = fish_frame([fish_row(Breeding_Season=None)])

        DataNormalizer().trim_text_columns(frame)

        assert pd.isna(frame.loc[0, 'Breeding_Season'])

    def test_counts_trimmed_values(self, raw_frame):
        normalizer = DataNormalizer()
        normalizer.trim_text_columns(raw_frame)

        trimmed = normalizer.get_stats()['trimmed_values']
        assert trimmed['Species_Name'] == 2
        assert trimmed['Breeding_Season'] == 1
        assert trimmed['Region'] == 0

    def test_numbers_left_alone(self, raw_frame):
        before = raw_frame['Fish_Population'].copy()

        DataNormalizer().trim_text_columns(raw_frame)

        pd.testing.assert_series_equal(raw_frame['Fish_Population'], before)

    @settings(max_examples=50, deadline=None)
    @given(st.lists(st.tuples(*[padded_text] * len(TEXT_COLUMNS)), min_size=1, max_size=8))
    def test_trim_is_idempotent(self, values):
        rows = [
            fish_row(**dict(zip(TEXT_COLUMNS, texts))) for texts in values
        ]
        normalizer = DataNormalizer()

        once = normalizer.trim_text_columns(fish_frame(rows))
        twice = normalizer.trim_text_columns(once.copy())

        pd.testing.assert_frame_equal(once, twice)

    @settings(max_examples=50, deadline=None)
    @given(st.lists(padded_text, min_size=1, max_size=8))
    def test_no_surrounding_whitespace_after_trim(self, names):
        frame = fish_frame([fish_row(Species_Name=name) for name in names])

        DataNormalizer().trim_text_columns(frame)

        for value in frame['Species_Name']:
            if isinstance(value, str):
                assert value == value.strip()


class TestColumnSelection:
    """Tests for explicit column lists"""

    def test_empty_text_columns_trims_nothing(self, raw_frame):
        normalizer = DataNormalizer(text_columns=[])

        normalizer.trim_text_columns(raw_frame)

        assert raw_frame.loc[0, 'Species_Name'] == '  Atlantic Cod '
        assert normalizer.get_stats()['trimmed_values'] == {}

    def test_empty_float_columns_converts_nothing(self, raw_frame):
        normalizer = DataNormalizer(float_columns=[])

        normalizer.coerce_float_columns(raw_frame)

        assert raw_frame['Average_Size(cm)'].dtype == np.int64

    def test_defaults_when_not_given(self):
        normalizer = DataNormalizer()

        assert normalizer.text_columns == TEXT_COLUMNS
        assert normalizer.float_columns == FLOAT_COLUMNS


class TestFloatCoercion:
    """Tests for the measurement column conversion"""

    def test_integers_become_floats(self):
        frame = fish_frame([fish_row(Average_Size=12, Water_Temperature=8)])
        assert frame['Average_Size(cm)'].dtype == np.int64

        DataNormalizer().coerce_float_columns(frame)

        assert frame['Average_Size(cm)'].dtype == np.float64
        assert frame['Water_Temperature(C)'].dtype == np.float64
        assert frame.loc[0, 'Average_Size(cm)'] == 12.0
        assert frame.loc[0, 'Water_Temperature(C)'] == 8.0

    def test_already_float_is_unchanged(self):
        frame = fish_frame([fish_row(Average_Size=12.5, Water_Temperature=8.25)])
        normalizer = DataNormalizer()

        normalizer.coerce_float_columns(frame)

        assert normalizer.get_stats()['float_columns_converted'] == []
        assert frame.loc[0, 'Average_Size(cm)'] == 12.5

    def test_coercion_is_idempotent(self, raw_frame):
        normalizer = DataNormalizer()

        once = normalizer.coerce_float_columns(raw_frame).copy()
        twice = normalizer.coerce_float_columns(raw_frame)

        pd.testing.assert_frame_equal(once, twice)


class TestNormalize:
    """Tests for the combined normalization step"""

    def test_modifies_in_place(self, raw_frame):
        result = DataNormalizer().normalize(raw_frame)

        assert result is raw_frame
        assert raw_frame.loc[0, 'Species_Name'] == 'Atlantic Cod'
        assert raw_frame['Water_Temperature(C)'].dtype == np.float64

    def test_row_count_unchanged(self, raw_frame):
        DataNormalizer().normalize(raw_frame)

        assert len(raw_frame) == 6

    def test_logs_statistics(self, raw_frame, caplog):
        with caplog.at_level(logging.INFO, logger='marine_fish.normalizer'):
            DataNormalizer().normalize(raw_frame)

        assert (
            "Normalization complete: 3 values trimmed, 2 columns converted to float"
            in caplog.text
        )
