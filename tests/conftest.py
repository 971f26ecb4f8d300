"""
Pytest configuration and fixtures for marine fish pipeline tests
"""
import pandas as pd
import pytest

from marine_fish.schema import COLUMNS


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single component"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the full pipeline"
    )


BASE_ROW = {
    'Species_Name': 'Atlantic Cod',
    'Region': 'North Atlantic',
    'Breeding_Season': 'Winter',
    'Fishing_Method': 'Trawling',
    'Fish_Population': 1200,
    'Average_Size(cm)': 80,
    'Overfishing_Risk': 'YES',
    'Water_Temperature(C)': 8,
    'Water_Pollution_Level': 'Medium',
}


def fish_row(**overrides):
    """Build one record; keyword names use the column name without units."""
    aliases = {
        'Average_Size': 'Average_Size(cm)',
        'Water_Temperature': 'Water_Temperature(C)',
    }
    row = dict(BASE_ROW)
    for key, value in overrides.items():
        row[aliases.get(key, key)] = value
    return row


def fish_frame(rows):
    """Build a DataFrame with the dataset columns in source order."""
    return pd.DataFrame(rows, columns=COLUMNS)


@pytest.fixture
def raw_frame() -> pd.DataFrame:
    """
    Small dirty dataset: padded text, one exact duplicate pair, nulls in
    the defaulted columns and elsewhere, negative values.
    """
    return fish_frame([
        fish_row(Species_Name='  Atlantic Cod '),
        fish_row(Species_Name='  Atlantic Cod '),
        fish_row(Species_Name='Bluefin Tuna', Region='Mediterranean',
                 Breeding_Season=' Summer', Fishing_Method='Longline',
                 Fish_Population=450, Average_Size=200,
                 Water_Temperature=22, Water_Pollution_Level='High'),
        fish_row(Species_Name='Pacific Salmon', Region='North Pacific',
                 Breeding_Season=None, Fish_Population=None,
                 Overfishing_Risk='NO', Water_Temperature=10),
        fish_row(Species_Name='Mackerel', Fish_Population=-5,
                 Overfishing_Risk='NO', Water_Pollution_Level=None),
        fish_row(Species_Name='Toothfish', Region='Southern Ocean',
                 Overfishing_Risk='NO', Water_Temperature=-1),
    ])


@pytest.fixture
def csv_path(tmp_path, raw_frame):
    """The raw dataset written to a CSV file."""
    path = tmp_path / 'marine_fish_data.csv'
    raw_frame.to_csv(path, index=False)
    return path
