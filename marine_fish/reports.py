"""
Population Reports Module
=========================
Five independent aggregate reports over the cleaned working copy:
R1) Population by region
R2) Overfishing risk trend by region
R3) Pollution level vs. population
R4) Breeding season frequency
R5) Water temperature vs. population by region

Null group keys form their own group. Means skip nulls.
"""

import logging
from typing import Callable, Dict

import pandas as pd

from .schema import (
    AVERAGE_SIZE,
    BREEDING_SEASON,
    FISH_POPULATION,
    OVERFISHING_RISK,
    REGION,
    WATER_POLLUTION_LEVEL,
    WATER_TEMPERATURE,
)

logger = logging.getLogger(__name__)


class PopulationReports:
    """
    Computes the R1-R5 aggregate reports. Never modifies its input.
    """

    AT_RISK_VALUE = 'YES'

    def __init__(self):
        """Initialize the report generator."""
        self.reports: Dict[str, pd.DataFrame] = {}

    @property
    def report_functions(self) -> Dict[str, Callable[[pd.DataFrame], pd.DataFrame]]:
        return {
            'population_by_region': self.population_by_region,
            'overfishing_risk_trend': self.overfishing_risk_trend,
            'pollution_vs_population': self.pollution_vs_population,
            'breeding_season_frequency': self.breeding_season_frequency,
            'temperature_vs_population': self.temperature_vs_population,
        }

    def generate_all(self, df: pd.DataFrame) -> Dict[str, pd.DataFrame]:
        """
        Run every report.

        Args:
            df: Cleaned working copy

        Returns:
            Dictionary mapping report name to its DataFrame
        """
        logger.info("=" * 60)
        logger.info("GENERATING POPULATION REPORTS")
        logger.info("=" * 60)

        self.reports = {}
        for name, func in self.report_functions.items():
            self.reports[name] = func(df)
            logger.info(f"  {name}: {len(self.reports[name]):,} groups")

        return self.reports

    def population_by_region(self, df: pd.DataFrame) -> pd.DataFrame:
        """R1: total and mean population per region, largest total first."""
        report = (
            df.groupby(REGION, dropna=False)[FISH_POPULATION]
            .agg(Total_Population='sum', Avg_Population='mean')
            .reset_index()
        )
        return self._order(report, 'Total_Population')

    def overfishing_risk_trend(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        R2: share of at-risk rows per region.

        Overfishing_Percentage is At_Risk_Species / Total_Species * 100,
        rounded half up to 2 decimals. Highest percentage first.
        """
        at_risk = df[OVERFISHING_RISK].eq(self.AT_RISK_VALUE).fillna(False).astype(int)

        report = (
            df.assign(_at_risk=at_risk)
            .groupby(REGION, dropna=False)
            .agg(
                Total_Species=(OVERFISHING_RISK, 'size'),
                At_Risk_Species=('_at_risk', 'sum'),
            )
            .reset_index()
        )
        # Integer arithmetic so halves round up, as SQL ROUND does
        total = report['Total_Species'].astype('int64')
        at_risk = report['At_Risk_Species'].astype('int64')
        report['Overfishing_Percentage'] = (
            (at_risk * 20000 + total) // (2 * total)
        ) / 100

        return self._order(report, 'Overfishing_Percentage')

    def pollution_vs_population(self, df: pd.DataFrame) -> pd.DataFrame:
        """R3: mean population and size per pollution level."""
        report = (
            df.groupby(WATER_POLLUTION_LEVEL, dropna=False)
            .agg(
                Avg_Population=(FISH_POPULATION, 'mean'),
                Avg_Size=(AVERAGE_SIZE, 'mean'),
            )
            .reset_index()
        )
        return self._order(report, 'Avg_Population')

    def breeding_season_frequency(self, df: pd.DataFrame) -> pd.DataFrame:
        """R4: row count per breeding season, most frequent first."""
        report = (
            df.groupby(BREEDING_SEASON, dropna=False)
            .size()
            .reset_index(name='Species_Count')
        )
        return self._order(report, 'Species_Count')

    def temperature_vs_population(self, df: pd.DataFrame) -> pd.DataFrame:
        """R5: mean population and water temperature per region, warmest first."""
        report = (
            df.groupby(REGION, dropna=False)
            .agg(
                Avg_Population=(FISH_POPULATION, 'mean'),
                Avg_Temperature=(WATER_TEMPERATURE, 'mean'),
            )
            .reset_index()
        )
        return self._order(report, 'Avg_Temperature')

    def get_reports(self) -> Dict[str, pd.DataFrame]:
        """Get the reports from the last run."""
        return self.reports

    @staticmethod
    def _order(report: pd.DataFrame, column: str) -> pd.DataFrame:
        # Stable sort keeps ties in group order
        return report.sort_values(
            column, ascending=False, kind='mergesort', na_position='last'
        ).reset_index(drop=True)
