"""
Dataset Schema
==============
Column names of the marine fish dataset, in source order.
"""

SPECIES_NAME = 'Species_Name'
REGION = 'Region'
BREEDING_SEASON = 'Breeding_Season'
FISHING_METHOD = 'Fishing_Method'
FISH_POPULATION = 'Fish_Population'
AVERAGE_SIZE = 'Average_Size(cm)'
OVERFISHING_RISK = 'Overfishing_Risk'
WATER_TEMPERATURE = 'Water_Temperature(C)'
WATER_POLLUTION_LEVEL = 'Water_Pollution_Level'

# Source order; also the business key used for duplicate detection
COLUMNS = [
    SPECIES_NAME,
    REGION,
    BREEDING_SEASON,
    FISHING_METHOD,
    FISH_POPULATION,
    AVERAGE_SIZE,
    OVERFISHING_RISK,
    WATER_TEMPERATURE,
    WATER_POLLUTION_LEVEL,
]

BUSINESS_KEY = list(COLUMNS)

TEXT_COLUMNS = [
    SPECIES_NAME,
    REGION,
    BREEDING_SEASON,
    FISHING_METHOD,
    OVERFISHING_RISK,
    WATER_POLLUTION_LEVEL,
]

FLOAT_COLUMNS = [AVERAGE_SIZE, WATER_TEMPERATURE]

NON_NEGATIVE_COLUMNS = [FISH_POPULATION, AVERAGE_SIZE, WATER_TEMPERATURE]

RISK_VALUES = ('YES', 'NO')
