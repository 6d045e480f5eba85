"""
Timeline projection.

Responsibility: extrapolate how long sieving larger bounds would take if
each extra bit doubled the running time. Pure arithmetic and formatting.
"""

import math
import pandas as pd
from typing import Dict, List

from .errors import ConfigurationError

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY
AGE_OF_UNIVERSE_YEARS = 13_700_000_000
SUN_RED_GIANT_YEARS = 5_000_000_000

MAX_BITS = 256
# Past this many bits only every STRIDE-th projection is kept
DENSE_UNTIL_BITS = 80
STRIDE = 8

SUN_MILESTONE = "5 billion years: Our Sun expanded into a Red Giant and baked Earth."
UNIVERSE_MILESTONE = f"{AGE_OF_UNIVERSE_YEARS:,} years: Age of our Universe."


def comma_combine(items: List[str], use_and: bool = True) -> str:
    """
    Join items as English prose.

    >>> comma_combine(['a', 'b', 'c'])
    'a, b, and c'
    """
    combined = ''
    for i, item in enumerate(items):
        if combined:
            if len(items) > 2:
                combined += ','
            combined += ' '
            if use_and and i == len(items) - 1:
                combined += 'and '
        combined += item
    return combined


def split_duration(seconds: float) -> Dict[str, int]:
    """
    Split a duration into whole universes, years, days, hours, minutes, seconds.

    Years only roll over into universes (13.7 billion years each) once at
    least one full universe has elapsed.
    """
    total_years, rem = divmod(seconds, SECONDS_PER_YEAR)
    universes, years = 0, total_years
    if total_years >= AGE_OF_UNIVERSE_YEARS:
        universes, years = divmod(total_years, AGE_OF_UNIVERSE_YEARS)

    days, rem = divmod(rem, SECONDS_PER_DAY)
    hours, rem = divmod(rem, 60 * 60)
    minutes, secs = divmod(rem, 60)

    return {
        'universes': int(universes),
        'years': int(years),
        'days': int(days),
        'hours': int(hours),
        'minutes': int(minutes),
        'seconds': int(math.floor(secs)),
    }


def _plural(value: int, unit: str) -> str:
    return f"{value:,} {unit}" + ('' if value == 1 else 's')


def format_duration(parts: Dict[str, int]) -> str:
    segments = []
    if parts['universes'] >= 1:
        segments.append(_plural(parts['universes'], 'universe') + ' (13.7b)')
    for unit in ('year', 'day', 'hour', 'minute', 'second'):
        value = parts[unit + 's']
        if value >= 1:
            segments.append(_plural(value, unit))

    if not segments:
        return 'less than a second'
    return comma_combine(segments)


def project_timelines(bits: int, total_seconds: float, max_bits: int = MAX_BITS) -> pd.DataFrame:
    """
    Project sieve running time for every larger bound up to max_bits.

    Parameters
    ----------
    bits : int
        Bit size of the bound that was actually sieved.
    total_seconds : float
        Measured running time for that bound.
    max_bits : int
        Largest bit size to project.

    Returns
    -------
    pd.DataFrame
        Columns: bits, seconds, universes, years, days, hours, minutes,
        secs, duration, milestone. milestone is empty except on the first
        row past each of the two milestones.
    """
    if not 1 <= bits <= max_bits:
        raise ConfigurationError(f"bits must be in [1, {max_bits}], got {bits}")
    if total_seconds < 0:
        raise ConfigurationError(f"total_seconds must be >= 0, got {total_seconds}")

    past_sun_death = False
    past_universe_age = False
    rows = []

    seconds = float(total_seconds)
    for i in range(1, max_bits - bits + 1):
        seconds *= 2

        if i > DENSE_UNTIL_BITS - bits and i % STRIDE != 0:
            continue

        parts = split_duration(seconds)

        milestones = []
        if parts['years'] > SUN_RED_GIANT_YEARS and not past_sun_death:
            milestones.append(SUN_MILESTONE)
            past_sun_death = True
        if parts['universes'] >= 1 and not past_universe_age:
            milestones.append(UNIVERSE_MILESTONE)
            past_universe_age = True

        rows.append({
            'bits': i + bits,
            'seconds': seconds,
            'universes': parts['universes'],
            'years': parts['years'],
            'days': parts['days'],
            'hours': parts['hours'],
            'minutes': parts['minutes'],
            'secs': parts['seconds'],
            'duration': format_duration(parts),
            'milestone': ' '.join(milestones),
        })

    columns = ['bits', 'seconds', 'universes', 'years', 'days', 'hours',
               'minutes', 'secs', 'duration', 'milestone']
    return pd.DataFrame(rows, columns=columns)
