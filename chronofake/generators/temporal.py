"""
Temporal Data Generator Module

Generates DataFrame columns of dates, times and durations from column
recipes:
- past / future: window of days around a reference point (default now)
- soon / recent: window of days around now
- between: explicit start and end
- duration: span between zero and a maximum number of days
"""

import pandas as pd
from typing import Optional, Dict, Any, Callable, Tuple
from datetime import datetime, timedelta
import logging

from ..clock import config_zone_provider, Clock
from ..config import Config, COLUMN_KINDS, get_default_config
from .duration import TimeDataSet

logger = logging.getLogger(__name__)


class TemporalGenerator:
    """
    Generates synthetic temporal columns

    Features:
    - One recipe per column, defaults taken from config.temporal
    - Optional strftime formatting per column or globally
    - Bounds validation of generated frames
    """

    def __init__(self, config: Optional[Config] = None, data_set: Optional[TimeDataSet] = None,
                 clock: Optional[Clock] = None):
        """
        Initialize temporal generator

        Args:
            config: Configuration object
            data_set: Generators to draw from (built from config if omitted)
            clock: Clock used when data_set is built here
        """
        self.config = config if config is not None else get_default_config()
        if data_set is None:
            data_set = TimeDataSet(
                zone_provider=config_zone_provider(self.config),
                clock=clock,
                seed=self.config.generation.seed,
            )
        self.data_set = data_set
        self.generated_at: Optional[datetime] = None

    def generate(
        self,
        columns: Optional[Dict[str, Dict[str, Any]]] = None,
        num_rows: Optional[int] = None
    ) -> pd.DataFrame:
        """
        Generate synthetic temporal data

        Args:
            columns: Column recipes (defaults to config.column_configs)
            num_rows: Number of rows (defaults to config.generation.num_rows)

        Returns:
            DataFrame with one column per recipe
        """
        if columns is None:
            columns = self.config.column_configs
        if num_rows is None:
            num_rows = self.config.generation.num_rows

        logger.info(f"Generating {num_rows} rows for {len(columns)} temporal columns")

        self.generated_at = self.data_set.local.now()
        result = pd.DataFrame(index=range(num_rows))

        for col, recipe in columns.items():
            sample = self._sampler(col, recipe)
            values = [sample() for _ in range(num_rows)]

            if recipe['kind'] == 'duration':
                result[col] = pd.to_timedelta(values)
                continue

            dates = pd.Series(pd.to_datetime(values), index=result.index)
            date_format = self._format_for(recipe)
            result[col] = dates.dt.strftime(date_format) if date_format else dates

        logger.info(f"Generated temporal data: {result.shape}")
        return result

    def _format_for(self, recipe: Dict[str, Any]) -> Optional[str]:
        return recipe.get('format', self.config.temporal.date_format)

    def _sampler(self, col: str, recipe: Dict[str, Any]) -> Callable[[], Any]:
        """
        Resolve a recipe into a zero-argument sampling function

        Args:
            col: Column name (for error messages)
            recipe: Column recipe

        Returns:
            Callable producing one value per call
        """
        kind = recipe.get('kind')
        defaults = self.config.temporal
        local = self.data_set.local

        if kind == 'past':
            days = int(recipe.get('days', defaults.past_days))
            reference = self._to_local(recipe.get('reference'))
            return lambda: local.past(days, reference)

        if kind == 'future':
            days = int(recipe.get('days', defaults.future_days))
            reference = self._to_local(recipe.get('reference'))
            return lambda: local.future(days, reference)

        if kind == 'soon':
            days = int(recipe.get('days', defaults.soon_days))
            return lambda: local.soon(days)

        if kind == 'recent':
            days = int(recipe.get('days', defaults.recent_days))
            return lambda: local.recent(days)

        if kind == 'between':
            if 'start' not in recipe or 'end' not in recipe:
                raise ValueError(f"{col}: between needs start and end")
            start = self._to_local(recipe['start'])
            end = self._to_local(recipe['end'])
            return lambda: local.between(start, end)

        if kind == 'duration':
            maximum = timedelta(days=float(recipe.get('maximum_days', defaults.duration_max_days)))
            return lambda: self.data_set.duration(maximum)

        raise ValueError(f"{col}: unknown kind '{kind}', expected one of {COLUMN_KINDS}")

    def _to_local(self, value: Any) -> Optional[datetime]:
        """Parse a recipe point into a naive local datetime"""
        if value is None:
            return None

        point = pd.Timestamp(value).to_pydatetime()
        if point.tzinfo is not None:
            point = point.astimezone(self.data_set.local.zone_provider()).replace(tzinfo=None)
        return point

    def _bounds(self, recipe: Dict[str, Any], now: datetime) -> Tuple[Any, Any]:
        """Closed interval every value of a recipe must fall into"""
        kind = recipe['kind']
        defaults = self.config.temporal
        started = self.generated_at if self.generated_at is not None else now

        if kind == 'past':
            days = timedelta(days=int(recipe.get('days', defaults.past_days)))
            reference = self._to_local(recipe.get('reference'))
            if reference is not None:
                return reference - days, reference
            return started - days, now

        if kind == 'future':
            days = timedelta(days=int(recipe.get('days', defaults.future_days)))
            reference = self._to_local(recipe.get('reference'))
            if reference is not None:
                return reference, reference + days
            return started, now + days

        if kind == 'soon':
            return started, now + timedelta(days=int(recipe.get('days', defaults.soon_days)))

        if kind == 'recent':
            return started - timedelta(days=int(recipe.get('days', defaults.recent_days))), now

        if kind == 'between':
            start = self._to_local(recipe['start'])
            end = self._to_local(recipe['end'])
            return min(start, end), max(start, end)

        return timedelta(0), timedelta(days=float(recipe.get('maximum_days', defaults.duration_max_days)))

    def validate(
        self,
        generated_data: pd.DataFrame,
        columns: Optional[Dict[str, Dict[str, Any]]] = None
    ) -> Dict[str, Any]:
        """
        Validate generated temporal data

        Args:
            generated_data: Generated data to validate
            columns: Recipes the data was generated from

        Returns:
            Validation results
        """
        if columns is None:
            columns = self.config.column_configs

        results: Dict[str, Any] = {
            "valid": True,
            "errors": [],
            "warnings": []
        }
        now = self.data_set.local.now()

        for col, recipe in columns.items():
            if col not in generated_data.columns:
                results["warnings"].append(f"{col}: Missing from generated data")
                continue

            try:
                lower, upper = self._bounds(recipe, now)

                if recipe['kind'] == 'duration':
                    values = pd.Series(pd.to_timedelta(generated_data[col]))
                else:
                    date_format = self._format_for(recipe)
                    values = pd.Series(pd.to_datetime(generated_data[col], format=date_format))
                    if date_format:
                        # Compare at the resolution the format keeps
                        lower = datetime.strptime(lower.strftime(date_format), date_format)
                        upper = datetime.strptime(upper.strftime(date_format), date_format)

                if values.isna().any():
                    results["errors"].append(f"{col}: Contains invalid values")
                    results["valid"] = False
                    continue

                outside = ((values < lower) | (values > upper)).sum()
                if outside > 0:
                    results["errors"].append(
                        f"{col}: {outside} values outside [{lower}, {upper}]"
                    )
                    results["valid"] = False

            except (ValueError, TypeError, KeyError) as e:
                results["errors"].append(f"{col}: Failed to validate - {str(e)}")
                results["valid"] = False

        return results

