"""
Mixin for components that run stage-keyed transformer lists over DataFrames.
"""

import pandas as pd


class TransformableMixin:
    """
    Adds _apply_transformers() to components holding a `transformers` dict.

    The dict maps a stage name ('before', 'after') to a list of transformers.
    A transformer is either a DataFrameFilter (has .filter()), an object with
    .format(), or any plain callable taking and returning a DataFrame.
    """

    transformers: dict

    def _apply_transformers(self, df: pd.DataFrame, stage: str) -> pd.DataFrame:
        """
        Run every transformer registered for a stage, in order.

        Args:
            df: Input DataFrame
            stage: Stage name, e.g. 'before' or 'after'

        Returns:
            pd.DataFrame: Transformed DataFrame

        Raises:
            TypeError: If a transformer is not usable or returns a non-DataFrame
        """
        for transformer in self.transformers.get(stage, []):
            if hasattr(transformer, 'filter'):
                df = transformer.filter(df)
            elif hasattr(transformer, 'format'):
                df = transformer.format(df)
            elif callable(transformer):
                df = transformer(df)
            else:
                raise TypeError(
                    f"Transformer must be a filter, formatter or callable, "
                    f"got {type(transformer).__name__}"
                )

            if not isinstance(df, pd.DataFrame):
                raise TypeError(
                    f"Transformer {type(transformer).__name__} must return a DataFrame, "
                    f"got {type(df).__name__}"
                )

        return df
