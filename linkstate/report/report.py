# -*- coding: utf-8 -*-
from os.path import isfile
from pathlib import Path
from typing import Optional, Union

import pandas as pd


class Report:
    def __init__(self):
        """
        Initializes the Report class and sets pandas display options.
        """
        pd.set_option('display.max_rows', None)
        pd.set_option('display.max_columns', None)
        pd.set_option("expand_frame_repr", False)

    @staticmethod
    def read(csv_file: Union[str, Path], delimiter: str = '\t') -> Optional[pd.DataFrame]:
        """
        Reads a CSV file into a DataFrame.
        :param csv_file: The path to the CSV file.
        :param delimiter: The delimiter used in the CSV file.
        :return: The DataFrame, or None if the file does not exist or is empty.
        """
        if not isfile(csv_file):
            return None
        try:
            return pd.read_csv(csv_file, delimiter=delimiter)
        except pd.errors.EmptyDataError:
            return None

    @staticmethod
    def save_csv(df: pd.DataFrame, csv_path: Union[str, Path], delimiter: str = '\t') -> str:
        """
        Saves a DataFrame to a CSV file, creating parent directories.
        :param df: The DataFrame to save.
        :param csv_path: The path to the CSV file.
        :param delimiter: The delimiter to use in the file.
        :return: The path to the saved CSV file.
        """
        Path(csv_path).parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(csv_path, index=False, sep=delimiter)
        return str(csv_path)

    @staticmethod
    def value_count(df: pd.DataFrame, column_name: str) -> pd.Series:
        """
        Returns the count of unique values in a specified column of a DataFrame.
        :param df: The DataFrame to analyze.
        :param column_name: The name of the column to count unique values in.
        :return: Series with the count of each value.
        """
        return df[column_name].value_counts()
