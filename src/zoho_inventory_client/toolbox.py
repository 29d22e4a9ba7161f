from typing import Dict, List, Optional
import logging

import pandas as pd


def records_to_dataframe(
    payload: Dict,
    key: str,
    columns: Optional[List[str]] = None
) -> pd.DataFrame:
    """
    Convert a Zoho list envelope into a pandas DataFrame.

    The input dictionary is expected to hold a list of records under
    ``key``, as returned by the list endpoints, e.g.
    ``{"code": 0, "message": "success", "items": [{...}, {...}]}``.

    Parameters
    ----------
    payload : Dict
        Decoded envelope returned by a list method.
    key : str
        Name of the list field (``items``, ``contacts``, ``taxes``, ...).
    columns : list of str, optional
        Columns to keep, in order. Columns missing from every record are
        added filled with NaN.

    Returns
    -------
    pandas.DataFrame
        One row per record. An empty list gives an empty DataFrame
        (with ``columns`` if provided).

    Raises
    ------
    KeyError
        If ``key`` is not present in the payload.
    """
    df = pd.DataFrame(payload[key])

    if columns is not None:
        df = df.reindex(columns=columns)

    return df


def enable_console_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    The library itself never configures logging; call this from scripts
    that want to see refreshes and transport errors on stderr.
    """
    logger = logging.getLogger("zoho_inventory_client")
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
