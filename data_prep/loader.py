from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd


def load_records(path: Union[str, Path], *, sheet_name: Union[str, int] = 0) -> pd.DataFrame:
    """
    Load exported financial records (retirement accounts, assets, debts, income).
    CSV by default; .xlsx/.xls go through read_excel.
    """
    p = Path(path)
    if p.suffix.lower() in (".xlsx", ".xls"):
        return pd.read_excel(p, sheet_name=sheet_name)
    return pd.read_csv(p)
