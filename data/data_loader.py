"""数据加载模块 - 从CSV读取变量取值表"""
import os
import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def load_bindings(file_path, columns=None):
    """
    加载变量取值表，每列一个变量，每行一组取值。

    Parameters:
    - file_path: CSV文件路径
    - columns: 只保留这些列（按给定顺序），默认保留全部数值列

    Returns:
    - DataFrame，只含数值列，列顺序即代入顺序
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Bindings file not found: {file_path}")

    logger.info(f"Loading bindings from {file_path}")
    frame = pd.read_csv(file_path)

    if columns is not None:
        missing = [c for c in columns if c not in frame.columns]
        if missing:
            raise KeyError(f"Columns not found in {file_path}: {missing}")
        frame = frame[list(columns)]

    numeric_cols = frame.select_dtypes(include=[np.number]).columns
    dropped = [c for c in frame.columns if c not in numeric_cols]
    if dropped:
        logger.warning(f"Dropping non-numeric columns: {dropped}")
    frame = frame[numeric_cols]

    check_missing_values(frame)
    logger.info(f"Loaded bindings shape: {frame.shape}")
    return frame


def check_missing_values(frame):
    """统计缺失值；含缺失值的行在求值时会失败"""
    missing = frame.isnull().sum()
    total = int(missing.sum())
    if total:
        logger.warning(f"Bindings contain {total} missing values:")
        for col, count in missing[missing > 0].items():
            logger.warning(f"  {col}: {count}")
    return total
