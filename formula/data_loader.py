"""数据加载模块 - 为批量求值读取CSV"""
import logging

import pandas as pd

logger = logging.getLogger(__name__)


def load_dataset(file_path, index_column=None):
    """
    加载CSV数据集，列名将作为表达式中的变量名。

    Parameters:
    - file_path: CSV文件路径
    - index_column: 作为索引的列名（可选）

    Returns:
    - DataFrame
    """
    logger.info(f"Loading dataset from {file_path}")
    dataset = pd.read_csv(file_path)
    # 列名两端的空白会导致变量名无法匹配
    dataset.columns = [str(col).strip() for col in dataset.columns]

    if index_column is not None:
        if index_column not in dataset.columns:
            raise ValueError(f"Index column '{index_column}' not found in dataset.")
        dataset.set_index(index_column, inplace=True)

    logger.info(f"Dataset shape: {dataset.shape}")
    return dataset
